"""
Event routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from weddingsite.db.session import get_db
from weddingsite.schemas.event import (
    Customization, EventCreate, EventUpdate,
    EventResponse, EventCreatedResponse, EventListResponse
)
from weddingsite.core.security import SessionIdentity
from weddingsite.services import event_service
from weddingsite.api.dependencies import get_session_identity

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=EventListResponse)
def list_events(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    """List events, newest first."""
    events, has_more = event_service.list_events(page, db)
    return {"events": events, "has_more": has_more}


@router.post("", response_model=EventCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    event_data: EventCreate,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Create an event owned by the signed-in user."""
    return event_service.create_event(identity, event_data, db)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: int, db: Session = Depends(get_db)):
    """Public event page; the invitation code is never included."""
    return event_service.get_event_or_404(event_id, db)


@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: int,
    event_data: EventUpdate,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Update event details (creator only)."""
    return event_service.update_event(identity, event_id, event_data, db)


@router.put("/{event_id}/customize", response_model=EventResponse)
def customize_event(
    event_id: int,
    customization: Customization,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Replace the event's customization block (creator only)."""
    return event_service.replace_customization(identity, event_id, customization, db)
