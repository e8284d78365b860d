"""
Event service: creation, listing and the creator-only authorization guard.
"""
import logging
import secrets
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel
from sqlalchemy.orm import Session
from weddingsite.core.config import settings
from weddingsite.core.exceptions import ForbiddenError, NotFoundError, UnauthorizedError
from weddingsite.core.security import SessionIdentity
from weddingsite.core.utils import has_more_pages, page_offset
from weddingsite.models.event import Event
from weddingsite.schemas.event import Customization, EventCreate, EventUpdate
from weddingsite.services.validation import validate_customization, validate_event_fields

logger = logging.getLogger(__name__)

# Fields no update payload may overwrite
PROTECTED_EVENT_FIELDS = frozenset({"id", "creator", "creator_id", "invitation_code"})


def generate_invitation_code(db: Session) -> str:
    """Random invitation code not used by any other event."""
    while True:
        code = secrets.token_hex(settings.INVITATION_CODE_BYTES).upper()
        if not db.query(Event.id).filter(Event.invitation_code == code).first():
            return code


def get_event_or_404(event_id: int, db: Session) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise NotFoundError("Event not found")
    return event


def list_events(page: int, db: Session) -> Tuple[List[Event], bool]:
    """Page of events, newest first."""
    page_size = settings.EVENT_PAGE_SIZE
    query = db.query(Event)
    total = query.count()
    events = query.order_by(Event.created_at.desc(), Event.id.desc()).offset(
        page_offset(page, page_size)
    ).limit(page_size).all()
    return events, has_more_pages(total, page, page_size)


def list_events_by_creator(user_id: int, db: Session) -> List[Event]:
    return db.query(Event).filter(Event.creator_id == user_id).order_by(Event.date, Event.id).all()


def create_event(identity: SessionIdentity, event_data: EventCreate, db: Session) -> Event:
    """Create an event owned by the session user."""
    validate_event_fields(title=event_data.title, venue=event_data.venue, schedule=event_data.schedule)
    validate_customization(event_data.customization)

    event = Event(
        title=event_data.title.strip(),
        date=event_data.date,
        time=event_data.time,
        description=event_data.description,
        creator_id=identity.id,
        invitation_code=generate_invitation_code(db),
        venue=event_data.venue.model_dump(),
        contact_info=event_data.contact_info.model_dump(),
        schedule=[item.model_dump() for item in event_data.schedule],
        gift_info=event_data.gift_info.model_dump(),
        customization=event_data.customization.model_dump(mode="json"),
    )
    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info(f"User {identity.id} created event {event.id}")
    return event


def require_event_owner(identity: Optional[SessionIdentity], event_id: int, db: Session) -> Event:
    """
    Authorization guard for event mutations.

    No session is unauthorized, a missing event is not found, and a session
    that is not the event's creator is forbidden.
    """
    if identity is None:
        raise UnauthorizedError("Unauthorized")

    event = get_event_or_404(event_id, db)

    if event.creator_id != identity.id:
        logger.warning(f"User {identity.id} denied write access to event {event_id}")
        raise ForbiddenError("Only the event creator can modify this event")

    return event


def strip_protected_fields(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Drop identity, ownership and invitation fields from an update payload."""
    return {field: value for field, value in updates.items() if field not in PROTECTED_EVENT_FIELDS}


def update_values(event_data: EventUpdate) -> Dict[str, Any]:
    """
    Top-level fields the client sent, with embedded blocks dumped whole.

    Blocks are stored complete so every stored venue or schedule item carries
    all of its keys, defaults included.
    """
    updates = {}
    for field in event_data.model_fields_set:
        value = getattr(event_data, field)
        if value is None:
            continue
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json")
        elif isinstance(value, list):
            value = [item.model_dump(mode="json") if isinstance(item, BaseModel) else item for item in value]
        updates[field] = value
    return updates


def update_event(
    identity: Optional[SessionIdentity],
    event_id: int,
    event_data: EventUpdate,
    db: Session,
) -> Event:
    """Apply a partial update to an event owned by the session user."""
    event = require_event_owner(identity, event_id, db)

    validate_event_fields(title=event_data.title, venue=event_data.venue, schedule=event_data.schedule)
    updates = strip_protected_fields(update_values(event_data))

    for field, value in updates.items():
        if field == "title":
            value = value.strip()
        setattr(event, field, value)

    db.commit()
    db.refresh(event)
    return event


def replace_customization(
    identity: Optional[SessionIdentity],
    event_id: int,
    customization: Customization,
    db: Session,
) -> Event:
    """Replace the whole customization block of an event owned by the session user."""
    event = require_event_owner(identity, event_id, db)
    validate_customization(customization)

    event.customization = customization.model_dump(mode="json")
    db.commit()
    db.refresh(event)
    return event
