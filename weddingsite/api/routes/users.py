"""
User profile routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from weddingsite.db.session import get_db
from weddingsite.schemas.user import UserResponse, UserUpdate, UserListResponse
from weddingsite.schemas.event import EventResponse
from weddingsite.core.security import SessionIdentity
from weddingsite.services.user_service import get_user_or_404, list_users, update_profile
from weddingsite.services.event_service import list_events_by_creator
from weddingsite.api.dependencies import get_session_identity

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def get_users(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    """List public user profiles."""
    users, has_more = list_users(page, db)
    return {"users": users, "has_more": has_more}


@router.put("/me", response_model=UserResponse)
def update_current_user(
    user_data: UserUpdate,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Edit the signed-in user's profile."""
    return update_profile(identity, user_data, db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a public profile by ID."""
    return get_user_or_404(user_id, db)


@router.get("/{user_id}/events", response_model=List[EventResponse])
def get_user_events(user_id: int, db: Session = Depends(get_db)):
    """Events created by a user."""
    get_user_or_404(user_id, db)
    return list_events_by_creator(user_id, db)
