"""
Status feed routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from weddingsite.db.session import get_db
from weddingsite.schemas.status import StatusCreate, CommentCreate, StatusResponse, StatusListResponse
from weddingsite.core.security import SessionIdentity
from weddingsite.services import feed_service
from weddingsite.api.dependencies import get_session_identity

router = APIRouter(prefix="/statuses", tags=["statuses"])


@router.get("", response_model=StatusListResponse)
def list_statuses(page: int = Query(1, ge=1), db: Session = Depends(get_db)):
    """Get the feed (latest first, paginated)."""
    statuses, has_more = feed_service.list_statuses(page, db)
    return {"statuses": statuses, "has_more": has_more}


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
def create_status(
    status_data: StatusCreate,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Post a status as the signed-in user."""
    return feed_service.create_status(identity, status_data, db)


@router.post("/{status_id}/like", response_model=StatusResponse)
def toggle_like(
    status_id: int,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Like the status, or unlike it when already liked."""
    return feed_service.toggle_like(identity, status_id, db)


@router.post("/{status_id}/comment", response_model=StatusResponse)
def add_comment(
    status_id: int,
    comment: CommentCreate,
    identity: SessionIdentity = Depends(get_session_identity),
    db: Session = Depends(get_db)
):
    """Append a comment as the signed-in user."""
    return feed_service.add_comment(identity, status_id, comment.content, db)
