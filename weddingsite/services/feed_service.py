"""
Feed engine: status pagination, creation, like toggling and comments.
"""
import logging
from typing import List, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query, selectinload
from sqlalchemy.orm.exc import StaleDataError
from weddingsite.core.config import settings
from weddingsite.core.exceptions import NotFoundError
from weddingsite.core.security import SessionIdentity
from weddingsite.core.utils import has_more_pages, page_offset
from weddingsite.models.status import Status, StatusComment, StatusLike
from weddingsite.schemas.status import StatusCreate
from weddingsite.services.validation import validate_content, validate_image_urls

logger = logging.getLogger(__name__)


def _resolved_statuses(db: Session) -> Query:
    """Status query with author, likes and comment authors loaded."""
    return db.query(Status).options(
        selectinload(Status.author),
        selectinload(Status.like_entries),
        selectinload(Status.comments).selectinload(StatusComment.author),
    )


def get_status_or_404(status_id: int, db: Session) -> Status:
    status = _resolved_statuses(db).filter(Status.id == status_id).first()
    if not status:
        raise NotFoundError("Status not found")
    return status


def list_statuses(page: int, db: Session, page_size: int = None) -> Tuple[List[Status], bool]:
    """
    One page of the feed, newest first.

    `has_more` is true when statuses exist past this page; pages beyond the
    end are empty.
    """
    page_size = page_size or settings.STATUS_PAGE_SIZE
    total = db.query(Status).count()
    statuses = _resolved_statuses(db).order_by(
        Status.created_at.desc(), Status.id.desc()
    ).offset(page_offset(page, page_size)).limit(page_size).all()
    return statuses, has_more_pages(total, page, page_size)


def create_status(identity: SessionIdentity, status_data: StatusCreate, db: Session) -> Status:
    """Post a status authored by the session user."""
    validate_content(status_data.content)
    validate_image_urls(status_data.images)

    status = Status(
        content=status_data.content,
        author_id=identity.id,
        images=list(status_data.images),
    )
    db.add(status)
    db.commit()

    logger.info(f"User {identity.id} posted status {status.id}")
    return get_status_or_404(status.id, db)


def toggle_like(identity: SessionIdentity, status_id: int, db: Session) -> Status:
    """
    Unlike when the session user already likes the status, like otherwise.

    Losing a race against the same user's concurrent toggle returns the
    stored state instead of failing.
    """
    get_status_or_404(status_id, db)

    like = db.query(StatusLike).filter(
        StatusLike.status_id == status_id,
        StatusLike.user_id == identity.id
    ).first()

    if like:
        db.delete(like)
    else:
        db.add(StatusLike(status_id=status_id, user_id=identity.id))
    try:
        db.commit()
    except (IntegrityError, StaleDataError):
        # A concurrent toggle by the same user already reached this state
        db.rollback()
        logger.warning(f"Concurrent like toggle by user {identity.id} on status {status_id}")

    return get_status_or_404(status_id, db)


def add_comment(identity: SessionIdentity, status_id: int, content: str, db: Session) -> Status:
    """Append a comment by the session user, stamped with the server time."""
    validate_content(content)
    get_status_or_404(status_id, db)

    db.add(StatusComment(status_id=status_id, author_id=identity.id, content=content))
    db.commit()

    return get_status_or_404(status_id, db)
