"""
User profile service.
"""
from typing import List, Tuple
from sqlalchemy.orm import Session
from weddingsite.core.config import settings
from weddingsite.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from weddingsite.core.security import SessionIdentity
from weddingsite.core.utils import has_more_pages, page_offset
from weddingsite.models.user import User
from weddingsite.schemas.user import UserUpdate
from weddingsite.services.validation import is_valid_url


def get_user_or_404(user_id: int, db: Session) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def list_users(page: int, db: Session) -> Tuple[List[User], bool]:
    """Page of users ordered by signup, oldest first."""
    page_size = settings.USER_PAGE_SIZE
    query = db.query(User)
    total = query.count()
    users = query.order_by(User.id).offset(page_offset(page, page_size)).limit(page_size).all()
    return users, has_more_pages(total, page, page_size)


def update_profile(identity: SessionIdentity, user_data: UserUpdate, db: Session) -> User:
    """Edit the signed-in user's own profile fields."""
    user = db.query(User).filter(User.id == identity.id).first()
    if not user:
        # Token outlived its account
        raise UnauthorizedError("Invalid token")

    updates = user_data.model_dump(exclude_unset=True, exclude_none=True)
    if updates.get("profile_photo") and not is_valid_url(updates["profile_photo"]):
        raise ValidationError("Validation failed", details={"profile_photo": "Please enter a valid URL"})

    for field, value in updates.items():
        setattr(user, field, value.strip() if field == "name" else value)

    db.commit()
    db.refresh(user)
    return user
