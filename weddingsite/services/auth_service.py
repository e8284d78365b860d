"""
Credential flow: signup, signin and session lookup.
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from weddingsite.core.exceptions import ConflictError, NotFoundError, ValidationError
from weddingsite.core.security import SessionIdentity, get_password_hash, verify_password
from weddingsite.models.user import User
from weddingsite.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def register_user(user_data: UserCreate, db: Session) -> User:
    """Create a user; a registered email is a conflict."""
    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        raise ConflictError("User already exists")

    new_user = User(
        name=user_data.name.strip(),
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        profile_photo="",
        bio="",
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent signup for the same email
        db.rollback()
        raise ConflictError("User already exists")
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id}")
    return new_user


def authenticate_user(email: str, password: str, db: Session) -> User:
    """
    Look up a user by email and check the password.

    Unknown email and wrong password are reported differently so the client
    can tell them apart.
    """
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(password, user.hashed_password):
        raise ValidationError("Invalid credentials")

    return user


def get_session_user(identity: Optional[SessionIdentity], db: Session) -> Optional[User]:
    """User behind a verified session, or None when there is none."""
    if identity is None:
        return None
    return db.query(User).filter(User.id == identity.id).first()
