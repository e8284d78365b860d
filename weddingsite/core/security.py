"""
Security utilities for session tokens and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import logging
import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel
from weddingsite.core.config import settings

logger = logging.getLogger(__name__)


class SessionIdentity(BaseModel):
    """Verified identity carried by a session token."""
    id: int
    email: str


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash has an invalid format")
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password with a fresh random salt.
    Pre-hashes with SHA256 first to support longer passwords.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


def create_session_token(user_id: int, email: str, now: Optional[datetime] = None) -> str:
    """Create a signed session token for a user, valid for ACCESS_TOKEN_EXPIRE_DAYS."""
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {"id": user_id, "email": email, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[dict]:
    """Decode and verify a JWT token, returning the raw payload."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def verify_session_token(token: Optional[str]) -> Optional[SessionIdentity]:
    """
    Verify a session token.

    Malformed, expired and tampered tokens all yield None; callers treat
    that as "no active session" rather than as an error.
    """
    if not token:
        return None
    payload = decode_session_token(token)
    if not payload:
        return None
    user_id = payload.get("id")
    email = payload.get("email")
    if user_id is None or not isinstance(email, str):
        return None
    try:
        return SessionIdentity(id=user_id, email=email)
    except ValueError:
        return None
