"""
Request dependencies producing the verified session identity.

The token is read from the session cookie and verified once per request;
handlers receive the resulting identity as an argument.
"""
from typing import Optional
from fastapi import Depends, Request
from weddingsite.core.config import settings
from weddingsite.core.exceptions import UnauthorizedError
from weddingsite.core.security import SessionIdentity, verify_session_token


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_optional_identity(token: Optional[str] = Depends(get_session_token)) -> Optional[SessionIdentity]:
    """Verified identity, or None when there is no valid session."""
    return verify_session_token(token)


def get_session_identity(token: Optional[str] = Depends(get_session_token)) -> SessionIdentity:
    """Verified identity; missing or invalid sessions are unauthorized."""
    if not token:
        raise UnauthorizedError("Unauthorized")
    identity = verify_session_token(token)
    if identity is None:
        raise UnauthorizedError("Invalid token")
    return identity
