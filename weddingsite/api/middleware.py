"""
Session middleware gating protected page paths.
"""
import logging
import re
from typing import Iterable, List, Pattern
from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from weddingsite.core.config import settings
from weddingsite.core.security import verify_session_token

logger = logging.getLogger(__name__)


def is_protected_path(path: str, prefixes: Iterable[str], public_patterns: Iterable[Pattern]) -> bool:
    """A path is protected when it starts with a protected prefix and is not a public detail view."""
    if not any(path.startswith(prefix) for prefix in prefixes):
        return False
    return not any(pattern.match(path) for pattern in public_patterns)


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Redirect requests for protected paths to the login page unless they
    carry a valid session cookie.

    The verified identity is not attached to the request; API handlers get
    it from the identity dependency.
    """

    def __init__(
        self,
        app,
        protected_prefixes: List[str] = None,
        public_patterns: List[str] = None,
        login_path: str = None,
        cookie_name: str = None,
    ):
        super().__init__(app)
        self.protected_prefixes = list(
            settings.PROTECTED_PATH_PREFIXES if protected_prefixes is None else protected_prefixes
        )
        self.public_patterns = [
            re.compile(pattern)
            for pattern in (settings.PUBLIC_PATH_PATTERNS if public_patterns is None else public_patterns)
        ]
        self.login_path = login_path or settings.LOGIN_PATH
        self.cookie_name = cookie_name or settings.SESSION_COOKIE_NAME

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_protected_path(path, self.protected_prefixes, self.public_patterns):
            return await call_next(request)

        token = request.cookies.get(self.cookie_name)
        if not token or verify_session_token(token) is None:
            logger.debug(f"No valid session for {path}, redirecting to {self.login_path}")
            return RedirectResponse(url=str(request.url.replace(path=self.login_path, query="")))

        return await call_next(request)
