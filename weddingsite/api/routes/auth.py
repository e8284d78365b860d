"""
Authentication routes for signup, signin, session check and signout.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from weddingsite.db.session import get_db
from weddingsite.schemas.user import UserCreate, UserLogin, AuthResponse
from weddingsite.models.user import User
from weddingsite.core.config import settings
from weddingsite.core.security import SessionIdentity, create_session_token
from weddingsite.services.auth_service import register_user, authenticate_user, get_session_user
from weddingsite.api.dependencies import get_optional_identity

router = APIRouter(prefix="/auth", tags=["auth"])

SESSION_MAX_AGE = 60 * 60 * 24 * settings.ACCESS_TOKEN_EXPIRE_DAYS


def set_session_cookie(response: Response, user: User):
    """Issue a session token for the user and store it in the session cookie."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user.id, user.email),
        max_age=SESSION_MAX_AGE,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.secure_cookies,
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_data: UserCreate, response: Response, db: Session = Depends(get_db)):
    """Register a new user and start a session."""
    new_user = register_user(user_data, db)
    set_session_cookie(response, new_user)
    return {"user": new_user}


@router.post("/signin", response_model=AuthResponse)
def signin(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    """Sign in with email and password and start a session."""
    user = authenticate_user(credentials.email, credentials.password, db)
    set_session_cookie(response, user)
    return {"user": user}


@router.get("/check", response_model=AuthResponse)
def check(
    identity: Optional[SessionIdentity] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """Return the signed-in user, or null when there is no valid session."""
    return {"user": get_session_user(identity, db)}


@router.post("/signout")
async def signout(response: Response):
    """End the session by clearing the cookie (tokens are stateless)."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.secure_cookies,
    )
    return {"message": "Signed out successfully"}
