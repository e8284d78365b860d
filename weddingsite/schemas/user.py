"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from datetime import datetime
from weddingsite.schemas.common import ResponseModel


class UserCreate(BaseModel):
    """Schema for signup."""
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    """Schema for signin."""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Schema for profile edit."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    profile_photo: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = None


class AuthorResponse(ResponseModel):
    """Public fields of a user shown next to posts and comments."""
    id: int
    name: str
    email: EmailStr
    image: str = ""


class UserResponse(ResponseModel):
    """Schema for public profile response."""
    id: int
    name: str
    email: EmailStr
    profile_photo: str = ""
    bio: str = ""
    created_event_ids: List[int] = []
    created_at: datetime


class AuthResponse(ResponseModel):
    """Signup, signin and session check response."""
    user: Optional[UserResponse] = None


class UserListResponse(ResponseModel):
    users: List[UserResponse]
    has_more: bool
