"""
Pydantic schemas for the status feed.
"""
from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from weddingsite.schemas.common import ResponseModel
from weddingsite.schemas.user import AuthorResponse


class StatusCreate(BaseModel):
    """Schema for status creation. Any author in the body is ignored."""
    content: str = Field(max_length=5000)
    images: List[str] = []


class CommentCreate(BaseModel):
    """Schema for comment creation."""
    content: str = Field(max_length=2000)


class CommentResponse(ResponseModel):
    id: int
    content: str
    author: AuthorResponse
    created_at: datetime


class StatusResponse(ResponseModel):
    """Status with author and comment authors resolved."""
    id: int
    content: str
    author: AuthorResponse
    images: List[str] = []
    likes: List[int] = []
    comments: List[CommentResponse] = []
    created_at: datetime


class StatusListResponse(ResponseModel):
    statuses: List[StatusResponse]
    has_more: bool
