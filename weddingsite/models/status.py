"""
Status feed models: posts, likes and comments.
"""
from sqlalchemy import Column, Text, ForeignKey, Integer, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from weddingsite.db.base import BaseModel


class Status(BaseModel):
    """Status post in the social feed."""
    __tablename__ = "statuses"

    content = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    images = Column(JSON, nullable=False, default=list)  # ordered image URLs

    # Relationships
    author = relationship("User", back_populates="statuses")
    like_entries = relationship("StatusLike", back_populates="status", cascade="all, delete-orphan")
    comments = relationship(
        "StatusComment",
        back_populates="status",
        cascade="all, delete-orphan",
        order_by="StatusComment.id",
    )

    @property
    def likes(self):
        """Ids of users who like this status."""
        return [like.user_id for like in self.like_entries]


class StatusLike(BaseModel):
    """A user's like on a status; at most one per (status, user)."""
    __tablename__ = "status_likes"
    __table_args__ = (UniqueConstraint("status_id", "user_id", name="uq_status_like"),)

    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    status = relationship("Status", back_populates="like_entries")


class StatusComment(BaseModel):
    """Comment appended to a status."""
    __tablename__ = "status_comments"

    status_id = Column(Integer, ForeignKey("statuses.id"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)

    # Relationships
    status = relationship("Status", back_populates="comments")
    author = relationship("User")
