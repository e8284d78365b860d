"""
User model for authentication and profiles.
"""
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from weddingsite.db.base import BaseModel


class User(BaseModel):
    """User model. The password hash never leaves the persistence layer."""
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    profile_photo = Column(String(500), default="", nullable=False)
    bio = Column(Text, default="", nullable=False)

    # Relationships
    created_events = relationship("Event", back_populates="creator", order_by="Event.id")
    guest_of = relationship("EventGuest", back_populates="user", cascade="all, delete-orphan")
    statuses = relationship("Status", back_populates="author")

    @property
    def image(self) -> str:
        """Display image used when the user appears as an author."""
        return self.profile_photo or ""

    @property
    def created_event_ids(self):
        return [event.id for event in self.created_events]
