"""
Event model for wedding event pages.
"""
from sqlalchemy import Column, String, Date, Text, ForeignKey, Integer, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from weddingsite.db.base import BaseModel
import enum


class EventLayout(str, enum.Enum):
    """Event page layout variants."""
    CLASSIC = "classic"
    MODERN = "modern"
    RUSTIC = "rustic"


DEFAULT_CUSTOMIZATION = {
    "layout": EventLayout.CLASSIC.value,
    "primary_color": "#000000",
    "secondary_color": "#ffffff",
    "font_family": "Inter",
    "hero_image": "",
}


class Event(BaseModel):
    """
    Wedding event page.

    Embedded blocks (venue, contact info, schedule, gift info, customization)
    live in JSON columns so one row holds the whole event document.
    `creator_id` and `invitation_code` never change after creation.
    """
    __tablename__ = "events"

    title = Column(String(200), nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(20), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    creator_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    invitation_code = Column(String(64), unique=True, nullable=False, index=True)
    venue = Column(JSON, nullable=False)
    contact_info = Column(JSON, nullable=False)
    schedule = Column(JSON, nullable=False)
    gift_info = Column(JSON, nullable=False)
    customization = Column(JSON, nullable=False)

    # Relationships
    creator = relationship("User", back_populates="created_events")
    guests = relationship("EventGuest", back_populates="event", cascade="all, delete-orphan")

    @property
    def guest_ids(self):
        return [guest.user_id for guest in self.guests]


class EventGuest(BaseModel):
    """Junction table for Event and guest User."""
    __tablename__ = "event_guests"
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_event_guest"),)

    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    event = relationship("Event", back_populates="guests")
    user = relationship("User", back_populates="guest_of")
