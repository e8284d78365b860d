"""Models package - Import all models for SQLAlchemy registration."""
from weddingsite.models.user import User
from weddingsite.models.event import Event, EventGuest, EventLayout
from weddingsite.models.status import Status, StatusLike, StatusComment

__all__ = [
    "User",
    "Event",
    "EventGuest",
    "EventLayout",
    "Status",
    "StatusLike",
    "StatusComment",
]
