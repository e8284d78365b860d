"""
Pydantic schemas for Event entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
import datetime
from weddingsite.models.event import EventLayout
from weddingsite.schemas.common import ResponseModel


class Venue(BaseModel):
    name: str = ""
    address: str = ""
    maps_link: str = ""


class ContactInfo(BaseModel):
    bride_contact: str = ""
    groom_contact: str = ""
    rsvp_contact: str = ""


class ScheduleItem(BaseModel):
    time: str = ""
    activity: str = ""


class GiftInfo(BaseModel):
    bank_account: str = ""
    message: str = ""


class Customization(BaseModel):
    """Visual customization block; defaults match a fresh event."""
    layout: EventLayout = EventLayout.CLASSIC
    primary_color: str = "#000000"
    secondary_color: str = "#ffffff"
    font_family: str = "Inter"
    hero_image: str = ""


class EventBase(BaseModel):
    """Base event schema."""
    title: str = Field(min_length=1, max_length=200)
    date: datetime.date
    time: str = ""
    description: str = ""
    venue: Venue = Venue()
    contact_info: ContactInfo = ContactInfo()
    schedule: List[ScheduleItem] = []
    gift_info: GiftInfo = GiftInfo()


class EventCreate(EventBase):
    """
    Schema for event creation.

    Creator and invitation code are assigned by the server; body values for
    them are ignored.
    """
    customization: Customization = Customization()


class EventUpdate(BaseModel):
    """Schema for event update. Unknown keys are ignored."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    date: Optional[datetime.date] = None
    time: Optional[str] = None
    description: Optional[str] = None
    venue: Optional[Venue] = None
    contact_info: Optional[ContactInfo] = None
    schedule: Optional[List[ScheduleItem]] = None
    gift_info: Optional[GiftInfo] = None


class EventResponse(ResponseModel):
    """
    Schema for event response.

    Carries no invitation_code field: reads never expose it.
    """
    id: int
    title: str
    date: datetime.date
    time: str
    description: str
    venue: Venue
    contact_info: ContactInfo
    schedule: List[ScheduleItem]
    gift_info: GiftInfo
    customization: Customization
    creator_id: int
    guest_ids: List[int] = []
    created_at: datetime.datetime
    updated_at: datetime.datetime


class EventCreatedResponse(EventResponse):
    """Returned once to the creator so the invitation code can be shared."""
    invitation_code: str


class EventListResponse(ResponseModel):
    events: List[EventResponse]
    has_more: bool
