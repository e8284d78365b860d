"""
Domain validation run before anything is persisted.

Each check collects field errors into a dict keyed by dotted field path and
raises a single ValidationError carrying them as details.
"""
import re
from typing import Dict, Iterable, Optional
from urllib.parse import urlparse
from weddingsite.core.exceptions import ValidationError
from weddingsite.schemas.event import Customization, ScheduleItem, Venue

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _raise_if_errors(errors: Dict[str, str]):
    if errors:
        raise ValidationError("Validation failed", details=errors)


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs."""
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _venue_errors(venue: Venue) -> Dict[str, str]:
    errors = {}
    if not venue.name.strip():
        errors["venue.name"] = "Venue name is required"
    if not venue.address.strip():
        errors["venue.address"] = "Venue address is required"
    if venue.maps_link and not is_valid_url(venue.maps_link):
        errors["venue.maps_link"] = "Please enter a valid URL"
    return errors


def _schedule_errors(schedule: Iterable[ScheduleItem]) -> Dict[str, str]:
    errors = {}
    for index, item in enumerate(schedule):
        if not item.time.strip():
            errors[f"schedule.{index}.time"] = "Time is required"
        if not item.activity.strip():
            errors[f"schedule.{index}.activity"] = "Activity is required"
    return errors


def validate_event_fields(
    title: Optional[str] = None,
    venue: Optional[Venue] = None,
    schedule: Optional[Iterable[ScheduleItem]] = None,
):
    """Validate the event fields that are present; absent ones are skipped."""
    errors = {}
    if title is not None and not title.strip():
        errors["title"] = "Title is required"
    if venue is not None:
        errors.update(_venue_errors(venue))
    if schedule is not None:
        errors.update(_schedule_errors(schedule))
    _raise_if_errors(errors)


def validate_customization(customization: Customization):
    """Validate colors and font of a customization block."""
    errors = {}
    for field in ("primary_color", "secondary_color"):
        if not HEX_COLOR_PATTERN.match(getattr(customization, field)):
            errors[field] = "Color must be a hex value like #1a2b3c"
    if not customization.font_family.strip():
        errors["font_family"] = "Font family is required"
    if customization.hero_image and not is_valid_url(customization.hero_image):
        errors["hero_image"] = "Please enter a valid URL"
    _raise_if_errors(errors)


def validate_content(content: str, field: str = "content"):
    """Post and comment bodies must contain text."""
    if not content or not content.strip():
        raise ValidationError("Validation failed", details={field: "Content is required"})


def validate_image_urls(images: Iterable[str]):
    errors = {
        f"images.{index}": "Please enter a valid URL"
        for index, url in enumerate(images)
        if not is_valid_url(url)
    }
    _raise_if_errors(errors)
