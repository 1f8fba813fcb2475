"""Booking intake: validation and record construction."""

from datetime import datetime, timedelta
from typing import Any

from core.models import BookingRecord, BookingStatus, CalendarEvent
from core.services.forms import is_missing, parse_float_prefix, parse_int_prefix

REQUIRED_FIELDS = ["ownerName", "phone", "email", "address", "dogName", "dogBreed", "service", "duration"]

DEFAULT_DURATION_HOURS = 1
DEFAULT_PRICE_PER_HOUR = 25.0


def compose_scheduled_datetime(booking_date: Any, booking_time: Any) -> str | None:
    """Local ISO timestamp ``<date>T<time>:00``, or None unless both parts are given."""
    if is_missing(booking_date) or is_missing(booking_time):
        return None
    return f"{booking_date}T{booking_time}:00"


def build_booking_record(data: dict[str, Any]) -> BookingRecord:
    # Zero and unparsable values both fall back to the defaults
    duration = parse_int_prefix(data.get("duration")) or DEFAULT_DURATION_HOURS
    price_per_hour = parse_float_prefix(data.get("pricePerHour")) or DEFAULT_PRICE_PER_HOUR

    return BookingRecord(
        owner_name=data["ownerName"],
        phone=data["phone"],
        email=data["email"],
        address=data.get("address") or "",
        dog_name=data["dogName"],
        dog_breed=data["dogBreed"],
        service_type=data["service"],
        duration_hours=duration,
        total_amount=duration * price_per_hour,
        scheduled_datetime=compose_scheduled_datetime(data.get("bookingDate"), data.get("bookingTime")),
        google_event_id=None,
        status=BookingStatus.PENDING,
    )


def build_calendar_event(record: BookingRecord) -> CalendarEvent:
    """Calendar entry for a scheduled booking.

    Raises ValueError when the booking has no usable schedule.
    """
    if record.scheduled_datetime is None:
        raise ValueError("Booking has no scheduled datetime")
    start = datetime.fromisoformat(record.scheduled_datetime)
    return CalendarEvent(
        summary=f"{record.service_type} - {record.dog_name} ({record.owner_name})",
        description=(
            f"Owner: {record.owner_name}\n"
            f"Phone: {record.phone}\n"
            f"Email: {record.email}\n"
            f"Address: {record.address}\n"
            f"Dog: {record.dog_name} ({record.dog_breed})\n"
            f"Duration: {record.duration_hours}h, total {record.total_amount:.2f}"
        ),
        start=start,
        end=start + timedelta(hours=record.duration_hours),
        attendee_email=record.email,
    )
