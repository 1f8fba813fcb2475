from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class BookingRecord(BaseModel):
    """Row written to the bookings table."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    owner_name: str
    phone: str
    email: str
    address: str = ""
    dog_name: str
    dog_breed: str
    service_type: str
    duration_hours: int
    total_amount: float
    scheduled_datetime: str | None = None
    google_event_id: str | None = None
    status: BookingStatus = Field(default=BookingStatus.PENDING)
