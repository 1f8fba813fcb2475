from enum import Enum

from pydantic import BaseModel, ConfigDict


class InquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    CLOSED = "closed"


class InquiryRecord(BaseModel):
    """Row written to the customer_inquiries table."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    owner_name: str
    phone: str
    email: str
    address: str
    dog_name: str
    dog_breed: str
    # None when the submitted weight has no numeric prefix
    dog_weight: int | None
    dog_photo_url: str | None = None
    special_notes: str | None = None
    status: InquiryStatus = InquiryStatus.NEW
