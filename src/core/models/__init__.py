"""
Pydantic models for the intake endpoints.
"""

from core.models.booking import BookingRecord, BookingStatus
from core.models.calendar import CalendarEvent
from core.models.inquiry import InquiryRecord, InquiryStatus

__all__ = ["BookingRecord", "BookingStatus", "CalendarEvent", "InquiryRecord", "InquiryStatus"]
