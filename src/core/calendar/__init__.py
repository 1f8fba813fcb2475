"""Calendar integration abstraction layer."""

from core.calendar.google_provider import GoogleServiceAccountCalendarProvider
from core.calendar.interface import CalendarProvider, get_calendar_provider

__all__ = ["CalendarProvider", "GoogleServiceAccountCalendarProvider", "get_calendar_provider"]
