from abc import ABC, abstractmethod

from core.models.calendar import CalendarEvent


class CalendarProvider(ABC):
    @abstractmethod
    async def create_event(self, event: CalendarEvent) -> str:
        """Create ``event`` and return the provider's event id."""


def get_calendar_provider() -> CalendarProvider | None:
    """Return the configured provider, or None when credentials are missing."""
    from core.config import get_config

    config = get_config()
    if not config.calendar_configured:
        return None

    from core.calendar.google_provider import GoogleServiceAccountCalendarProvider

    return GoogleServiceAccountCalendarProvider(
        service_account_email=config.google_service_account_email,
        private_key=config.google_private_key,
        calendar_id=config.google_calendar_id,
    )
