import logging

from core.errors import CalendarError, ErrorCode
from core.models.calendar import CalendarEvent

from .interface import CalendarProvider

logger = logging.getLogger(__name__)


class GoogleServiceAccountCalendarProvider(CalendarProvider):
    """Google Calendar through a service account.

    Event creation is not wired up yet; bookings keep google_event_id
    null until it is.
    """

    def __init__(self, service_account_email: str, private_key: str, calendar_id: str = "primary"):
        self._service_account_email = service_account_email
        # Env-provided PEM keys usually carry escaped newlines
        self._private_key = private_key.replace("\\n", "\n")
        self._calendar_id = calendar_id

    @property
    def service_account_email(self) -> str:
        return self._service_account_email

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    async def create_event(self, event: CalendarEvent) -> str:
        logger.info(
            "Calendar event %r for %s on %s requested as %s",
            event.summary,
            event.start.isoformat(),
            self._calendar_id,
            self._service_account_email,
        )
        raise CalendarError(
            "Google Calendar event creation is not implemented",
            code=ErrorCode.CALENDAR_UNAVAILABLE,
        )
