"""Request-id logging context for tracing one invocation across modules.

Usage:
    from core.logging_context import configure_logging, set_request_id

    configure_logging("INFO")
    set_request_id(getattr(context, "aws_request_id", None))
    logger.info("Saving booking")  # record.request_id == "3f1c..."
"""

import logging
from contextvars import ContextVar

_request_id: ContextVar[str] = ContextVar("request_id", default="-")

_LOG_FORMAT = "%(levelname)s [%(request_id)s] %(name)s: %(message)s"


def set_request_id(request_id: str | None) -> None:
    """Set the request id for the current invocation."""
    _request_id.set(request_id or "-")


def get_request_id() -> str:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()  # type: ignore[attr-defined]
        return True


def configure_logging(level: str = "INFO") -> None:
    """Set the root level and stamp records with the request id.

    Unknown level names fall back to INFO.

    The Lambda runtime installs its own root handler; outside Lambda a
    stream handler is added so local runs still log.
    """
    root = logging.getLogger()
    level_name = level.upper()
    root.setLevel(level_name if level_name in logging.getLevelNamesMapping() else logging.INFO)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
    for handler in root.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())
