"""Booking form endpoint: saves a booking and attempts a calendar event."""

import asyncio
import logging
import traceback
from typing import Any

from core.calendar import get_calendar_provider
from core.config import get_config
from core.db import RecordStore
from core.errors import USER_MESSAGES, ErrorCode, StoreError
from core.http import json_response, parse_json_body, preflight_response, request_method
from core.logging_context import configure_logging, set_request_id
from core.models import BookingRecord
from core.services.booking import REQUIRED_FIELDS, build_booking_record, build_calendar_event
from core.services.forms import form_fields, missing_fields

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

SUCCESS_MESSAGE = "Booking created successfully! We will contact you to confirm your appointment."


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    if request_method(event) == "OPTIONS":
        return preflight_response(CORS_HEADERS)

    try:
        config = get_config()
        configure_logging(config.log_level)
        set_request_id(getattr(context, "aws_request_id", None))
        logger.info("Starting booking process (method=%s)", request_method(event))

        try:
            payload = parse_json_body(event)
        except ValueError as e:
            logger.error("JSON parse error: %s", e)
            return json_response(400, {"error": USER_MESSAGES[ErrorCode.INVALID_JSON]}, CORS_HEADERS)

        booking_data = form_fields(payload)

        missing = missing_fields(booking_data, REQUIRED_FIELDS)
        if missing:
            logger.error("Missing required fields: %s", missing)
            message = f"{USER_MESSAGES[ErrorCode.MISSING_FIELDS]}: {', '.join(missing)}"
            return json_response(400, {"error": message}, CORS_HEADERS)

        record = build_booking_record(booking_data)
        insert_data = record.model_dump(mode="json")
        logger.debug("Insert data: %s", insert_data)

        try:
            with RecordStore(config) as store:
                rows = store.insert(config.bookings_table, insert_data)
        except StoreError as e:
            logger.error("Database error: %s (hint=%s, code=%s)", e.message, e.hint, e.sqlstate)
            return json_response(
                500,
                {
                    "error": USER_MESSAGES[ErrorCode.BOOKING_SAVE_FAILED],
                    "details": e.message,
                    "hint": e.hint or None,
                    "code": e.sqlstate or None,
                },
                CORS_HEADERS,
            )

        booking = rows[0]
        logger.info("Booking saved for %s", record.owner_name)

        _try_create_calendar_event(record)

        return json_response(200, {"success": True, "message": SUCCESS_MESSAGE, "booking": booking}, CORS_HEADERS)

    except Exception as e:
        logger.exception("Booking function error")
        return json_response(
            500,
            {
                "error": USER_MESSAGES[ErrorCode.BOOKING_FAILED],
                "details": str(e),
                "stack": traceback.format_exc(),
            },
            CORS_HEADERS,
        )


def _try_create_calendar_event(record: BookingRecord) -> None:
    """Create the calendar entry for a scheduled booking.

    Never raises. The booking is already saved and the response must
    not depend on the calendar.
    """
    try:
        provider = get_calendar_provider()
        if provider is None or record.scheduled_datetime is None:
            logger.info("Calendar credentials not configured or booking has no datetime, skipping event")
            return
        # Provider methods are async; this handler is sync, so asyncio.run() bridges them.
        event_id = asyncio.run(provider.create_event(build_calendar_event(record)))
        logger.info("Created calendar event %s", event_id)
    except Exception:
        logger.warning("Calendar event creation failed (non-blocking)", exc_info=True)
