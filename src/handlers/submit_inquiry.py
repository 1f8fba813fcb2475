"""Customer inquiry endpoint: stores an optional dog photo and saves the inquiry."""

import logging
from typing import Any

from core.clients import get_s3_client, get_ses_client
from core.config import Config, get_config
from core.db import RecordStore
from core.errors import USER_MESSAGES, ErrorCode, StorageError, StoreError
from core.http import json_response, parse_json_body, preflight_response, request_method
from core.logging_context import configure_logging, set_request_id
from core.services.forms import form_fields, is_missing, missing_fields
from core.services.inquiry import (
    PHOTO_CONTENT_TYPE,
    REQUIRED_FIELDS,
    build_inquiry_record,
    decode_data_url,
    generate_photo_name,
)
from core.services.notification import send_inquiry_notification
from core.storage import PhotoStorage

logger = logging.getLogger(__name__)

# No Allow-Methods entry; browsers fall back to simple-method rules.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

SUCCESS_MESSAGE = "Inquiry submitted successfully!"


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    if request_method(event) == "OPTIONS":
        return preflight_response(CORS_HEADERS)

    try:
        config = get_config()
        configure_logging(config.log_level)
        set_request_id(getattr(context, "aws_request_id", None))

        inquiry_data = form_fields(parse_json_body(event))

        if missing_fields(inquiry_data, REQUIRED_FIELDS):
            return json_response(400, {"error": USER_MESSAGES[ErrorCode.MISSING_FIELDS]}, CORS_HEADERS)

        dog_photo_url = None
        if not is_missing(inquiry_data.get("dogPhoto")):
            dog_photo_url = _try_upload_photo(inquiry_data["dogPhoto"], config)

        record = build_inquiry_record(inquiry_data, dog_photo_url)

        try:
            with RecordStore(config) as store:
                rows = store.insert(config.inquiries_table, record.model_dump(mode="json"))
        except StoreError:
            logger.exception("Database error")
            return json_response(500, {"error": USER_MESSAGES[ErrorCode.INQUIRY_SAVE_FAILED]}, CORS_HEADERS)

        inquiry = rows[0]

        _try_send_notification(inquiry, config)

        return json_response(200, {"success": True, "message": SUCCESS_MESSAGE, "data": inquiry}, CORS_HEADERS)

    except Exception:
        logger.exception("Inquiry function error")
        return json_response(500, {"error": USER_MESSAGES[ErrorCode.INTERNAL_ERROR]}, CORS_HEADERS)


def _try_upload_photo(data_url: str, config: Config) -> str | None:
    """Upload the photo and return its public URL, or None on any failure."""
    try:
        image = decode_data_url(data_url)
        object_name = generate_photo_name()
        storage = PhotoStorage(config, get_s3_client())
        try:
            storage.upload(object_name, image, PHOTO_CONTENT_TYPE, overwrite=False)
        except StorageError as e:
            logger.error("Photo upload error: %s", e.message)
            return None
        return storage.get_public_url(object_name)
    except Exception:
        logger.exception("Photo processing error")
        return None


def _try_send_notification(inquiry: dict[str, Any], config: Config) -> None:
    try:
        if not config.notifications_configured:
            logger.info("Notification email not configured, skipping")
            return
        send_inquiry_notification(
            inquiry,
            get_ses_client(),
            sender=config.notification_email_from,
            recipient=config.notification_email_to,
        )
    except Exception:
        logger.warning("Inquiry notification failed (non-blocking)", exc_info=True)
