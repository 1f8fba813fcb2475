"""Staff notification emails for new customer inquiries, sent through SES."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import ErrorCode, NotificationError

logger = logging.getLogger(__name__)


def format_inquiry_notification(record: dict[str, Any]) -> tuple[str, str]:
    """Subject and plain-text body summarising an inquiry row."""
    subject = f"New inquiry: {record.get('dog_name')} ({record.get('owner_name')})"
    lines = [
        "New customer inquiry",
        "",
        f"Owner: {record.get('owner_name')}",
        f"Phone: {record.get('phone')}",
        f"Email: {record.get('email')}",
        f"Address: {record.get('address')}",
        f"Dog: {record.get('dog_name')} ({record.get('dog_breed')}), weight {record.get('dog_weight')}",
    ]
    if record.get("dog_photo_url"):
        lines.append(f"Photo: {record['dog_photo_url']}")
    if record.get("special_notes"):
        lines += ["", "Notes:", str(record["special_notes"])]
    return subject, "\n".join(lines)


def send_inquiry_notification(record: dict[str, Any], ses_client: Any, sender: str, recipient: str) -> str:
    """Email the inquiry to staff. Returns the SES message id."""
    subject, body = format_inquiry_notification(record)
    try:
        response = ses_client.send_email(
            Source=sender,
            Destination={"ToAddresses": [recipient]},
            Message={
                "Subject": {"Data": subject, "Charset": "UTF-8"},
                "Body": {"Text": {"Data": body, "Charset": "UTF-8"}},
            },
            ReplyToAddresses=[record["email"]] if record.get("email") else [],
        )
    except (BotoCoreError, ClientError) as e:
        raise NotificationError(f"SES send_email failed: {e}", code=ErrorCode.NOTIFICATION_FAILED) from e

    message_id: str = response["MessageId"]
    logger.info("Sent inquiry notification %s", message_id)
    return message_id
