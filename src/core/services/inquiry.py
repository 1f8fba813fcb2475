"""Customer inquiry intake: validation, photo decoding and record construction."""

import base64
import binascii
import re
import secrets
import string
from time import time
from typing import Any

from core.models import InquiryRecord, InquiryStatus
from core.services.forms import parse_int_prefix

REQUIRED_FIELDS = ["ownerName", "phone", "email", "address", "dogName", "dogBreed", "dogWeight"]

PHOTO_CONTENT_TYPE = "image/jpeg"

_BASE36 = string.digits + string.ascii_lowercase


def decode_data_url(data_url: str) -> bytes:
    """Decode the base64 payload of a ``data:<mime>;base64,<payload>`` URL."""
    if not isinstance(data_url, str) or "," not in data_url:
        raise ValueError("Photo is not a data URL")
    # Browsers accept unpadded payloads and embedded ASCII whitespace
    payload = re.sub(r"[ \t\n\f\r]", "", data_url.split(",")[1])
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Photo payload is not valid base64: {e}") from e


def generate_photo_name(now_ms: int | None = None) -> str:
    """Unique object name: timestamp plus a random base36 suffix."""
    if now_ms is None:
        now_ms = int(time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"dog-photo-{now_ms}-{suffix}.jpg"


def build_inquiry_record(data: dict[str, Any], dog_photo_url: str | None = None) -> InquiryRecord:
    return InquiryRecord(
        owner_name=data["ownerName"],
        phone=data["phone"],
        email=data["email"],
        address=data["address"],
        dog_name=data["dogName"],
        dog_breed=data["dogBreed"],
        dog_weight=parse_int_prefix(data["dogWeight"]),
        dog_photo_url=dog_photo_url,
        special_notes=data.get("specialNotes") or None,
        status=InquiryStatus.NEW,
    )
