import base64
import re

import pytest

from core.models import InquiryStatus
from core.services.inquiry import build_inquiry_record, decode_data_url, generate_photo_name

VALID_INQUIRY = {
    "ownerName": "Sam Reyes",
    "phone": "555-0101",
    "email": "sam@example.com",
    "address": "12 Elm St",
    "dogName": "Biscuit",
    "dogBreed": "Beagle",
    "dogWeight": "22",
}

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF"


def test_decode_data_url():
    data_url = "data:image/jpeg;base64," + base64.b64encode(JPEG_BYTES).decode()
    assert decode_data_url(data_url) == JPEG_BYTES


@pytest.mark.parametrize("value", ["not a data url", "data:image/jpeg;base64,@@@not-base64@@@", 42])
def test_decode_data_url_rejects_malformed(value):
    with pytest.raises(ValueError):
        decode_data_url(value)


def test_generate_photo_name_format():
    name = generate_photo_name(now_ms=1717236000000)
    assert re.fullmatch(r"dog-photo-1717236000000-[0-9a-z]{6}\.jpg", name)


def test_generate_photo_name_is_unique():
    assert generate_photo_name(now_ms=1) != generate_photo_name(now_ms=1)


def test_build_inquiry_record():
    record = build_inquiry_record({**VALID_INQUIRY, "specialNotes": "Nervous around bikes"}, "https://cdn/x.jpg")
    assert record.dog_weight == 22
    assert record.dog_photo_url == "https://cdn/x.jpg"
    assert record.special_notes == "Nervous around bikes"
    assert record.status == InquiryStatus.NEW


def test_empty_special_notes_become_none():
    record = build_inquiry_record({**VALID_INQUIRY, "specialNotes": ""})
    assert record.special_notes is None


def test_weight_uses_leading_digits():
    assert build_inquiry_record({**VALID_INQUIRY, "dogWeight": "45 lbs"}).dog_weight == 45


def test_non_numeric_weight_passes_through_as_none():
    record = build_inquiry_record({**VALID_INQUIRY, "dogWeight": "heavy"})
    assert record.dog_weight is None


def test_decode_data_url_accepts_missing_padding():
    assert decode_data_url("data:image/jpeg;base64,/9j/4AA") == b"\xff\xd8\xff\xe0\x00"


def test_decode_data_url_ignores_ascii_whitespace():
    encoded = base64.b64encode(JPEG_BYTES).decode()
    wrapped = "data:image/jpeg;base64," + encoded[:4] + "\n" + encoded[4:8] + " \t" + encoded[8:]
    assert decode_data_url(wrapped) == JPEG_BYTES


def test_decode_data_url_rejects_impossible_length():
    with pytest.raises(ValueError):
        decode_data_url("data:image/jpeg;base64,/9j/4")
