from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from core.config import Config
from core.errors import ErrorCode, StorageError
from core.storage import PhotoStorage


def _config(**overrides):
    base = dict(
        aws_region="us-west-2",
        environment="test",
        bookings_table="bookings",
        inquiries_table="customer_inquiries",
        photo_bucket="dog-photos",
    )
    return Config(**{**base, **overrides})


def test_upload_without_overwrite_is_conditional():
    s3 = MagicMock()
    PhotoStorage(_config(), s3).upload("dog-photo-1-abc.jpg", b"\xff\xd8", "image/jpeg")

    s3.put_object.assert_called_once_with(
        Bucket="dog-photos",
        Key="dog-photo-1-abc.jpg",
        Body=b"\xff\xd8",
        ContentType="image/jpeg",
        IfNoneMatch="*",
    )


def test_upload_with_overwrite():
    s3 = MagicMock()
    PhotoStorage(_config(), s3).upload("a.jpg", b"x", "image/jpeg", overwrite=True)
    assert "IfNoneMatch" not in s3.put_object.call_args.kwargs


def test_upload_failure_raises_storage_error():
    s3 = MagicMock()
    s3.put_object.side_effect = ClientError(
        {"Error": {"Code": "PreconditionFailed", "Message": "At least one of the pre-conditions you specified did not hold"}},
        "PutObject",
    )
    with pytest.raises(StorageError) as exc_info:
        PhotoStorage(_config(), s3).upload("a.jpg", b"x", "image/jpeg")
    assert exc_info.value.code == ErrorCode.PHOTO_UPLOAD_FAILED


def test_public_url_default_s3():
    url = PhotoStorage(_config(), MagicMock()).get_public_url("dog-photo-1-abc.jpg")
    assert url == "https://dog-photos.s3.us-west-2.amazonaws.com/dog-photo-1-abc.jpg"


def test_public_url_custom_endpoint():
    storage = PhotoStorage(_config(s3_endpoint="http://localhost:4566/"), MagicMock())
    assert storage.get_public_url("a.jpg") == "http://localhost:4566/dog-photos/a.jpg"


def test_public_url_base_url_wins():
    storage = PhotoStorage(
        _config(s3_endpoint="http://localhost:4566", photo_public_base_url="https://cdn.example.com/photos/"),
        MagicMock(),
    )
    assert storage.get_public_url("a.jpg") == "https://cdn.example.com/photos/a.jpg"
