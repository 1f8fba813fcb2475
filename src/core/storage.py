"""S3 photo storage: uploads and public URL resolution."""

import logging
from typing import Any
from urllib.parse import quote

from botocore.exceptions import BotoCoreError, ClientError

from core.config import Config
from core.errors import ErrorCode, StorageError

logger = logging.getLogger(__name__)


class PhotoStorage:
    def __init__(self, config: Config, s3_client: Any) -> None:
        self._config = config
        self._s3 = s3_client

    @property
    def bucket(self) -> str:
        return self._config.photo_bucket

    def upload(self, object_name: str, data: bytes, content_type: str, overwrite: bool = False) -> None:
        """Store ``data`` under ``object_name``.

        Without ``overwrite`` the write is conditional and an existing
        object is left untouched.
        """
        kwargs: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": object_name,
            "Body": data,
            "ContentType": content_type,
        }
        if not overwrite:
            kwargs["IfNoneMatch"] = "*"
        try:
            self._s3.put_object(**kwargs)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Upload of {object_name} failed: {e}", code=ErrorCode.PHOTO_UPLOAD_FAILED) from e
        logger.info("Uploaded %s to %s (%d bytes)", object_name, self.bucket, len(data))

    def get_public_url(self, object_name: str) -> str:
        key = quote(object_name)
        if self._config.photo_public_base_url:
            return f"{self._config.photo_public_base_url.rstrip('/')}/{key}"
        if self._config.s3_endpoint:
            return f"{self._config.s3_endpoint.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self._config.aws_region}.amazonaws.com/{key}"
