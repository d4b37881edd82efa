"""
S3 object storage for room images.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from resort_shared.config import AppConfig
from resort_shared.errors import DataUnavailable
from resort_shared.logging_config import get_logger
from resort_shared.store.base import ObjectStore

logger = get_logger(__name__)


class S3ObjectStore(ObjectStore):
    """Thin wrapper around one S3 bucket."""

    def __init__(self, config: AppConfig, client=None):
        self.bucket = config.s3_bucket
        self.region = config.aws_region
        self._client = client or self._build_client(config)

    @staticmethod
    def _build_client(config: AppConfig):
        session_kwargs: dict[str, Any] = {"region_name": config.aws_region}
        if config.aws_access_key_id and config.aws_secret_access_key:
            session_kwargs["aws_access_key_id"] = config.aws_access_key_id
            session_kwargs["aws_secret_access_key"] = config.aws_secret_access_key
        return boto3.session.Session(**session_kwargs).client(
            "s3",
            config=Config(
                signature_version="s3v4",
                retries={"max_attempts": config.store_max_attempts, "mode": "standard"},
                connect_timeout=config.store_timeout_seconds,
                read_timeout=config.store_timeout_seconds,
            ),
        )

    def put_object(self, key: str, body: bytes, content_type: str) -> None:
        try:
            self._client.put_object(
                Bucket=self.bucket, Key=key, Body=body, ContentType=content_type
            )
        except (ClientError, BotoCoreError) as exc:
            raise DataUnavailable("put_object", self.bucket, key, cause=exc) from exc
        logger.info("Uploaded object", extra={"bucket": self.bucket, "key": key})

    def generate_upload_url(self, key: str, content_type: str, expires_in: int) -> str:
        try:
            return self._client.generate_presigned_url(
                "put_object",
                Params={"Bucket": self.bucket, "Key": key, "ContentType": content_type},
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as exc:
            raise DataUnavailable("generate_upload_url", self.bucket, key, cause=exc) from exc

    def public_url(self, key: str) -> str:
        safe_key = quote(key, safe="/")
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{safe_key}"
