"""
Object storage for uploaded resumes (S3).
"""
import logging
from typing import Callable, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core import config
from app.core.errors import UpstreamFailureError

logger = logging.getLogger(__name__)

STORAGE_SETTINGS = ("AWS_BUCKET_REGION", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_BUCKET_NAME")


class ObjectStorage:
    """Thin wrapper over an S3 bucket: put bytes, get back a public URL."""

    def __init__(self, bucket: str, region: str, access_key_id: str, secret_access_key: str, client=None):
        self.bucket = bucket
        self.region = region
        self.client = client or boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    @classmethod
    def from_config(cls) -> "ObjectStorage":
        """
        Build from environment settings.

        Raises:
            ConfigurationError: if any storage setting is missing
        """
        settings = config.require_settings(*STORAGE_SETTINGS)
        return cls(
            bucket=settings["AWS_BUCKET_NAME"],
            region=settings["AWS_BUCKET_REGION"],
            access_key_id=settings["AWS_ACCESS_KEY_ID"],
            secret_access_key=settings["AWS_SECRET_ACCESS_KEY"],
        )

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def upload(
        self,
        key: str,
        body: bytes,
        content_type: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        Upload an object and return its URL.

        Raises:
            UpstreamFailureError: if S3 rejects the upload
        """
        params = {"Bucket": self.bucket, "Key": key, "Body": body}
        if content_type:
            params["ContentType"] = content_type
        if metadata:
            params["Metadata"] = metadata

        try:
            self.client.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 upload failed: bucket={self.bucket}, key={key}: {e}", exc_info=True)
            raise UpstreamFailureError("Failed to upload file") from e

        logger.info(f"Object uploaded: bucket={self.bucket}, key={key}, bytes={len(body)}")
        return self.public_url(key)


def get_storage_factory() -> Callable[[], ObjectStorage]:
    """
    Storage dependency.

    Returns a builder rather than a client so settings are only read once the
    caller has been authorized.
    """
    return ObjectStorage.from_config
