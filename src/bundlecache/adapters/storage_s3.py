"""S3 storage adapter."""

from pathlib import Path
from typing import Any, BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.errors import StorageError

GZIP_MAGIC = b"\x1f\x8b\x08"
ZIP_MAGIC = b"PK\x03\x04"


def detect_content_type(data: bytes) -> str:
    """Sniff the content type from the leading bytes of a payload."""
    if data.startswith(GZIP_MAGIC):
        return "application/x-gzip"
    if data.startswith(ZIP_MAGIC):
        return "application/zip"
    return "application/octet-stream"


class S3StorageAdapter:
    """S3 implementation of StoragePort, bound to one bucket."""

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: Any | None = None,
    ):
        """Initialize with static credentials or an existing boto3 client."""
        self.bucket = bucket
        if client is None:
            try:
                client = boto3.client(
                    "s3",
                    region_name=region,
                    aws_access_key_id=access_key,
                    aws_secret_access_key=secret_key,
                )
            except (BotoCoreError, ValueError) as e:
                raise StorageError(f"Unable to create S3 client: {e}") from e
        self.client = client

    def put(self, key: str, local_file: Path) -> int:
        data = local_file.read_bytes()
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentLength=len(data),
                ContentType=detect_content_type(data),
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to upload s3://{self.bucket}/{key}: {e}") from e
        return len(data)

    def get(self, key: str, out: BinaryIO) -> None:
        # download_fileobj uses the transfer manager (ranged, multipart-aware)
        try:
            self.client.download_fileobj(Bucket=self.bucket, Key=key, Fileobj=out)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to download s3://{self.bucket}/{key}: {e}") from e
