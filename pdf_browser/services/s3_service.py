import logging
from datetime import datetime, timezone
from typing import Iterator, List

import boto3
from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from pdf_browser.config import Settings
from pdf_browser.errors import ObjectNotFound, StoreUnavailable
from pdf_browser.models import FileStream, StoredFile

logger = logging.getLogger(__name__)

RECOGNIZED_EXTENSIONS = (".pdf",)
CHUNK_SIZE = 64 * 1024

_MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


def build_s3_client(settings: Settings):
    """Create the boto3 S3 client described by *settings*.

    With ``settings.anonymous`` requests go out unsigned, which is enough
    for buckets that allow public list/get.
    """
    config = Config(signature_version=UNSIGNED) if settings.anonymous else None
    return boto3.client(
        "s3",
        region_name=settings.aws_region,
        endpoint_url=settings.endpoint_url,
        config=config,
    )


def is_recognized(key: str) -> bool:
    return key.lower().endswith(RECOGNIZED_EXTENSIONS)


def _to_stored_file(obj: dict) -> StoredFile:
    return StoredFile(
        key=obj["Key"],
        last_modified=obj.get("LastModified") or datetime.now(timezone.utc),
        size=obj.get("Size") or 0,
        etag=(obj.get("ETag") or "").replace('"', ""),
    )


def _iter_body(body, key: str) -> Iterator[bytes]:
    try:
        for chunk in body.iter_chunks(chunk_size=CHUNK_SIZE):
            yield chunk
    finally:
        body.close()
        logger.debug("Closed object body for %s", key)


class S3Store:
    """Read-only access to the PDFs kept in one bucket."""

    def __init__(self, client, bucket: str):
        self.client = client
        self.bucket = bucket

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3Store":
        return cls(build_s3_client(settings), settings.bucket_name)

    def list_files(self, prefix: str = "") -> List[StoredFile]:
        """List recognized files under *prefix*, most recently modified first."""
        params = {"Bucket": self.bucket}
        if prefix:
            params["Prefix"] = prefix

        try:
            response = self.client.list_objects_v2(**params)
        except (ClientError, BotoCoreError) as exc:
            logger.exception("Error listing objects in %s (prefix=%r)", self.bucket, prefix)
            raise StoreUnavailable("Failed to list files from S3") from exc

        files = [
            _to_stored_file(obj)
            for obj in response.get("Contents", [])
            if obj.get("Key") and is_recognized(obj["Key"])
        ]
        files.sort(key=lambda f: f.last_modified, reverse=True)

        logger.info("Listed %d file(s) in %s (prefix=%r)", len(files), self.bucket, prefix)
        return files

    def open_file_stream(self, key: str) -> FileStream:
        """Open the object stored under *key* for streaming."""
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in _MISSING_OBJECT_CODES:
                logger.warning("Object %s not found in %s", key, self.bucket)
                raise ObjectNotFound(key) from exc
            logger.exception("Error fetching %s from %s", key, self.bucket)
            raise StoreUnavailable("Failed to stream file from S3") from exc
        except BotoCoreError as exc:
            logger.exception("Error fetching %s from %s", key, self.bucket)
            raise StoreUnavailable("Failed to stream file from S3") from exc

        body = response.get("Body")
        if body is None:
            logger.error("No file content received for %s", key)
            raise ObjectNotFound(key)

        return FileStream(
            key=key,
            chunks=_iter_body(body, key),
            content_length=response.get("ContentLength"),
        )
