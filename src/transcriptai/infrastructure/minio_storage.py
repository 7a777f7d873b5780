"""MinIO implementation of the StorageClient interface."""

import os
import time
import uuid
from datetime import timedelta

from minio import Minio
from minio.error import S3Error

from transcriptai.domain.models import StagedUpload
from transcriptai.exceptions import (
    MediaNotFoundError,
    StorageDeleteError,
    StorageDownloadError,
    StorageUploadError,
)
from transcriptai.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()

MISSING_OBJECT_CODES = ("NoSuchKey", "NoSuchObject")


def generate_object_key(filename: str, prefix: str = "videos") -> str:
    """Builds a unique key of the form ``{prefix}/{epoch_ms}-{random}{ext}``."""
    extension = os.path.splitext(filename)[1]
    timestamp = int(time.time() * 1000)
    return f"{prefix}/{timestamp}-{uuid.uuid4().hex[:13]}{extension}"


class MinioStorageClient(StorageClient):
    """Handles staged media in any S3-compatible store through MinIO."""

    def __init__(
        self,
        client: Minio,
        bucket_name: str,
        url_expiry_seconds: int = 3600,
        key_prefix: str = "videos",
    ):
        self._client = client
        self._bucket_name = bucket_name
        self._url_expiry = timedelta(seconds=url_expiry_seconds)
        self._key_prefix = key_prefix

    def create_upload_url(self, filename: str, content_type: str) -> StagedUpload:
        key = generate_object_key(filename, self._key_prefix)
        try:
            upload_url = self._client.presigned_put_object(
                bucket_name=self._bucket_name,
                object_name=key,
                expires=self._url_expiry,
            )
        except Exception as e:
            logger.exception("Presigned upload URL failed", extra={"object_name": key})
            raise StorageUploadError(key, e) from e
        logger.info(
            "Presigned upload URL generated",
            extra={"object_name": key, "content_type": content_type},
        )
        return StagedUpload(upload_url=upload_url, key=key)

    def create_download_url(self, key: str) -> str:
        try:
            return self._client.presigned_get_object(
                bucket_name=self._bucket_name,
                object_name=key,
                expires=self._url_expiry,
            )
        except Exception as e:
            logger.exception(
                "Presigned download URL failed", extra={"object_name": key}
            )
            raise StorageDownloadError(key, e) from e

    def download(self, key: str) -> bytes:
        try:
            response = self._client.get_object(
                bucket_name=self._bucket_name, object_name=key
            )
            try:
                data = response.data
            finally:
                response.close()
                response.release_conn()
        except S3Error as e:
            if e.code in MISSING_OBJECT_CODES:
                logger.warning("Staged object not found", extra={"object_name": key})
                raise MediaNotFoundError(key, e) from e
            logger.exception("Storage download failed", extra={"object_name": key})
            raise StorageDownloadError(key, e) from e
        except Exception as e:
            logger.exception("Storage download failed", extra={"object_name": key})
            raise StorageDownloadError(key, e) from e

        logger.info(
            "File downloaded from storage",
            extra={"object_name": key, "size": len(data)},
        )
        return data

    def delete(self, key: str) -> None:
        try:
            self._client.remove_object(bucket_name=self._bucket_name, object_name=key)
        except Exception as e:
            logger.exception("Storage delete failed", extra={"object_name": key})
            raise StorageDeleteError(key, e) from e
        logger.info("File deleted from storage", extra={"object_name": key})

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(bucket_name=self._bucket_name):
            self._client.make_bucket(bucket_name=self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )
