"""Tests for the MinIO storage client."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from minio.error import S3Error

from transcriptai.exceptions import (
    MediaNotFoundError,
    StorageDeleteError,
    StorageDownloadError,
    StorageUploadError,
)
from transcriptai.infrastructure import MinioStorageClient
from transcriptai.infrastructure.minio_storage import generate_object_key


def s3_error(code: str) -> S3Error:
    return S3Error(
        code=code,
        message="error",
        resource="/transcriptai-videos/videos/key.mp4",
        request_id="req",
        host_id="host",
        response=MagicMock(),
    )


@pytest.fixture
def minio_client() -> MagicMock:
    client = MagicMock()
    client.presigned_put_object.return_value = "https://storage/put-url"
    client.presigned_get_object.return_value = "https://storage/get-url"
    client.get_object.return_value = MagicMock(data=b"video-bytes")
    return client


@pytest.fixture
def storage(minio_client) -> MinioStorageClient:
    return MinioStorageClient(
        minio_client, "transcriptai-videos", url_expiry_seconds=3600
    )


class TestGenerateObjectKey:
    def test_key_keeps_extension_under_prefix(self):
        key = generate_object_key("My Talk.final.mov")

        assert key.startswith("videos/")
        assert key.endswith(".mov")

    def test_key_without_extension(self):
        key = generate_object_key("recording", prefix="uploads")

        assert key.startswith("uploads/")
        assert "." not in key

    def test_keys_are_unique(self):
        assert generate_object_key("a.mp4") != generate_object_key("a.mp4")


class TestMinioStorageClient:
    def test_create_upload_url(self, storage, minio_client):
        staged = storage.create_upload_url("clip.mp4", "video/mp4")

        assert staged.upload_url == "https://storage/put-url"
        assert staged.key.startswith("videos/") and staged.key.endswith(".mp4")
        minio_client.presigned_put_object.assert_called_once_with(
            bucket_name="transcriptai-videos",
            object_name=staged.key,
            expires=timedelta(hours=1),
        )

    def test_create_upload_url_failure(self, storage, minio_client):
        minio_client.presigned_put_object.side_effect = ValueError("bad credentials")

        with pytest.raises(StorageUploadError):
            storage.create_upload_url("clip.mp4", "video/mp4")

    def test_create_download_url(self, storage, minio_client):
        assert storage.create_download_url("videos/k.mp4") == "https://storage/get-url"
        minio_client.presigned_get_object.assert_called_once_with(
            bucket_name="transcriptai-videos",
            object_name="videos/k.mp4",
            expires=timedelta(hours=1),
        )

    def test_download_releases_connection(self, storage, minio_client):
        data = storage.download("videos/k.mp4")

        assert data == b"video-bytes"
        response = minio_client.get_object.return_value
        response.close.assert_called_once()
        response.release_conn.assert_called_once()

    def test_download_missing_key(self, storage, minio_client):
        minio_client.get_object.side_effect = s3_error("NoSuchKey")

        with pytest.raises(MediaNotFoundError) as exc_info:
            storage.download("videos/missing.mp4")

        assert exc_info.value.status_code == 400

    def test_download_other_s3_error(self, storage, minio_client):
        minio_client.get_object.side_effect = s3_error("AccessDenied")

        with pytest.raises(StorageDownloadError):
            storage.download("videos/k.mp4")

    def test_delete(self, storage, minio_client):
        storage.delete("videos/k.mp4")

        minio_client.remove_object.assert_called_once_with(
            bucket_name="transcriptai-videos", object_name="videos/k.mp4"
        )

    def test_delete_failure(self, storage, minio_client):
        minio_client.remove_object.side_effect = s3_error("AccessDenied")

        with pytest.raises(StorageDeleteError):
            storage.delete("videos/k.mp4")

    def test_ensure_bucket_creates_missing_bucket(self, storage, minio_client):
        minio_client.bucket_exists.return_value = False

        storage.ensure_bucket_exists()

        minio_client.make_bucket.assert_called_once_with(
            bucket_name="transcriptai-videos"
        )

    def test_ensure_bucket_keeps_existing_bucket(self, storage, minio_client):
        minio_client.bucket_exists.return_value = True

        storage.ensure_bucket_exists()

        minio_client.make_bucket.assert_not_called()
