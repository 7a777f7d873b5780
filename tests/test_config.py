"""Tests for configuration loading."""

import pytest

from transcriptai.config import UploadConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "R2_ACCOUNT_ID",
        "STORAGE_ENDPOINT",
        "STORAGE_BUCKET",
        "STORAGE_SECURE",
        "TRANSCRIPTION_TIMEOUT_SECONDS",
        "MAX_UPLOAD_SIZE_MB",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()

        assert config.gemini.api_key == ""
        assert config.gemini.model_name == "gemini-3-flash-preview"
        assert config.gemini.temperature == 0.2
        assert config.storage.endpoint == "minio:9000"
        assert config.storage.bucket_name == "transcriptai-videos"
        assert config.storage.presigned_url_expiry_seconds == 3600
        assert config.transcription.timeout_seconds == 300
        assert config.upload.max_size_mb == 1000

    def test_r2_account_sets_endpoint(self, monkeypatch):
        monkeypatch.setenv("R2_ACCOUNT_ID", "abc123")

        config = load_config()

        assert config.storage.endpoint == "abc123.r2.cloudflarestorage.com"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "secret")
        monkeypatch.setenv("STORAGE_ENDPOINT", "localhost:9000")
        monkeypatch.setenv("STORAGE_SECURE", "false")
        monkeypatch.setenv("TRANSCRIPTION_TIMEOUT_SECONDS", "45")
        monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "50")

        config = load_config()

        assert config.gemini.api_key == "secret"
        assert config.storage.endpoint == "localhost:9000"
        assert config.storage.secure is False
        assert config.transcription.timeout_seconds == 45
        assert config.upload.max_size_bytes == 50 * 1024 * 1024

    def test_default_allowed_types(self):
        assert UploadConfig().allowed_content_types == (
            "video/mp4",
            "video/webm",
            "video/quicktime",
            "audio/mpeg",
            "audio/wav",
        )
