"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, computed_field


class GeminiConfig(BaseModel, frozen=True):
    """Gemini transcription model configuration."""

    api_key: str
    model_name: str = "gemini-3-flash-preview"
    temperature: float = 0.2
    prompt_path: Path = Path("prompts/transcription.txt")


class StorageConfig(BaseModel, frozen=True):
    """S3-compatible object storage configuration (MinIO or Cloudflare R2)."""

    endpoint: str
    access_key: str
    secret_key: str
    bucket_name: str = "transcriptai-videos"
    secure: bool = True
    region: str = "auto"
    presigned_url_expiry_seconds: int = 3600
    key_prefix: str = "videos"


class TranscriptionConfig(BaseModel, frozen=True):
    """Transcription request configuration."""

    timeout_seconds: float = 300.0
    default_mime_type: str = "video/mp4"


class UploadConfig(BaseModel, frozen=True):
    """Constraints applied to uploaded media."""

    allowed_content_types: tuple[str, ...] = (
        "video/mp4",
        "video/webm",
        "video/quicktime",
        "audio/mpeg",
        "audio/wav",
    )
    max_size_mb: int = 1000

    @computed_field
    @property
    def max_size_bytes(self) -> int:
        """Returns the upload size limit in bytes."""
        return self.max_size_mb * 1024 * 1024


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    storage: StorageConfig
    transcription: TranscriptionConfig = TranscriptionConfig()
    upload: UploadConfig = UploadConfig()


def _default_storage_endpoint() -> str:
    account_id = os.getenv("R2_ACCOUNT_ID", "")
    if account_id:
        return f"{account_id}.r2.cloudflarestorage.com"
    return "minio:9000"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-3-flash-preview"),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("STORAGE_ENDPOINT", _default_storage_endpoint()),
            access_key=os.getenv("STORAGE_ACCESS_KEY", ""),
            secret_key=os.getenv("STORAGE_SECRET_KEY", ""),
            bucket_name=os.getenv("STORAGE_BUCKET", "transcriptai-videos"),
            secure=os.getenv("STORAGE_SECURE", "true").lower() == "true",
            region=os.getenv("STORAGE_REGION", "auto"),
        ),
        transcription=TranscriptionConfig(
            timeout_seconds=float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "300")),
        ),
        upload=UploadConfig(
            max_size_mb=int(os.getenv("MAX_UPLOAD_SIZE_MB", "1000")),
        ),
    )
