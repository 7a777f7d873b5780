"""FastAPI dependency injection configuration."""

from functools import lru_cache
from pathlib import Path

from google import genai
from minio import Minio

from transcriptai.config import AppConfig, load_config
from transcriptai.exceptions import ConfigurationError
from transcriptai.handlers import TranscriptionOrchestrator
from transcriptai.infrastructure import GeminiTranscriber, MinioStorageClient
from transcriptai.infrastructure.interfaces import StorageClient, TranscriptionService
from transcriptai.logging import setup_logging

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    config = get_config().storage
    minio_client = Minio(
        endpoint=config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        secure=config.secure,
        region=config.region,
    )
    logger.info(
        "Storage client initialized",
        extra={"endpoint": config.endpoint, "bucket_name": config.bucket_name},
    )
    storage = MinioStorageClient(
        minio_client,
        config.bucket_name,
        url_expiry_seconds=config.presigned_url_expiry_seconds,
        key_prefix=config.key_prefix,
    )
    storage.ensure_bucket_exists()
    return storage


@lru_cache
def get_transcription_service() -> TranscriptionService:
    """
    Returns the configured Gemini transcriber.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set.
    """
    config = get_config().gemini
    if not config.api_key:
        logger.error("Gemini API key is not configured")
        raise ConfigurationError("GEMINI_API_KEY")

    prompt_path = Path(__file__).parent / config.prompt_path
    prompt = prompt_path.read_text(encoding="utf-8").strip()
    client = genai.Client(api_key=config.api_key)
    return GeminiTranscriber(client, config.model_name, prompt, config.temperature)


def get_orchestrator() -> TranscriptionOrchestrator:
    """Returns an orchestrator wired to the configured backends."""
    config = get_config().transcription
    return TranscriptionOrchestrator(
        get_transcription_service(),
        get_storage(),
        timeout_seconds=config.timeout_seconds,
        default_mime_type=config.default_mime_type,
    )


def get_upload_orchestrator() -> TranscriptionOrchestrator:
    """Returns an orchestrator for in-memory media; it never touches storage."""
    config = get_config().transcription
    return TranscriptionOrchestrator(
        get_transcription_service(),
        timeout_seconds=config.timeout_seconds,
        default_mime_type=config.default_mime_type,
    )
