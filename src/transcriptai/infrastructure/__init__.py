"""Infrastructure layer exports."""

from .gemini_transcriber import GeminiTranscriber
from .minio_storage import MinioStorageClient

__all__ = ["GeminiTranscriber", "MinioStorageClient"]
