"""Abstract interface for transcription backends."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for media-to-text transcription backends."""

    @abstractmethod
    async def transcribe(self, media: bytes, mime_type: str) -> str:
        """
        Transcribes media into free-form timestamped text.

        Args:
            media: Raw media file bytes.
            mime_type: MIME type of the media.

        Returns:
            The text produced by the backend, possibly empty.

        Raises:
            QuotaExceededError: If the backend is rate limited.
            TranscriptionError: If the call fails for any other reason.
        """
        pass
