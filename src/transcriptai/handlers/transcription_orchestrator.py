"""Coordinates a single media-to-transcript request."""

import asyncio

from transcriptai.domain import TranscriptionResult, parse_transcript
from transcriptai.exceptions import (
    EmptyTranscriptError,
    StorageError,
    TranscriptAIError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from transcriptai.infrastructure.interfaces import StorageClient, TranscriptionService
from transcriptai.logging import setup_logging

logger = setup_logging()


class TranscriptionOrchestrator:
    """Runs the transcription backend under a deadline and parses its output."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        storage: StorageClient | None = None,
        timeout_seconds: float = 300.0,
        default_mime_type: str = "video/mp4",
    ):
        self._transcription_service = transcription_service
        self._storage = storage
        self._timeout_seconds = timeout_seconds
        self._default_mime_type = default_mime_type

    async def transcribe(
        self, media: bytes, mime_type: str | None = None
    ) -> TranscriptionResult:
        """
        Transcribes media bytes and parses the output into segments.

        Args:
            media: Raw media file bytes.
            mime_type: MIME type of the media; defaults to the configured type.

        Returns:
            TranscriptionResult with the raw text and its parsed segments.

        Raises:
            TranscriptionTimeoutError: If the backend exceeds the deadline.
            EmptyTranscriptError: If the backend returned no text.
            QuotaExceededError: If the backend is rate limited.
            TranscriptionError: For any other failure.
        """
        mime_type = mime_type or self._default_mime_type

        try:
            raw = await asyncio.wait_for(
                self._transcription_service.transcribe(media, mime_type),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                "Transcription timed out",
                extra={"timeout_seconds": self._timeout_seconds},
            )
            raise TranscriptionTimeoutError(self._timeout_seconds) from e
        except TranscriptAIError:
            raise
        except Exception as e:
            logger.exception("Transcription failed")
            raise TranscriptionError(cause=e) from e

        if not raw or not raw.strip():
            logger.warning("Transcription returned no text")
            raise EmptyTranscriptError()

        segments = parse_transcript(raw)
        logger.info(
            "Transcript parsed",
            extra={"segment_count": len(segments), "mime_type": mime_type},
        )
        return TranscriptionResult(raw=raw, segments=segments)

    async def transcribe_staged(
        self, key: str, mime_type: str | None = None
    ) -> TranscriptionResult:
        """
        Transcribes a staged storage object, deleting it afterwards.

        The staged object is deleted exactly once whether transcription
        succeeds or fails. Deletion failures are logged and never replace the
        transcription outcome.

        Raises:
            MediaNotFoundError: If the key does not exist.
            StorageDownloadError: If the staged media cannot be downloaded.
            StorageError: If the orchestrator was built without storage.
            Any error raised by transcribe().
        """
        if self._storage is None:
            raise StorageError("No storage client configured for staged media")

        logger.info("Processing staged media", extra={"object_name": key})
        try:
            media = await asyncio.to_thread(self._storage.download, key)
            return await self.transcribe(media, mime_type)
        finally:
            await self._cleanup(key)

    async def _cleanup(self, key: str) -> None:
        try:
            await asyncio.to_thread(self._storage.delete, key)
        except StorageError:
            logger.warning("Staged media cleanup failed", extra={"object_name": key})
        except Exception:
            logger.exception(
                "Staged media cleanup failed", extra={"object_name": key}
            )
