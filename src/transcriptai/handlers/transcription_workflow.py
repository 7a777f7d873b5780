"""Drives a session through upload, transcription and result recording."""

from transcriptai.config import UploadConfig
from transcriptai.domain import MediaMetadata, TranscriptSession
from transcriptai.exceptions import (
    InputError,
    InvalidMediaTypeError,
    MediaTooLargeError,
    TranscriptAIError,
)
from transcriptai.logging import setup_logging

from .transcription_orchestrator import TranscriptionOrchestrator

logger = setup_logging()


def validate_media(metadata: MediaMetadata, policy: UploadConfig) -> None:
    """
    Checks uploaded media against the allowed types and size limit.

    Raises:
        InvalidMediaTypeError: If the content type is not allowed.
        MediaTooLargeError: If the file exceeds the size limit.
    """
    if metadata.content_type not in policy.allowed_content_types:
        raise InvalidMediaTypeError(
            metadata.content_type, policy.allowed_content_types
        )
    if metadata.size > policy.max_size_bytes:
        raise MediaTooLargeError(metadata.size, policy.max_size_mb)


class TranscriptionWorkflow:
    """Connects a TranscriptSession to the transcription orchestrator."""

    def __init__(
        self,
        session: TranscriptSession,
        orchestrator: TranscriptionOrchestrator,
        upload_policy: UploadConfig | None = None,
    ):
        self._session = session
        self._orchestrator = orchestrator
        self._upload_policy = upload_policy or UploadConfig()

    async def submit(self, media: bytes, metadata: MediaMetadata) -> None:
        """Validates and installs new media, then transcribes it."""
        try:
            validate_media(metadata, self._upload_policy)
        except InputError as e:
            logger.warning(
                "Upload rejected",
                extra={"file_name": metadata.name, "reason": str(e)},
            )
            self._session.set_error(str(e))
            return

        self._session.set_media(media, metadata)
        await self.run()

    async def run(self) -> None:
        """Transcribes the session's current media if it is waiting to be processed."""
        session = self._session
        if session.media is None or session.status != "idle":
            return

        mime_type = session.metadata.content_type if session.metadata else None
        session.set_status("processing")
        try:
            result = await self._orchestrator.transcribe(session.media, mime_type)
        except TranscriptAIError as e:
            session.set_error(str(e))
            return
        except Exception:
            logger.exception("Unexpected transcription failure")
            session.set_error("An unknown error occurred")
            return

        session.set_result(result)
        logger.info(
            "Session transcript ready",
            extra={"segment_count": len(result.segments)},
        )
