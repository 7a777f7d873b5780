from transcriptai.domain import (
    MediaMetadata,
    TranscriptionResult,
    TranscriptSegment,
    TranscriptSession,
    parse_transcript,
)
from transcriptai.exceptions import (
    ConfigurationError,
    EmptyTranscriptError,
    InputError,
    QuotaExceededError,
    StorageError,
    TranscriptAIError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from transcriptai.logging import setup_logging

__all__ = [
    "setup_logging",
    "parse_transcript",
    "MediaMetadata",
    "TranscriptionResult",
    "TranscriptSegment",
    "TranscriptSession",
    "TranscriptAIError",
    "ConfigurationError",
    "InputError",
    "EmptyTranscriptError",
    "TranscriptionTimeoutError",
    "QuotaExceededError",
    "StorageError",
    "TranscriptionError",
]
