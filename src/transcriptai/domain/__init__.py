"""Domain layer exports."""

from .models import (
    MediaMetadata,
    StagedUpload,
    TranscriptionResult,
    TranscriptSegment,
    TranscriptStatus,
)
from .segment_parser import parse_transcript
from .session_store import TranscriptSession
from .transcript_export import export_filename, format_transcript

__all__ = [
    "MediaMetadata",
    "StagedUpload",
    "TranscriptionResult",
    "TranscriptSegment",
    "TranscriptStatus",
    "TranscriptSession",
    "parse_transcript",
    "export_filename",
    "format_transcript",
]
