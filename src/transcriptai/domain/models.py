"""Domain models for transcription."""

from typing import Literal

from pydantic import BaseModel, Field

TranscriptStatus = Literal["idle", "processing", "completed", "error"]


class TranscriptSegment(BaseModel):
    """A single timestamped, editable unit of transcript text."""

    id: str
    timestamp: str
    text: str


class TranscriptionResult(BaseModel):
    """Raw model output together with the segments parsed from it."""

    raw: str
    segments: list[TranscriptSegment]


class MediaMetadata(BaseModel, frozen=True):
    """Descriptive information about an uploaded media file."""

    name: str
    size: int = Field(ge=0)
    content_type: str
    duration: float | None = None
    url: str | None = None


class StagedUpload(BaseModel, frozen=True):
    """A presigned upload target and the storage key it writes to."""

    upload_url: str
    key: str
