"""Request and response models for the transcriptai API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from transcriptai.domain import TranscriptSegment


class CamelModel(BaseModel):
    """Base model exchanging camelCase field names over the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadUrlRequest(CamelModel):
    """Request for a presigned staging URL."""

    filename: str = Field(min_length=1)
    content_type: str = Field(min_length=1)
    size: int | None = Field(default=None, ge=0)


class UploadUrlResponse(CamelModel):
    """Presigned staging URL plus the key to echo back for transcription."""

    upload_url: str
    key: str


class DownloadUrlResponse(CamelModel):
    """Presigned read URL for a staged object."""

    download_url: str


class GenerateTranscriptRequest(CamelModel):
    """Request to transcribe previously staged media."""

    key: str = Field(min_length=1, validation_alias=AliasChoices("key", "r2Key"))
    mime_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("mimeType", "contentType", "mime_type"),
    )


class ExportRequest(CamelModel):
    """Edited segments to render as a downloadable text file."""

    name: str | None = None
    segments: list[TranscriptSegment]


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str


ERROR_RESPONSES = {
    status: {"model": ErrorResponse} for status in (400, 422, 429, 500, 504)
}
