"""Transcription and export endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile
from fastapi.responses import PlainTextResponse

from transcriptai.config import AppConfig
from transcriptai.dependencies import (
    get_config,
    get_orchestrator,
    get_upload_orchestrator,
)
from transcriptai.domain import (
    MediaMetadata,
    TranscriptionResult,
    export_filename,
    format_transcript,
)
from transcriptai.exceptions import TranscriptAIError, TranscriptionError
from transcriptai.handlers import TranscriptionOrchestrator, validate_media
from transcriptai.logging import setup_logging
from transcriptai.response_models import (
    ERROR_RESPONSES,
    ExportRequest,
    GenerateTranscriptRequest,
)

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcripts"], responses=ERROR_RESPONSES)

OrchestratorDep = Annotated[TranscriptionOrchestrator, Depends(get_orchestrator)]
UploadOrchestratorDep = Annotated[
    TranscriptionOrchestrator, Depends(get_upload_orchestrator)
]
ConfigDep = Annotated[AppConfig, Depends(get_config)]


@router.post("/generate-transcript", response_model=TranscriptionResult)
async def generate_transcript(
    request: GenerateTranscriptRequest, orchestrator: OrchestratorDep
) -> TranscriptionResult:
    """Transcribes staged media and deletes it from storage afterwards."""
    logger.info(
        "Received transcription request",
        extra={"object_name": request.key, "mime_type": request.mime_type},
    )
    try:
        return await orchestrator.transcribe_staged(request.key, request.mime_type)
    except TranscriptAIError:
        raise
    except Exception as e:
        logger.exception(
            "Transcription request failed", extra={"object_name": request.key}
        )
        raise TranscriptionError(cause=e) from e


@router.post("/generate-transcript/upload", response_model=TranscriptionResult)
async def generate_transcript_from_upload(
    file: UploadFile, orchestrator: UploadOrchestratorDep, config: ConfigDep
) -> TranscriptionResult:
    """Transcribes media sent directly in a multipart form without staging it."""
    metadata = MediaMetadata(
        name=file.filename or "upload",
        size=file.size or 0,
        content_type=file.content_type or config.transcription.default_mime_type,
    )
    validate_media(metadata, config.upload)

    data = await file.read()
    if file.size is None:
        metadata = metadata.model_copy(update={"size": len(data)})
        validate_media(metadata, config.upload)

    logger.info(
        "Received direct transcription request",
        extra={"file_name": metadata.name, "size": metadata.size},
    )
    try:
        return await orchestrator.transcribe(data, metadata.content_type)
    except TranscriptAIError:
        raise
    except Exception as e:
        logger.exception(
            "Transcription request failed", extra={"file_name": metadata.name}
        )
        raise TranscriptionError(cause=e) from e


@router.post("/transcripts/export", response_class=PlainTextResponse)
def export_transcript(request: ExportRequest) -> PlainTextResponse:
    """Renders edited segments as a downloadable plain-text transcript."""
    filename = export_filename(request.name)
    return PlainTextResponse(
        format_transcript(request.segments),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
