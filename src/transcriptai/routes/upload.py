"""Media staging endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from transcriptai.config import AppConfig
from transcriptai.dependencies import get_config, get_storage
from transcriptai.domain import MediaMetadata
from transcriptai.handlers import validate_media
from transcriptai.infrastructure.interfaces import StorageClient
from transcriptai.logging import setup_logging
from transcriptai.response_models import (
    ERROR_RESPONSES,
    DownloadUrlResponse,
    UploadUrlRequest,
    UploadUrlResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["media"], responses=ERROR_RESPONSES)

StorageDep = Annotated[StorageClient, Depends(get_storage)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]


@router.post("/upload-url", response_model=UploadUrlResponse)
def create_upload_url(
    request: UploadUrlRequest, storage: StorageDep, config: ConfigDep
) -> UploadUrlResponse:
    """
    Returns a presigned URL the client uploads media to directly.

    The returned key must be passed to the transcription endpoint.
    """
    validate_media(
        MediaMetadata(
            name=request.filename,
            size=request.size or 0,
            content_type=request.content_type,
        ),
        config.upload,
    )

    logger.info(
        "Generating presigned URL",
        extra={"file_name": request.filename, "content_type": request.content_type},
    )
    staged = storage.create_upload_url(request.filename, request.content_type)
    return UploadUrlResponse(upload_url=staged.upload_url, key=staged.key)


@router.get("/media/download-url", response_model=DownloadUrlResponse)
def create_download_url(
    storage: StorageDep, key: Annotated[str, Query(min_length=1)]
) -> DownloadUrlResponse:
    """Returns a presigned URL for reading a staged object."""
    return DownloadUrlResponse(download_url=storage.create_download_url(key))
