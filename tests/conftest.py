"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from transcriptai.config import AppConfig, GeminiConfig, StorageConfig
from transcriptai.handlers import TranscriptionOrchestrator
from transcriptai.infrastructure.interfaces import StorageClient, TranscriptionService

SAMPLE_TRANSCRIPT = (
    "[00:01] Welcome to the show.\n"
    "Today we talk about rivers.\n"
    "[00:07]: First, the Danube.\n"
    "[00:12] - Then the Rhine."
)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        gemini=GeminiConfig(api_key="test-key"),
        storage=StorageConfig(
            endpoint="localhost:9000",
            access_key="access",
            secret_key="secret",
            secure=False,
        ),
    )


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock(spec=StorageClient)
    storage.download.return_value = b"media-bytes"
    return storage


@pytest.fixture
def transcription_service() -> MagicMock:
    service = MagicMock(spec=TranscriptionService)
    service.transcribe = AsyncMock(return_value=SAMPLE_TRANSCRIPT)
    return service


@pytest.fixture
def orchestrator(transcription_service, storage) -> TranscriptionOrchestrator:
    return TranscriptionOrchestrator(
        transcription_service, storage, timeout_seconds=0.05
    )
