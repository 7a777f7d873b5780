"""Tests for the session transcription workflow."""

import pytest

from transcriptai.config import UploadConfig
from transcriptai.domain import MediaMetadata, TranscriptSession
from transcriptai.exceptions import (
    InvalidMediaTypeError,
    MediaTooLargeError,
    TranscriptionTimeoutError,
)
from transcriptai.handlers import TranscriptionWorkflow, validate_media


@pytest.fixture
def session() -> TranscriptSession:
    return TranscriptSession()


@pytest.fixture
def workflow(session, orchestrator) -> TranscriptionWorkflow:
    return TranscriptionWorkflow(session, orchestrator, UploadConfig(max_size_mb=1))


def make_metadata(**overrides) -> MediaMetadata:
    values = {"name": "clip.mp4", "size": 1024, "content_type": "video/mp4"}
    values.update(overrides)
    return MediaMetadata(**values)


class TestValidateMedia:
    def test_accepts_allowed_media(self):
        validate_media(make_metadata(content_type="audio/wav"), UploadConfig())

    def test_rejects_disallowed_type(self):
        with pytest.raises(InvalidMediaTypeError) as exc_info:
            validate_media(make_metadata(content_type="image/png"), UploadConfig())

        assert exc_info.value.status_code == 400

    def test_rejects_oversized_file(self):
        with pytest.raises(MediaTooLargeError) as exc_info:
            validate_media(
                make_metadata(size=2 * 1024 * 1024), UploadConfig(max_size_mb=1)
            )

        assert "Max 1MB" in str(exc_info.value)


class TestTranscriptionWorkflow:
    @pytest.mark.asyncio
    async def test_submit_runs_to_completion(
        self, workflow, session, transcription_service
    ):
        statuses = []
        session.subscribe(lambda s: statuses.append(s.status))

        await workflow.submit(b"media", make_metadata(content_type="video/webm"))

        assert statuses == ["idle", "processing", "completed"]
        assert session.error is None
        assert [s.id for s in session.segments] == ["seg-0", "seg-1"]
        transcription_service.transcribe.assert_awaited_once_with(
            b"media", "video/webm"
        )

    @pytest.mark.asyncio
    async def test_submit_rejects_invalid_media(
        self, workflow, session, transcription_service
    ):
        await workflow.submit(b"media", make_metadata(content_type="text/plain"))

        assert session.status == "error"
        assert session.error.startswith("Invalid file type")
        assert session.media is None
        transcription_service.transcribe.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_is_recorded_as_error(
        self, workflow, session, transcription_service
    ):
        transcription_service.transcribe.side_effect = TranscriptionTimeoutError(300)

        await workflow.submit(b"media", make_metadata())

        assert session.status == "error"
        assert "timed out" in session.error
        assert session.result is None

    @pytest.mark.asyncio
    async def test_new_upload_replaces_previous_result(
        self, workflow, session, transcription_service
    ):
        await workflow.submit(b"first", make_metadata(name="first.mp4"))
        transcription_service.transcribe.return_value = "[00:09] Second take"

        await workflow.submit(b"second", make_metadata(name="second.mp4"))

        assert session.metadata.name == "second.mp4"
        assert [s.text for s in session.segments] == ["Second take"]

    @pytest.mark.asyncio
    async def test_run_ignores_session_that_is_not_idle(
        self, workflow, session, transcription_service
    ):
        session.set_media(b"media", make_metadata())
        session.set_status("processing")

        await workflow.run()

        transcription_service.transcribe.assert_not_awaited()
        assert session.status == "processing"

    @pytest.mark.asyncio
    async def test_run_without_media_is_noop(
        self, workflow, session, transcription_service
    ):
        await workflow.run()

        transcription_service.transcribe.assert_not_awaited()
        assert session.status == "idle"
