"""Handler layer exports."""

from .transcription_orchestrator import TranscriptionOrchestrator
from .transcription_workflow import TranscriptionWorkflow, validate_media

__all__ = ["TranscriptionOrchestrator", "TranscriptionWorkflow", "validate_media"]
