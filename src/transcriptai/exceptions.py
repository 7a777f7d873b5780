"""Custom exceptions for the transcriptai service."""


class TranscriptAIError(Exception):
    """Base class for every classified failure surfaced to callers."""

    status_code: int = 500

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(TranscriptAIError):
    """Raised when a required credential or setting is missing."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(
            f"{setting} is missing. Please set the {setting} environment variable."
        )


class InputError(TranscriptAIError):
    """Raised when caller-supplied input is missing or invalid."""

    status_code = 400


class InvalidMediaTypeError(InputError):
    """Raised when uploaded media has a disallowed content type."""

    def __init__(self, content_type: str, allowed: tuple[str, ...]):
        self.content_type = content_type
        self.allowed = allowed
        super().__init__(
            f"Invalid file type '{content_type}'. Allowed: {', '.join(allowed)}"
        )


class MediaTooLargeError(InputError):
    """Raised when uploaded media exceeds the size limit."""

    def __init__(self, size: int, max_size_mb: int):
        self.size = size
        self.max_size_mb = max_size_mb
        super().__init__(
            f"File too large ({size / 1024 / 1024:.2f}MB). Max {max_size_mb}MB."
        )


class MediaNotFoundError(InputError):
    """Raised when a staged media key does not exist in storage."""

    def __init__(self, key: str, cause: Exception | None = None):
        self.key = key
        super().__init__(f"Staged media '{key}' was not found", cause)


class EmptyTranscriptError(TranscriptAIError):
    """Raised when the model succeeded but produced no transcript text."""

    status_code = 422

    def __init__(self):
        super().__init__(
            "No speech could be transcribed from this file. "
            "It may be silent or contain only background noise."
        )


class TranscriptionTimeoutError(TranscriptAIError):
    """Raised when the transcription call exceeds its deadline."""

    status_code = 504

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Transcription timed out after {timeout_seconds:g} seconds. "
            "Try a shorter file."
        )


class QuotaExceededError(TranscriptAIError):
    """Raised when the transcription backend reports rate or quota exhaustion."""

    status_code = 429

    def __init__(self, cause: Exception | None = None):
        super().__init__(
            "Transcription quota exceeded. Please try again later.", cause
        )


class TranscriptionError(TranscriptAIError):
    """Raised when transcription fails for an unclassified reason."""

    def __init__(
        self,
        message: str = "Failed to generate transcript.",
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)


class StorageError(TranscriptAIError):
    """Base class for object storage failures."""


class StorageDownloadError(StorageError):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to download '{object_name}' from storage", cause)


class StorageUploadError(StorageError):
    """Raised when staging a file in storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to prepare upload of '{object_name}'", cause)


class StorageDeleteError(StorageError):
    """Raised when deleting a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to delete '{object_name}' from storage", cause)
