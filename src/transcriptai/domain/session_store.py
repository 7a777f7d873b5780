"""Session-scoped state for a single media upload and its transcript."""

from collections.abc import Callable

from .models import MediaMetadata, TranscriptionResult, TranscriptStatus

SessionListener = Callable[["TranscriptSession"], None]


class TranscriptSession:
    """
    Holds the current media, transcript, status and error for one session.

    Every mutation notifies subscribed listeners with the session itself once
    the change has been applied.
    """

    def __init__(self):
        self._listeners: list[SessionListener] = []
        self.media: bytes | None = None
        self.metadata: MediaMetadata | None = None
        self.result: TranscriptionResult | None = None
        self.status: TranscriptStatus = "idle"
        self.error: str | None = None

    @property
    def raw_transcript(self) -> str:
        return self.result.raw if self.result else ""

    @property
    def segments(self):
        return self.result.segments if self.result else []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Registers a listener called after each state change.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_media(self, media: bytes, metadata: MediaMetadata) -> None:
        """Installs new media, discarding any previous result and error."""
        self.media = media
        self.metadata = metadata
        self.status = "idle"
        self.error = None
        self.result = None
        self._notify()

    def set_status(self, status: TranscriptStatus) -> None:
        self.status = status
        self._notify()

    def set_result(self, result: TranscriptionResult) -> None:
        self.result = result
        self.status = "completed"
        self._notify()

    def set_error(self, message: str) -> None:
        self.error = message
        self.status = "error"
        self._notify()

    def edit_segment_text(self, segment_id: str, text: str) -> None:
        """Replaces the text of one segment in place; unknown ids are ignored."""
        if self.result is None:
            return
        for segment in self.result.segments:
            if segment.id == segment_id:
                segment.text = text
                self._notify()
                return

    def reset(self) -> None:
        self.media = None
        self.metadata = None
        self.result = None
        self.status = "idle"
        self.error = None
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
