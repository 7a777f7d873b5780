"""Plain-text rendering of edited transcripts."""

from .models import TranscriptSegment


def format_transcript(segments: list[TranscriptSegment]) -> str:
    """Renders segments as ``MM:SS text`` lines in display order."""
    return "\n".join(f"{s.timestamp} {s.text}" for s in segments)


def export_filename(media_name: str | None) -> str:
    return f"transcript-{media_name or 'video'}.txt"
