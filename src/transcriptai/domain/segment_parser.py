"""Parses free-form model output into timestamped transcript segments."""

import re

from .models import TranscriptSegment

TIMESTAMP_PATTERN = re.compile(r"\[?(\d{1,2}:\d{2})\]?", re.ASCII)
LEADING_SEPARATOR_PATTERN = re.compile(r"^[-:]\s*")
FALLBACK_TIMESTAMP = "00:00"


def parse_transcript(text: str) -> list[TranscriptSegment]:
    """
    Converts raw transcript text into an ordered list of segments.

    Each line carrying a timestamp token (``[MM:SS]``, brackets optional)
    starts a new segment; only the first token on a line is consumed. Lines
    without a token are appended to the most recent segment, or discarded
    when no segment exists yet. Non-blank input that yields no segment at all
    becomes a single segment at ``00:00``.

    Args:
        text: The raw text returned by the transcription model.

    Returns:
        Segments in emission order, with ids ``seg-0``, ``seg-1``, ...
    """
    segments: list[TranscriptSegment] = []
    segment_index = 0

    for line in text.split("\n"):
        match = TIMESTAMP_PATTERN.search(line)
        if match:
            content = line.replace(match.group(0), "", 1)
            content = LEADING_SEPARATOR_PATTERN.sub("", content, count=1).strip()
            if content:
                segments.append(
                    TranscriptSegment(
                        id=f"seg-{segment_index}",
                        timestamp=match.group(1),
                        text=content,
                    )
                )
                segment_index += 1
        elif line.strip() and segments:
            segments[-1].text += " " + line.strip()

    if not segments and text.strip():
        segments.append(
            TranscriptSegment(
                id=f"seg-{segment_index}",
                timestamp=FALLBACK_TIMESTAMP,
                text=text.strip(),
            )
        )

    return segments
