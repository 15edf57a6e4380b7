"""Transcript format detection from file extension and content."""

from __future__ import annotations

from pathlib import Path
import re

from .models import FileFormat


# Index line followed by an SRT timecode line; LF or CRLF line breaks.
SUBTITLE_SIGNATURE = re.compile(
    r"\d+\s*\r?\n\d{2}:\d{2}:\d{2}[,.]\d{3} --> \d{2}:\d{2}:\d{2}[,.]\d{3}"
)


def looks_like_subtitle(content: str) -> bool:
    """Return True if the content contains an SRT block header."""

    return SUBTITLE_SIGNATURE.search(content) is not None


def detect_format(path: Path, content: str) -> FileFormat:
    """Classify a decoded transcript file.

    `.srt` and `.md` are trusted as-is. A `.txt` file is checked for the
    subtitle signature, since many tools export SRT blocks with a `.txt`
    extension. Anything else falls back to content sniffing.
    """

    extension = path.suffix.lower()
    if extension == ".srt":
        return FileFormat.SUBTITLE
    if extension == ".md":
        return FileFormat.MARKDOWN
    if extension == ".txt":
        return FileFormat.SUBTITLE if looks_like_subtitle(content) else FileFormat.PLAIN_TEXT

    if looks_like_subtitle(content):
        return FileFormat.SUBTITLE
    if "# " in content or "## " in content:
        return FileFormat.MARKDOWN
    return FileFormat.PLAIN_TEXT
