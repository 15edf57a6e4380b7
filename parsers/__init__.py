"""Segment parser factory and exports."""

from __future__ import annotations

from transcripts.models import FileFormat

from .base import SegmentParser
from .markdown import MarkdownParser
from .plain_text import PlainTextParser
from .subtitle import SubtitleParser


def create_parser(file_format: FileFormat) -> SegmentParser:
    """Create the parser for a detected file format."""

    if file_format is FileFormat.SUBTITLE:
        return SubtitleParser()
    if file_format is FileFormat.MARKDOWN:
        return MarkdownParser()
    if file_format is FileFormat.PLAIN_TEXT:
        return PlainTextParser()
    raise ValueError(f"Unsupported transcript format: {file_format!r}")
