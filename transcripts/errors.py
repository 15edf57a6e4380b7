"""Errors raised while loading and parsing transcript files."""

from __future__ import annotations


class TranscriptError(RuntimeError):
    """Base error for transcript loading failures."""


class InvalidFilenameError(TranscriptError):
    """Raised when a path has no file-name component."""


class TranscriptReadError(TranscriptError):
    """Raised when a transcript file cannot be read."""


class MalformedTimestampError(TranscriptError):
    """Raised when a subtitle timecode line cannot be parsed."""
