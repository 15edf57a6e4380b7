"""Data model shared by the parsers, the merger and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional


class FileFormat(str, Enum):
    """Transcript formats understood on input and produced on output."""

    SUBTITLE = "srt"
    PLAIN_TEXT = "txt"
    MARKDOWN = "md"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> FileFormat:
        """Resolve a user-facing format name (e.g. "srt", "markdown").

        Raises:
            ValueError: If the name is not a known format.
        """

        key = (name or "").strip().lower()
        aliases = {
            "srt": cls.SUBTITLE,
            "subtitle": cls.SUBTITLE,
            "txt": cls.PLAIN_TEXT,
            "text": cls.PLAIN_TEXT,
            "md": cls.MARKDOWN,
            "markdown": cls.MARKDOWN,
        }
        if key not in aliases:
            raise ValueError(f"Unsupported output format: {name!r} (use txt, srt or md)")
        return aliases[key]


@dataclass(frozen=True, slots=True)
class TranscriptionSegment:
    """One timed unit of transcript text."""

    start_time: float
    end_time: Optional[float]
    text: str
    file_index: int
    original_filename: str

    def shifted(self, offset: float) -> TranscriptionSegment:
        """Return a copy moved forward in time by `offset` seconds."""

        end_time = self.end_time + offset if self.end_time is not None else None
        return replace(self, start_time=self.start_time + offset, end_time=end_time)


@dataclass(frozen=True, slots=True)
class TranscriptionFile:
    """A parsed input file and its segments in file order."""

    path: Path
    filename: str
    sequence_number: Optional[int]
    format: FileFormat
    segments: tuple[TranscriptionSegment, ...]

    @property
    def sort_key(self) -> tuple[bool, int]:
        """Ordering key; files without a sequence number sort last."""

        return (self.sequence_number is None, self.sequence_number or 0)


@dataclass(frozen=True, slots=True)
class MergeOptions:
    """Options controlling a single merge request."""

    output_format: FileFormat = FileFormat.PLAIN_TEXT
    time_offset_seconds: float = 0.0
    remove_timestamps: bool = False
    add_file_markers: bool = True
