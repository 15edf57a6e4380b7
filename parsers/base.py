"""Base interface for transcript segment parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from transcripts.models import TranscriptionSegment


WORDS_PER_MINUTE = 150.0
MIN_SEGMENT_SECONDS = 1.0


def estimate_duration(text: str) -> float:
    """Estimate how long `text` takes to speak, in seconds (at least one)."""

    words = len(text.split())
    return max(words / WORDS_PER_MINUTE * 60.0, MIN_SEGMENT_SECONDS)


class SegmentParser(ABC):
    """Interface for turning decoded transcript text into timed segments."""

    @abstractmethod
    def parse(self, content: str, filename: str) -> list[TranscriptionSegment]:
        """Parse decoded file content into segments.

        Args:
            content: Decoded text of one transcript file.
            filename: File name recorded on every produced segment.

        Returns:
            Segments in file order (`file_index` strictly increasing).
        """
