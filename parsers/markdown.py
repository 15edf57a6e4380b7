"""Markdown transcript parser (untimed text, headings skipped)."""

from __future__ import annotations

from transcripts.models import TranscriptionSegment

from .base import SegmentParser, estimate_duration


class MarkdownParser(SegmentParser):
    """One segment per non-heading line, timed sequentially."""

    def parse(self, content: str, filename: str) -> list[TranscriptionSegment]:
        segments: list[TranscriptionSegment] = []
        cursor = 0.0

        for index, raw_line in enumerate(content.splitlines()):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            duration = estimate_duration(line)
            segments.append(
                TranscriptionSegment(
                    start_time=cursor,
                    end_time=cursor + duration,
                    text=line,
                    file_index=index,
                    original_filename=filename,
                )
            )
            cursor += duration

        return segments
