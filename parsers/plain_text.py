"""Plain text transcript parser.

Lines may carry a timestamp in one of several common notations (see
`parsers.timestamps`). Lines without one are placed after the previous line
using a reading-speed estimate, so untimed text still gets monotonic timing.
"""

from __future__ import annotations

from transcripts.models import TranscriptionSegment

from .base import SegmentParser, estimate_duration
from .timestamps import extract_timestamp


class PlainTextParser(SegmentParser):
    """Parse one segment per non-blank line of free-form text."""

    def parse(self, content: str, filename: str) -> list[TranscriptionSegment]:
        segments: list[TranscriptionSegment] = []
        cursor = 0.0

        for index, raw_line in enumerate(content.splitlines()):
            line = raw_line.strip()
            if not line:
                continue

            start_time = cursor
            end_time = None
            text = line

            found = extract_timestamp(line)
            if found is not None:
                if found.start is not None:
                    start_time = found.start
                end_time = found.end
                cursor = start_time
                text = found.strip_from(line)

            text = text.lstrip(":").strip()
            if not text or _is_speaker_label(text):
                continue

            if end_time is None:
                duration = estimate_duration(text)
                if found is not None:
                    end_time = start_time + duration
                else:
                    cursor += duration
                    end_time = cursor

            segments.append(
                TranscriptionSegment(
                    start_time=start_time,
                    end_time=end_time,
                    text=text,
                    file_index=index,
                    original_filename=filename,
                )
            )

        if not segments and content.strip():
            segments.append(
                TranscriptionSegment(
                    start_time=0.0,
                    end_time=None,
                    text=content.strip(),
                    file_index=0,
                    original_filename=filename,
                )
            )

        return segments


def _is_speaker_label(text: str) -> bool:
    """True for a line that is only a speaker name such as "Anna:"."""

    return text.endswith(":") and len(text.split()) == 1
