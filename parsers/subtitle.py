"""SubRip (.srt) subtitle parser."""

from __future__ import annotations

import re

from transcripts.errors import MalformedTimestampError
from transcripts.models import TranscriptionSegment

from .base import SegmentParser


_WHOLE_RE = re.compile(r"\d+", re.ASCII)
_SECONDS_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)


class SubtitleParser(SegmentParser):
    """Parse numbered SRT blocks separated by blank lines."""

    def parse(self, content: str, filename: str) -> list[TranscriptionSegment]:
        normalized = content.replace("\r\n", "\n")
        segments: list[TranscriptionSegment] = []

        for index, block in enumerate(normalized.split("\n\n")):
            lines = block.strip().splitlines()
            if len(lines) < 3:
                continue

            start_raw, arrow, end_raw = lines[1].partition(" --> ")
            if not arrow:
                continue

            start_time = parse_subtitle_timestamp(start_raw, filename)
            end_time = parse_subtitle_timestamp(end_raw, filename)
            text = " ".join(lines[2:]).strip()
            if not text:
                continue

            segments.append(
                TranscriptionSegment(
                    start_time=start_time,
                    end_time=end_time,
                    text=text,
                    file_index=index,
                    original_filename=filename,
                )
            )

        return segments


def parse_subtitle_timestamp(value: str, filename: str = "") -> float:
    """Parse `HH:MM:SS,mmm` (or with a dot) into seconds.

    Raises:
        MalformedTimestampError: If the value is not three numeric components.
    """

    parts = value.strip().replace(",", ".").split(":")
    if len(parts) != 3:
        raise MalformedTimestampError(f"{filename}: invalid timestamp format: {value!r}")

    hours, minutes, seconds = parts
    if not (
        _WHOLE_RE.fullmatch(hours)
        and _WHOLE_RE.fullmatch(minutes)
        and _SECONDS_RE.fullmatch(seconds)
    ):
        raise MalformedTimestampError(f"{filename}: invalid timestamp format: {value!r}")

    return int(hours) * 3600.0 + int(minutes) * 60.0 + float(seconds)
