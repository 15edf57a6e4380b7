"""Timestamp grammar for free-form timestamped text.

Each rule pairs a pattern with an extractor. Rules are tried in list order and
the first pattern that matches a line decides its timing, so range forms must
stay ahead of the single-timestamp forms they would otherwise be mistaken for.
A bare number is never a timestamp; only `[N]` is read as seconds.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Callable, Optional, Sequence


# A single integer at or above this is not taken as a seconds value.
MAX_BARE_SECONDS = 3600.0


@dataclass(frozen=True, slots=True)
class TimestampMatch:
    """Timing found on a line and where it was found."""

    start: Optional[float]
    end: Optional[float]
    span: tuple[int, int]

    def strip_from(self, line: str) -> str:
        """Return `line` with the matched timestamp removed."""

        begin, finish = self.span
        return (line[:begin] + line[finish:]).strip()


def _clock_seconds(groups: Sequence[Optional[str]]) -> Optional[float]:
    """Convert captured numbers to seconds based on how many were captured.

    1 group: seconds; 2: MM:SS; 3: HH:MM:SS; 4: HH:MM:SS plus milliseconds.
    """

    count = len(groups)
    if count == 1:
        seconds = float(groups[0] or 0)
        return seconds if seconds < MAX_BARE_SECONDS else None
    if count == 2:
        minutes, seconds = (float(g or 0) for g in groups)
        return minutes * 60.0 + seconds
    if count == 3:
        hours, minutes, seconds = (float(g or 0) for g in groups)
        return hours * 3600.0 + minutes * 60.0 + seconds
    if count == 4:
        hours, minutes, seconds, millis = (float(g or 0) for g in groups)
        return hours * 3600.0 + minutes * 60.0 + seconds + millis / 1000.0
    return None


def _extract_range(match: re.Match[str]) -> TimestampMatch:
    groups = match.groups()
    half = len(groups) // 2
    return TimestampMatch(
        start=_clock_seconds(groups[:half]),
        end=_clock_seconds(groups[half:]),
        span=match.span(),
    )


def _extract_single(match: re.Match[str]) -> TimestampMatch:
    # start=None means "keep the running cursor".
    return TimestampMatch(start=_clock_seconds(match.groups()), end=None, span=match.span())


Extractor = Callable[[re.Match], TimestampMatch]

_HMS = r"(\d{1,2}):(\d{2}):(\d{2})"
_MS = r"(\d{1,2}):(\d{2})"
_MILLIS = r"(?:[.,](\d{1,3}))?"

TIMESTAMP_RULES: list[tuple[re.Pattern[str], Extractor]] = [
    # [01:30:00-01:31:25]
    (re.compile(rf"\[{_HMS}-{_HMS}\]", re.ASCII), _extract_range),
    # [00:00-01:06]
    (re.compile(rf"\[{_MS}-{_MS}\]", re.ASCII), _extract_range),
    # [00:01:02.500]
    (re.compile(rf"\[{_HMS}{_MILLIS}\]", re.ASCII), _extract_single),
    # [01:30]
    (re.compile(rf"\[{_MS}\]", re.ASCII), _extract_single),
    # 00:01:02.500 at line start
    (re.compile(rf"^{_HMS}{_MILLIS}(?:\s|$)", re.ASCII), _extract_single),
    # 01:30 at line start
    (re.compile(rf"^{_MS}(?:\s|$)", re.ASCII), _extract_single),
    # Whisper: [00:00:01.000 --> 00:00:04.000], start only
    (
        re.compile(
            rf"\[{_HMS}{_MILLIS}\s*-->\s*\d{{1,2}}:\d{{2}}:\d{{2}}(?:[.,]\d{{1,3}})?\]",
            re.ASCII,
        ),
        _extract_single,
    ),
    # [120]
    (re.compile(r"\[(\d+)\]", re.ASCII), _extract_single),
]


def extract_timestamp(line: str) -> Optional[TimestampMatch]:
    """Return the first timestamp found on a line, or None."""

    for pattern, extractor in TIMESTAMP_RULES:
        match = pattern.search(line)
        if match is not None:
            return extractor(match)
    return None
