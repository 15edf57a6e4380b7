"""Timecode conversion applied to merged text before export."""

from __future__ import annotations

import re
from typing import Optional


TIMECODE_FORMATS = ("original", "hms", "hms_ms", "seconds", "seconds_ms", "custom")

# `[tc] [info] [info2] text`; the info brackets are optional.
_LINE_RE = re.compile(
    r"^\[(\d{1,2}:\d{2}(?::\d{2})?|\d+)\]\s*(?:\[([^\]]+)\]\s*(?:\[([^\]]+)\]\s*)?)?(.*)$"
)


def parse_timecode(value: str) -> int:
    """Parse `SS`, `MM:SS` or `HH:MM:SS` into whole seconds.

    Raises:
        ValueError: If the value has another shape or a non-numeric part.
    """

    parts = value.split(":")
    if len(parts) > 3:
        raise ValueError(f"Unsupported timecode format: {value}")

    total = 0
    for part in parts:
        if not part.isdigit():
            raise ValueError(f"Invalid timecode component in {value!r}")
        total = total * 60 + int(part)
    return total


def convert_timecode(value: str, target: str, custom: Optional[str] = None) -> str:
    """Convert a timecode to the requested export notation.

    Unknown targets (including "original") leave the value unchanged.

    Raises:
        ValueError: If `target` is "custom" but no pattern is given.
    """

    if target not in {"hms", "hms_ms", "seconds", "seconds_ms", "custom"}:
        return value

    total = parse_timecode(value)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)

    if target == "hms":
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if target == "hms_ms":
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.000"
    if target == "seconds":
        return str(total)
    if target == "seconds_ms":
        return f"{total}.0"

    if not custom:
        raise ValueError("Custom timecode format selected but no pattern was provided.")
    return (
        custom.replace("HH", f"{hours:02d}")
        .replace("MM", f"{minutes:02d}")
        .replace("SS", f"{seconds:02d}")
        .replace("MS", "000")
    )


def convert_transcript_timecodes(
    content: str,
    target: str,
    custom: Optional[str] = None,
    include_extended_info: bool = True,
) -> str:
    """Rewrite the leading `[timecode]` of every line of a merged transcript.

    Bracketed details after the timecode (such as the source file name) are
    kept only when `include_extended_info` is set. Lines without a leading
    timecode are kept as they are.
    """

    lines: list[str] = []
    for raw_line in content.splitlines():
        line = raw_line.strip()
        match = _LINE_RE.match(line) if line else None
        if match is None:
            lines.append(line)
            continue

        timecode, info, extra, text = match.groups()
        converted = convert_timecode(timecode, target, custom)
        if include_extended_info and info is not None:
            details = f"{info} {extra}" if extra is not None else info
            lines.append(f"[{converted}] [{details}] {text}")
        else:
            lines.append(f"[{converted}] {text}")

    return "\n".join(lines)
