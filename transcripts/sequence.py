"""Ordering keys for multi-part transcripts, taken from file names."""

from __future__ import annotations

import re
from typing import Optional


# Tried in order; the first pattern that yields an integer wins. The generic
# digit run comes first, so "meeting 2024 part 3.txt" resolves to 2024.
SEQUENCE_PATTERNS = [
    re.compile(r"(\d+)"),
    re.compile(r"chunk[_-]?(\d+)"),
    re.compile(r"part[_-]?(\d+)"),
    re.compile(r"segment[_-]?(\d+)"),
]


def extract_sequence_number(filename: str) -> Optional[int]:
    """Return the ordering key embedded in a file name, if any."""

    for pattern in SEQUENCE_PATTERNS:
        match = pattern.search(filename)
        if match is None:
            continue
        try:
            return int(match.group(1))
        except ValueError:
            continue
    return None
