"""Byte-to-text decoding for transcript files."""

from __future__ import annotations

import codecs
from encodings import cp1251
from typing import Optional


# Windows-1251 as browsers decode it: byte 0x98, undefined in Python's
# cp1251 codec, maps to U+0098 so no byte of a legacy file is rejected.
_LEGACY_TABLE = cp1251.decoding_table[:0x98] + "\x98" + cp1251.decoding_table[0x99:]


def decode_text(data: bytes) -> str:
    """Decode transcript bytes, tolerating legacy Cyrillic files.

    Strict UTF-8 is tried first, then Windows-1251. When both fail the bytes
    are decoded as UTF-8 with replacement characters, so this never raises.
    """

    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    for decode in (_decode_utf8, _decode_legacy):
        text = decode(data)
        if text is not None:
            return text

    return data.decode("utf-8", errors="replace")


def _decode_utf8(data: bytes) -> Optional[str]:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _decode_legacy(data: bytes) -> Optional[str]:
    try:
        text, _consumed = codecs.charmap_decode(data, "strict", _LEGACY_TABLE)
    except UnicodeDecodeError:
        return None
    return text
