from __future__ import annotations

import pytest

from parsers import create_parser
from parsers.markdown import MarkdownParser
from parsers.plain_text import PlainTextParser
from parsers.subtitle import SubtitleParser
from transcripts.models import FileFormat


def test_markdown_skips_headings_and_blank_lines() -> None:
    content = "# Title\n\nFirst line here\n## Section\nSecond\n"
    segments = MarkdownParser().parse(content, "notes.md")

    assert [s.text for s in segments] == ["First line here", "Second"]
    assert (segments[0].start_time, segments[0].end_time) == pytest.approx((0.0, 1.2))
    assert (segments[1].start_time, segments[1].end_time) == pytest.approx((1.2, 2.2))
    assert [s.file_index for s in segments] == [2, 4]


def test_markdown_does_not_read_timestamps() -> None:
    [segment] = MarkdownParser().parse("[01:00] Hello", "notes.md")

    assert segment.start_time == 0.0
    assert segment.text == "[01:00] Hello"


def test_create_parser_per_format() -> None:
    assert isinstance(create_parser(FileFormat.SUBTITLE), SubtitleParser)
    assert isinstance(create_parser(FileFormat.PLAIN_TEXT), PlainTextParser)
    assert isinstance(create_parser(FileFormat.MARKDOWN), MarkdownParser)
