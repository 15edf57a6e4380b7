from __future__ import annotations

import pytest

from parsers.subtitle import SubtitleParser, parse_subtitle_timestamp
from transcripts.errors import MalformedTimestampError


SRT_LF = (
    "1\n00:00:00,000 --> 00:00:05,000\nFirst subtitle.\n\n"
    "2\n00:00:05,000 --> 00:00:10,000\nSecond subtitle.\n\n"
)


def test_parse_srt_with_crlf_matches_lf() -> None:
    parser = SubtitleParser()
    lf = parser.parse(SRT_LF, "test.srt")
    crlf = parser.parse(SRT_LF.replace("\n", "\r\n"), "test.srt")

    assert crlf == lf
    assert len(lf) == 2
    assert lf[0].start_time == pytest.approx(0.0)
    assert lf[0].end_time == pytest.approx(5.0)
    assert lf[0].text == "First subtitle."
    assert lf[1].start_time == pytest.approx(5.0)
    assert lf[1].end_time == pytest.approx(10.0)
    assert lf[1].text == "Second subtitle."


def test_multiline_text_is_joined_with_spaces() -> None:
    content = "1\n00:01:00.500 --> 00:01:03.000\nHello\nthere\n"
    [segment] = SubtitleParser().parse(content, "a.srt")

    assert segment.text == "Hello there"
    assert segment.start_time == pytest.approx(60.5)
    assert segment.original_filename == "a.srt"


def test_incomplete_blocks_are_skipped() -> None:
    content = (
        "1\n00:00:00,000 --> 00:00:01,000\n\n"
        "2\nno arrow here\ntext\n\n"
        "3\n00:00:02,000 --> 00:00:03,000\nKept\n"
    )
    segments = SubtitleParser().parse(content, "a.srt")

    assert [s.text for s in segments] == ["Kept"]
    assert segments[0].file_index == 2


def test_malformed_timecode_fails_the_file() -> None:
    content = "1\n00:00,000 --> 00:00:05,000\nText\n"
    with pytest.raises(MalformedTimestampError, match="broken.srt"):
        SubtitleParser().parse(content, "broken.srt")


def test_non_numeric_component_is_malformed() -> None:
    with pytest.raises(MalformedTimestampError):
        parse_subtitle_timestamp("00:xx:05,000")


@pytest.mark.parametrize(
    "value",
    ["00:00:nan", "00:00:inf", "0_0:00:01,000", "00:00:1e3", "+1:00:00,000", "00:00:05,", "00:0 1:05,000"],
)
def test_float_like_components_are_malformed(value: str) -> None:
    with pytest.raises(MalformedTimestampError):
        parse_subtitle_timestamp(value, "clip.srt")


def test_nan_timecode_fails_the_file() -> None:
    content = "1\n00:00:nan --> 00:00:05,000\nText\n"
    with pytest.raises(MalformedTimestampError, match="clip.srt"):
        SubtitleParser().parse(content, "clip.srt")


def test_dot_separated_milliseconds_are_accepted() -> None:
    assert parse_subtitle_timestamp("01:02:03.500") == pytest.approx(3723.5)
