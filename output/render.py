"""Rendering of merged segments into subtitle, plain text and Markdown."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from transcripts.models import FileFormat, MergeOptions, TranscriptionSegment


# Display length for subtitle cues whose source had no end time.
DEFAULT_CUE_SECONDS = 5.0

MARKDOWN_TITLE = "# Merged Transcription"


def format_subtitle_timestamp(seconds: float) -> str:
    """Format seconds as an SRT timecode (`HH:MM:SS,mmm`)."""

    total_ms = int(round(max(seconds, 0.0) * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def format_clock(seconds: float) -> str:
    """Format whole seconds as `MM:SS`, or `HH:MM:SS` from one hour up."""

    total = int(max(seconds, 0.0))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def render_subtitle(segments: Sequence[TranscriptionSegment], options: MergeOptions) -> str:
    blocks: list[str] = []
    for number, segment in enumerate(segments, start=1):
        end_time = segment.end_time
        if end_time is None:
            end_time = segment.start_time + DEFAULT_CUE_SECONDS

        text = segment.text
        if options.add_file_markers:
            text = f"[{segment.original_filename}] {text}"

        blocks.append(
            f"{number}\n"
            f"{format_subtitle_timestamp(segment.start_time)} --> {format_subtitle_timestamp(end_time)}\n"
            f"{text}\n\n"
        )
    return "".join(blocks)


def render_plain_text(segments: Sequence[TranscriptionSegment], options: MergeOptions) -> str:
    lines: list[str] = []
    for segment in segments:
        prefix = ""
        if not options.remove_timestamps:
            prefix += f"[{format_clock(segment.start_time)}] "
        if options.add_file_markers:
            prefix += f"[{segment.original_filename}] "
        lines.append(f"{prefix}{segment.text}\n")
    return "".join(lines)


def render_markdown(
    segments: Sequence[TranscriptionSegment],
    options: MergeOptions,
    now: Optional[datetime] = None,
) -> str:
    """Render a Markdown document with one section per source file.

    Args:
        segments: Merged segments in output order.
        options: Merge options (file markers, timestamp suppression).
        now: Generation time shown under the title (defaults to current UTC).
    """

    generated = now or datetime.now(timezone.utc)
    parts = [
        f"{MARKDOWN_TITLE}\n\n",
        f"*Generated on: {generated.strftime('%Y-%m-%d %H:%M:%S')} UTC*\n\n",
    ]

    current_file: Optional[str] = None
    for segment in segments:
        if options.add_file_markers and segment.original_filename != current_file:
            current_file = segment.original_filename
            parts.append(f"## {current_file}\n\n")

        if not options.remove_timestamps:
            parts.append(f"**[{format_clock(segment.start_time)}]** ")
        parts.append(f"{segment.text}\n\n")

    return "".join(parts)


def render(segments: Sequence[TranscriptionSegment], options: MergeOptions) -> str:
    """Render segments in the output format selected by `options`."""

    if options.output_format is FileFormat.SUBTITLE:
        return render_subtitle(segments, options)
    if options.output_format is FileFormat.MARKDOWN:
        return render_markdown(segments, options)
    return render_plain_text(segments, options)
