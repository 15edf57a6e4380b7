"""Loading transcript files and merging them into one timeline.

Files are ordered by the number in their name. Each file's segments are
shifted by a running offset so that file N+1 starts where file N ended, then
all segments are sorted by start time and rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from output.render import render
from parsers import create_parser

from .decoding import decode_text
from .detection import detect_format
from .errors import InvalidFilenameError, TranscriptReadError
from .models import MergeOptions, TranscriptionFile, TranscriptionSegment
from .sequence import extract_sequence_number
from .session import SessionStore


logger = logging.getLogger(__name__)

# Offset added after a file whose last segment has no end time.
MISSING_END_GAP_SECONDS = 30.0

PathLike = Union[str, Path]


@dataclass(frozen=True, slots=True)
class MergeSummary:
    """Result of a one-shot merge request."""

    content: str
    file_count: int
    segment_count: int
    options: MergeOptions

    @property
    def message(self) -> str:
        return (
            f"Successfully merged {self.file_count} files ({self.segment_count} segments) "
            f"into {self.options.output_format.value} format"
        )


def load_transcription_file(path: PathLike) -> TranscriptionFile:
    """Read, detect and parse a single transcript file.

    Raises:
        InvalidFilenameError: If the path has no file-name component.
        TranscriptReadError: If the file cannot be read.
        MalformedTimestampError: If a subtitle timecode is invalid.
    """

    file_path = Path(path)
    filename = file_path.name
    if not filename or filename == "..":
        raise InvalidFilenameError(f"Invalid filename: {str(path)!r}")

    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise TranscriptReadError(f"Failed to read {file_path}: {exc}") from exc

    content = decode_text(raw)
    file_format = detect_format(file_path, content)
    segments = create_parser(file_format).parse(content, filename)
    logger.debug("Loaded %s as %s (%d segments)", filename, file_format.value, len(segments))

    return TranscriptionFile(
        path=file_path,
        filename=filename,
        sequence_number=extract_sequence_number(filename),
        format=file_format,
        segments=tuple(segments),
    )


def file_duration(file: TranscriptionFile) -> float:
    """Time taken up by a file, judged from its last segment."""

    if not file.segments:
        return 0.0
    last = file.segments[-1]
    if last.end_time is not None:
        return last.end_time
    return last.start_time + MISSING_END_GAP_SECONDS


def merge_segments(
    files: Sequence[TranscriptionFile], time_offset_seconds: float = 0.0
) -> list[TranscriptionSegment]:
    """Offset each file by the files before it and sort by start time.

    `files` must already be in merge order. The sort is stable, so segments
    with equal start times keep their file/line order.
    """

    merged: list[TranscriptionSegment] = []
    cumulative_offset = time_offset_seconds

    for file in files:
        logger.debug("Offsetting %s by %.3fs", file.filename, cumulative_offset)
        merged.extend(segment.shifted(cumulative_offset) for segment in file.segments)
        cumulative_offset += file_duration(file)

    merged.sort(key=lambda segment: segment.start_time)
    return merged


class TranscriptionMerger:
    """A single merge session: collect files, then produce merged output."""

    def __init__(self, options: Optional[MergeOptions] = None) -> None:
        self._options = options or MergeOptions()
        self._files: list[TranscriptionFile] = []

    @property
    def options(self) -> MergeOptions:
        return self._options

    @property
    def files(self) -> tuple[TranscriptionFile, ...]:
        return tuple(self._files)

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def total_segments(self) -> int:
        return sum(len(file.segments) for file in self._files)

    def add_files(self, paths: Iterable[PathLike]) -> None:
        """Load files in the given order, then reorder by sequence number.

        A failure on any file propagates; files loaded earlier in the same
        call are discarded.
        """

        loaded = [load_transcription_file(path) for path in paths]
        self._files.extend(loaded)
        self._files.sort(key=lambda file: file.sort_key)

    def merged_segments(self) -> list[TranscriptionSegment]:
        return merge_segments(self._files, self._options.time_offset_seconds)

    def merge(self) -> str:
        """Render all files as one transcript in the configured format."""

        return render(self.merged_segments(), self._options)


def merge_transcriptions(
    paths: Sequence[PathLike],
    options: Optional[MergeOptions] = None,
    store: Optional[SessionStore] = None,
) -> MergeSummary:
    """Merge transcript files and optionally remember the result.

    Args:
        paths: Transcript files, in the order the caller listed them.
        options: Merge options (defaults to plain text with file markers).
        store: When given, receives the merged content on success.

    Raises:
        ValueError: If no paths are given.
        TranscriptError: If any file fails to load; nothing is stored.
    """

    if not paths:
        raise ValueError("No transcription files provided")

    merger = TranscriptionMerger(options)
    merger.add_files(paths)
    content = merger.merge()

    if store is not None:
        store.set(content)

    summary = MergeSummary(
        content=content,
        file_count=merger.file_count,
        segment_count=merger.total_segments,
        options=merger.options,
    )
    logger.info(summary.message)
    return summary
