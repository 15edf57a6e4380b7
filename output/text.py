"""Writing merged transcripts to disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from transcripts.models import FileFormat
from transcripts.session import SessionStore

from .timecode import convert_transcript_timecodes


class ExportError(RuntimeError):
    """Raised when there is nothing to export."""


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Where an export went and how much was written."""

    path: Path
    size: int

    @property
    def message(self) -> str:
        return f"Successfully exported {self.size} characters to file"


def write_text_file(output_path: Path, text: str) -> None:
    """Write transcript text to disk.

    Args:
        output_path: Destination path.
        text: Transcript content.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")


def export_merged_transcription(
    store: SessionStore,
    output_dir: Path,
    file_name: str,
    output_format: FileFormat,
    timecode_format: str = "original",
    custom_timecode_format: Optional[str] = None,
    include_extended_info: bool = True,
) -> ExportResult:
    """Write the last merged transcript held by `store`.

    Args:
        store: Session store filled by a previous merge.
        output_dir: Directory to write into.
        file_name: Output name; the format's extension is added when the name
            has no dot.
        output_format: Format the content was merged into.
        timecode_format: One of `output.timecode.TIMECODE_FORMATS`.
        custom_timecode_format: Pattern used with the "custom" timecode format.
        include_extended_info: Keep bracketed details such as file markers.

    Raises:
        ExportError: If no merge result is available.
        ValueError: If the timecode options are invalid.
    """

    content = store.get()
    if content is None:
        raise ExportError("No merged transcription available. Please merge transcriptions first.")

    if "." not in file_name:
        file_name = f"{file_name}.{output_format.extension}"

    processed = convert_transcript_timecodes(
        content,
        timecode_format,
        custom_timecode_format,
        include_extended_info,
    )

    output_path = output_dir / file_name
    write_text_file(output_path, processed)
    return ExportResult(path=output_path, size=len(processed))
