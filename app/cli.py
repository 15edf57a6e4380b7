"""CLI commands for Transcript Merger."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer

from .config import AppConfig, get_config_path, load_config, save_config
from .logging import configure_logging
from output.text import ExportError, export_merged_transcription
from output.timecode import TIMECODE_FORMATS
from transcripts.errors import TranscriptError
from transcripts.merger import merge_transcriptions
from transcripts.models import FileFormat
from transcripts.session import SessionStore


DEFAULT_OUTPUT_NAME = "merged_transcription"


def create_cli_app() -> typer.Typer:
    """Create the Typer CLI app (kept as a factory to avoid global state)."""

    app = typer.Typer(
        add_completion=False,
        help="Merge multi-part transcripts (TXT, SRT, Markdown) into one timeline.",
        no_args_is_help=True,
    )

    @app.command("merge")
    def merge(
        files: List[Path] = typer.Argument(
            ...,
            exists=True,
            readable=True,
            dir_okay=False,
            help="Transcript files (.txt, .srt, .md). Ordered by the number in each name.",
        ),
        output_format: Optional[str] = typer.Option(
            None,
            "--format",
            "-f",
            help="Output format: txt, srt or md (default from config: txt).",
        ),
        offset: Optional[float] = typer.Option(
            None,
            "--offset",
            min=0.0,
            help="Seconds added to every timestamp (default: 0).",
        ),
        remove_timestamps: Optional[bool] = typer.Option(
            None,
            "--remove-timestamps/--keep-timestamps",
            help="Leave timestamps out of TXT and Markdown output.",
        ),
        file_markers: Optional[bool] = typer.Option(
            None,
            "--file-markers/--no-file-markers",
            help="Tag each segment with its source file name.",
        ),
        out: Optional[Path] = typer.Option(
            None,
            "--out",
            "-o",
            file_okay=False,
            dir_okay=True,
            help="Directory to export into (prints to stdout when omitted).",
        ),
        name: str = typer.Option(
            DEFAULT_OUTPUT_NAME,
            "--name",
            help="Exported file name; the format extension is added if it has none.",
        ),
        timecode_format: Optional[str] = typer.Option(
            None,
            "--timecode-format",
            help=f"Timecode notation for export: {', '.join(TIMECODE_FORMATS)}.",
        ),
        custom_timecode: Optional[str] = typer.Option(
            None,
            "--custom-timecode",
            help="Pattern for --timecode-format custom, e.g. 'HH-MM-SS'.",
        ),
        extended_info: Optional[bool] = typer.Option(
            None,
            "--extended-info/--no-extended-info",
            help="Keep bracketed details (file markers) when exporting.",
        ),
        config_path: Optional[Path] = typer.Option(
            None,
            "--config",
            dir_okay=False,
            help="Config file to use instead of the default location.",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Enable debug logging.",
        ),
    ) -> None:
        """Merge transcript files into a single transcript."""

        logger = configure_logging(verbose=verbose)

        try:
            config = load_config(config_path)
        except ValueError as exc:
            typer.secho(f"Config error: {exc}", fg=typer.colors.RED, err=True)
            typer.secho(f"Config path: {config_path or get_config_path()}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc

        options = config.merge_options()
        try:
            if output_format:
                options = replace(options, output_format=FileFormat.parse(output_format))
        except ValueError as exc:
            typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc
        if offset is not None:
            options = replace(options, time_offset_seconds=offset)
        if remove_timestamps is not None:
            options = replace(options, remove_timestamps=remove_timestamps)
        if file_markers is not None:
            options = replace(options, add_file_markers=file_markers)

        store = SessionStore()
        try:
            summary = merge_transcriptions(files, options, store)
        except TranscriptError as exc:
            typer.secho(f"Merge error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc
        except Exception as exc:  # noqa: BLE001 - intentional CLI boundary
            typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc

        if out is None:
            typer.echo(summary.content, nl=False)
            return

        try:
            result = export_merged_transcription(
                store,
                out,
                name,
                options.output_format,
                timecode_format=timecode_format or config.export.timecode_format,
                custom_timecode_format=custom_timecode or config.export.custom_timecode_format or None,
                include_extended_info=(
                    extended_info if extended_info is not None else config.export.include_extended_info
                ),
            )
        except (ExportError, ValueError) as exc:
            typer.secho(f"Export error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc
        except OSError as exc:
            typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc

        logger.info(result.message)
        typer.echo(str(result.path))

    @app.command("config")
    def config(
        reset: bool = typer.Option(
            False,
            "--reset",
            help="Overwrite the config file with default values.",
        ),
        config_path: Optional[Path] = typer.Option(
            None,
            "--config",
            dir_okay=False,
            help="Config file to use instead of the default location.",
        ),
    ) -> None:
        """Show the active configuration, or reset it to defaults."""

        path = config_path or get_config_path()
        if reset:
            written = save_config(AppConfig(), path)
            typer.echo(f"Reset to defaults: {written}")
            return

        try:
            current = load_config(path)
        except ValueError as exc:
            typer.secho(f"Config error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc

        typer.echo(f"Config: {path}")
        typer.echo(f"output_format = {current.merge.output_format.value}")
        typer.echo(f"time_offset_seconds = {current.merge.time_offset_seconds}")
        typer.echo(f"remove_timestamps = {current.merge.remove_timestamps}")
        typer.echo(f"add_file_markers = {current.merge.add_file_markers}")
        typer.echo(f"timecode_format = {current.export.timecode_format}")
        typer.echo(f"include_extended_info = {current.export.include_extended_info}")

    return app
