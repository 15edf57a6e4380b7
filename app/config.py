"""Configuration handling for Transcript Merger.

Defaults for the merge and export options are read from an optional TOML file
at an OS-specific location:

- Linux/macOS: ~/.config/transcript-merger/config.toml
- Windows: %APPDATA%\\transcript-merger\\config.toml
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
import platform
from typing import Any

try:  # Python 3.11+
    import tomllib  # type: ignore
except ModuleNotFoundError:  # Python 3.10
    import tomli as tomllib  # type: ignore

from output.timecode import TIMECODE_FORMATS
from transcripts.models import FileFormat, MergeOptions


APP_DIR_NAME = "transcript-merger"


@dataclass(frozen=True, slots=True)
class MergeConfig:
    """Default merge options."""

    output_format: FileFormat = FileFormat.PLAIN_TEXT
    time_offset_seconds: float = 0.0
    remove_timestamps: bool = False
    add_file_markers: bool = True


@dataclass(frozen=True, slots=True)
class ExportConfig:
    """Default export options."""

    timecode_format: str = "original"
    custom_timecode_format: str = ""
    include_extended_info: bool = True


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    merge: MergeConfig = field(default_factory=MergeConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def merge_options(self) -> MergeOptions:
        """Build merge options from the configured defaults."""

        return MergeOptions(
            output_format=self.merge.output_format,
            time_offset_seconds=self.merge.time_offset_seconds,
            remove_timestamps=self.merge.remove_timestamps,
            add_file_markers=self.merge.add_file_markers,
        )


_MERGE_DEFAULTS = MergeConfig()
_EXPORT_DEFAULTS = ExportConfig()


def get_config_path() -> Path:
    """Return the default configuration file path for the current OS."""

    system = platform.system().lower()
    if system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME / "config.toml"

        return Path.home() / "AppData" / "Roaming" / APP_DIR_NAME / "config.toml"

    return Path.home() / ".config" / APP_DIR_NAME / "config.toml"


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from a TOML file, falling back to defaults if missing.

    Args:
        path: Optional explicit config path. When None, uses the OS default.

    Raises:
        ValueError: If the config contains unsupported values.
    """

    config_path = path or get_config_path()
    if not config_path.exists():
        return AppConfig()

    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid config: {exc}") from exc

    merge_raw = _get_table(raw, "merge")
    export_raw = _get_table(raw, "export")

    output_format = FileFormat.parse(
        _get_str(merge_raw, "output_format", default=_MERGE_DEFAULTS.output_format.value)
    )
    offset = _get_float(merge_raw, "time_offset_seconds", default=_MERGE_DEFAULTS.time_offset_seconds)
    if offset < 0:
        raise ValueError("Invalid config: time_offset_seconds must not be negative.")

    merge = MergeConfig(
        output_format=output_format,
        time_offset_seconds=offset,
        remove_timestamps=_get_bool(merge_raw, "remove_timestamps", default=_MERGE_DEFAULTS.remove_timestamps),
        add_file_markers=_get_bool(merge_raw, "add_file_markers", default=_MERGE_DEFAULTS.add_file_markers),
    )

    timecode_format = _get_str(export_raw, "timecode_format", default=_EXPORT_DEFAULTS.timecode_format)
    if timecode_format not in TIMECODE_FORMATS:
        raise ValueError(
            f"Invalid config: timecode_format must be one of {', '.join(TIMECODE_FORMATS)}."
        )

    custom = export_raw.get("custom_timecode_format", _EXPORT_DEFAULTS.custom_timecode_format)
    if not isinstance(custom, str):
        raise ValueError("Invalid config: custom_timecode_format must be a string.")

    export = ExportConfig(
        timecode_format=timecode_format,
        custom_timecode_format=custom.strip(),
        include_extended_info=_get_bool(
            export_raw, "include_extended_info", default=_EXPORT_DEFAULTS.include_extended_info
        ),
    )
    return AppConfig(merge=merge, export=export)


def save_config(config: AppConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: Configuration values to persist.
        path: Optional explicit config path. When None, uses the OS default.

    Returns:
        The path that was written.
    """

    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    content = _to_toml(config)
    config_path.write_text(content, encoding="utf-8")
    return config_path


def _get_table(raw: dict[str, Any], key: str) -> dict[str, Any]:
    """Internal helper to get a TOML table as a dict."""

    value = raw.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ValueError(f"Invalid config: [{key}] must be a table.")


def _get_str(raw: dict[str, Any], key: str, default: str) -> str:
    """Internal helper to get a TOML string with a default."""

    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise ValueError(f"Invalid config: {key} must be a non-empty string.")


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    """Internal helper to get a TOML boolean with a default."""

    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ValueError(f"Invalid config: {key} must be true or false.")


def _get_float(raw: dict[str, Any], key: str, default: float) -> float:
    """Internal helper to get a TOML number with a default."""

    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ValueError(f"Invalid config: {key} must be a number.")


def _toml_bool(value: bool) -> str:
    return "true" if value else "false"


def _to_toml(config: AppConfig) -> str:
    """Serialize config data to TOML."""

    custom = config.export.custom_timecode_format.replace("\\", "\\\\").replace('"', '\\"')
    return (
        "[merge]\n"
        f'output_format = "{config.merge.output_format.value}"\n'
        f"time_offset_seconds = {float(config.merge.time_offset_seconds)!r}\n"
        f"remove_timestamps = {_toml_bool(config.merge.remove_timestamps)}\n"
        f"add_file_markers = {_toml_bool(config.merge.add_file_markers)}\n"
        "\n"
        "[export]\n"
        f'timecode_format = "{config.export.timecode_format}"\n'
        f'custom_timecode_format = "{custom}"\n'
        f"include_extended_info = {_toml_bool(config.export.include_extended_info)}\n"
    )
