from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from app.cli import create_cli_app


runner = CliRunner()


def _transcript(tmp_path: Path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_merge_prints_to_stdout(tmp_path: Path) -> None:
    second = _transcript(tmp_path, "part 2.txt", "[00:00-00:10] World\n")
    first = _transcript(tmp_path, "part 1.txt", "[00:00-00:10] Hello\n")
    config = str(tmp_path / "missing.toml")

    result = runner.invoke(create_cli_app(), ["merge", second, first, "--config", config])

    assert result.exit_code == 0, result.output
    assert result.stdout == "[00:00] [part 1.txt] Hello\n[00:10] [part 2.txt] World\n"


def test_merge_flags_override_config(tmp_path: Path) -> None:
    first = _transcript(tmp_path, "1.txt", "[00:05] Hello\n")
    config = tmp_path / "config.toml"
    config.write_text("[merge]\nadd_file_markers = true\n", encoding="utf-8")

    result = runner.invoke(
        create_cli_app(),
        ["merge", first, "--remove-timestamps", "--no-file-markers", "--config", str(config)],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout == "Hello\n"


def test_merge_uses_config_defaults_without_flags(tmp_path: Path) -> None:
    first = _transcript(tmp_path, "1.txt", "[00:05] Hello\n")
    config = tmp_path / "config.toml"
    config.write_text(
        "[merge]\ntime_offset_seconds = 60\nadd_file_markers = false\n", encoding="utf-8"
    )

    result = runner.invoke(create_cli_app(), ["merge", first, "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert result.stdout == "[01:05] Hello\n"


def test_merge_exports_to_directory(tmp_path: Path) -> None:
    first = _transcript(tmp_path, "1.txt", "[00:05] Hello\n")
    out_dir = tmp_path / "out"

    result = runner.invoke(
        create_cli_app(),
        [
            "merge",
            first,
            "--format",
            "srt",
            "--out",
            str(out_dir),
            "--name",
            "result",
            "--config",
            str(tmp_path / "missing.toml"),
        ],
    )

    assert result.exit_code == 0, result.output
    exported = out_dir / "result.srt"
    assert result.stdout.strip() == str(exported)
    assert "00:00:05,000 --> 00:00:06,000" in exported.read_text(encoding="utf-8")


def test_merge_rejects_unknown_format(tmp_path: Path) -> None:
    first = _transcript(tmp_path, "1.txt", "Hello\n")

    result = runner.invoke(
        create_cli_app(),
        ["merge", first, "--format", "docx", "--config", str(tmp_path / "missing.toml")],
    )

    assert result.exit_code == 2


def test_merge_reports_malformed_subtitles(tmp_path: Path) -> None:
    broken = _transcript(tmp_path, "broken.srt", "1\n00:00,000 --> 00:00:01,000\nText\n")

    result = runner.invoke(
        create_cli_app(),
        ["merge", broken, "--config", str(tmp_path / "missing.toml")],
    )

    assert result.exit_code == 2
    assert "broken.srt" in result.output


def test_config_reset_and_show(tmp_path: Path) -> None:
    config = str(tmp_path / "config.toml")
    app = create_cli_app()

    reset = runner.invoke(app, ["config", "--reset", "--config", config])
    shown = runner.invoke(app, ["config", "--config", config])

    assert reset.exit_code == 0
    assert Path(config).exists()
    assert "output_format = txt" in shown.stdout
