"""Console entry point for Transcript Merger."""

from __future__ import annotations

from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the Transcript Merger CLI.

    Args:
        argv: Arguments to parse instead of `sys.argv[1:]`.
    """

    from .cli import create_cli_app

    app = create_cli_app()
    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":
    main()
