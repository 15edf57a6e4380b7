"""Logging setup for the Transcript Merger application."""

from __future__ import annotations

import logging


APP_LOGGER = "transcript_merger"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure application logging and return the CLI logger.

    Args:
        verbose: When True, show file loading, detected formats and per-file
            offsets (DEBUG). Otherwise only warnings and errors are shown.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    # force=True so repeated CLI invocations in one process pick up the new level.
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
        force=True,
    )
    return logging.getLogger(APP_LOGGER)
