"""Holder for the most recent merged transcript."""

from __future__ import annotations

from typing import Optional


class SessionStore:
    """Keeps the last successful merge result for a later export.

    A store starts empty, is overwritten by each successful merge and is only
    read by the export action. Create one per process (or per CLI invocation)
    and pass it to both flows.
    """

    def __init__(self) -> None:
        self._content: Optional[str] = None

    def set(self, content: str) -> None:
        self._content = content

    def get(self) -> Optional[str]:
        return self._content
