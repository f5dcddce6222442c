"""Delimited output of the summary block."""

from __future__ import annotations

from typing import Optional, TextIO

from .constants import CLOSE_TAG, OPEN_TAG


class SummaryWriter:
    """Wraps summaries in the codebase-intelligence tags the assistant expects."""

    def __init__(self, open_tag: str = OPEN_TAG, close_tag: str = CLOSE_TAG) -> None:
        self.open_tag = open_tag
        self.close_tag = close_tag

    def wrap(self, summary: str) -> str:
        """Return the summary between the opening and closing tags."""
        return f"{self.open_tag}\n{summary}\n{self.close_tag}"

    def emit(self, summary: Optional[str], stream: TextIO) -> bool:
        """Write the wrapped summary once; write nothing for a missing summary."""
        if summary is None:
            return False
        stream.write(self.wrap(summary))
        stream.flush()
        return True


__all__ = ["SummaryWriter"]
