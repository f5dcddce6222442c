"""Exception types raised inside the hook pipeline."""

from __future__ import annotations

from pathlib import Path


class IntelError(RuntimeError):
    """Base class for failures while producing codebase intelligence."""


class IntelDocumentError(IntelError):
    """Raised when an intel document exists but cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load {path.name}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(IntelError):
    """Raised when .codeintel.yml cannot be parsed."""


__all__ = ["ConfigError", "IntelDocumentError", "IntelError"]
