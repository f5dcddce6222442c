"""Load the index and conventions documents from the intel directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from .constants import CONVENTIONS_FILENAME, DEFAULT_INTEL_DIR, INDEX_FILENAME
from .errors import IntelDocumentError
from .logging import get_logger
from .models import Conventions, FileIndex, IntelBundle


class IntelLoader:
    """Reads the required index and the optional conventions report."""

    def __init__(self, base_dir: Path, intel_dir: str | Path = DEFAULT_INTEL_DIR) -> None:
        self.intel_path = Path(base_dir) / intel_dir
        self.logger = get_logger("loader")

    @property
    def index_path(self) -> Path:
        return self.intel_path / INDEX_FILENAME

    @property
    def conventions_path(self) -> Path:
        return self.intel_path / CONVENTIONS_FILENAME

    def load(self) -> Optional[IntelBundle]:
        """Return the loaded intel, or None when no index has been built yet.

        Raises IntelDocumentError when a document exists but is unreadable.
        """
        index_data = self._read_document(self.index_path, required=True)
        if index_data is None:
            self.logger.debug("No intel index at %s", self.index_path)
            return None

        conventions_data = self._read_document(self.conventions_path, required=False)
        index = FileIndex.from_dict(index_data)
        conventions = Conventions.from_dict(conventions_data)
        self.logger.debug("Loaded %d indexed files from %s", len(index), self.intel_path)
        return IntelBundle(index=index, conventions=conventions)

    # ------------------------------------------------------------------
    # Internal helpers

    def _read_document(self, path: Path, *, required: bool) -> Optional[Any]:
        """Decode one JSON document.

        A missing required document ends the pipeline (None); a missing
        optional one decodes as an empty mapping so defaults apply.
        """
        if not path.is_file():
            if required:
                return None
            self.logger.debug("Optional %s missing; using defaults", path.name)
            return {}
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise IntelDocumentError(path, str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise IntelDocumentError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


__all__ = ["IntelLoader"]
