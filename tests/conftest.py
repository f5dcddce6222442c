from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.intel_builder import IntelBuilder


@pytest.fixture
def intel_builder(tmp_path: Path) -> IntelBuilder:
    """Provide a project with an empty intel directory under pytest's tmp_path."""
    return IntelBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CODEINTEL_INTEL_DIR", "CODEINTEL_LOG_FILE", "CODEINTEL_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_codeintel_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("codeintel")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
