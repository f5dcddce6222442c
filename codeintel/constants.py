"""Shared constants for the session-start summary."""

from __future__ import annotations

ALLOWED_SOURCES: frozenset[str] = frozenset({"startup", "resume"})

DEFAULT_INTEL_DIR = ".planning/intel"
INDEX_FILENAME = "index.json"
CONVENTIONS_FILENAME = "conventions.json"
CONFIG_FILENAME = ".codeintel.yml"

# Summary size bounds; truncation is positional (first N in document order).
MAX_DIRECTORIES = 5
MAX_SUFFIXES = 3
EXPORT_LIST_LIMIT = 10

# Indexers record anonymous default exports under this name.
DEFAULT_EXPORT_NAME = "default"

OPEN_TAG = "<codebase-intelligence>"
CLOSE_TAG = "</codebase-intelligence>"


__all__ = [
    "ALLOWED_SOURCES",
    "CLOSE_TAG",
    "CONFIG_FILENAME",
    "CONVENTIONS_FILENAME",
    "DEFAULT_EXPORT_NAME",
    "DEFAULT_INTEL_DIR",
    "EXPORT_LIST_LIMIT",
    "INDEX_FILENAME",
    "MAX_DIRECTORIES",
    "MAX_SUFFIXES",
    "OPEN_TAG",
]
