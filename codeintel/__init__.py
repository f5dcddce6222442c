"""Codebase intelligence summary for assistant session start."""

from __future__ import annotations

from .hook import SessionStartHook
from .loader import IntelLoader
from .models import Conventions, FileIndex, FileRecord, IntelBundle, InvocationPayload
from .summary import generate_summary
from .trigger import parse_payload, should_inject

__version__ = "0.1.0"

__all__ = [
    "Conventions",
    "FileIndex",
    "FileRecord",
    "IntelBundle",
    "IntelLoader",
    "InvocationPayload",
    "SessionStartHook",
    "generate_summary",
    "parse_payload",
    "should_inject",
]
