"""Decide whether a session start should receive the intel summary."""

from __future__ import annotations

import json
from typing import Optional

from .constants import ALLOWED_SOURCES
from .logging import get_logger
from .models import InvocationPayload

_LOGGER = get_logger("trigger")


def parse_payload(text: str) -> Optional[InvocationPayload]:
    """Decode the stdin document; return None when it is not a JSON object."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        _LOGGER.debug("Invocation payload is not valid JSON")
        return None
    if not isinstance(data, dict):
        _LOGGER.debug("Invocation payload is not a JSON object")
        return None
    return InvocationPayload.from_dict(data)


def should_inject(payload: Optional[InvocationPayload]) -> bool:
    """Return True only for fresh starts and resumed sessions."""
    if payload is None:
        return False
    allowed = payload.source in ALLOWED_SOURCES
    if not allowed:
        _LOGGER.debug("Skipping summary for session source %r", payload.source)
    return allowed


__all__ = ["parse_payload", "should_inject"]
