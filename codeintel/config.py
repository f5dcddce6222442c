"""Configuration loading for the hook (.codeintel.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .constants import CONFIG_FILENAME, DEFAULT_INTEL_DIR
from .errors import ConfigError

ENV_INTEL_DIR = "CODEINTEL_INTEL_DIR"
ENV_LOG_FILE = "CODEINTEL_LOG_FILE"
ENV_DEBUG = "CODEINTEL_DEBUG"


@dataclass
class HookConfig:
    """Settings defined in .codeintel.yml, with environment overrides applied."""

    root: Path
    intel_dir: str = DEFAULT_INTEL_DIR
    log_file: Optional[Path] = None
    verbose: bool = False


def load_config(config_path: Path, env: Mapping[str, str] | None = None) -> HookConfig:
    """Load configuration from disk; a missing file yields defaults."""
    env = os.environ if env is None else env
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    data: Dict[str, Any] = {}
    if config_file.exists():
        data = _read_config(config_file)

    config = HookConfig(root=root)
    config.intel_dir = _as_str(data.get("intel_dir")) or DEFAULT_INTEL_DIR
    log_file = _as_str(data.get("log_file"))
    config.log_file = root / log_file if log_file else None
    config.verbose = _as_bool(data.get("verbose")) or False

    if env.get(ENV_INTEL_DIR):
        config.intel_dir = env[ENV_INTEL_DIR]
    if env.get(ENV_LOG_FILE):
        config.log_file = root / env[ENV_LOG_FILE]
    if _as_bool(env.get(ENV_DEBUG)):
        config.verbose = True

    return config


def debug_requested(env: Mapping[str, str] | None = None) -> bool:
    """Return True when CODEINTEL_DEBUG asks for verbose diagnostics."""
    env = os.environ if env is None else env
    return bool(_as_bool(env.get(ENV_DEBUG)))


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off", ""}:
            return False
    return None


__all__ = ["HookConfig", "debug_requested", "load_config"]
