#!/usr/bin/env python3
"""Standalone settings loader for NameKit."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PROJECT_ROOT / "namekit" / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=4)
def load_yaml(filename: str) -> dict:
    """Load a YAML file from the config directory."""
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Missing config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def load_app_config() -> dict:
    return load_yaml(APP_CONFIG_PATH.name)


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing value is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the working directory (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or Path.cwd()
        path = (base / path).resolve()
    return path


__all__ = [
    "load_yaml",
    "load_app_config",
    "get_setting",
    "require_setting",
    "resolve_path",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "APP_CONFIG_PATH",
]
