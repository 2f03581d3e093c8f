#!/usr/bin/env python3
"""Package wrapper around the top-level settings loader."""

from settings import (
    load_yaml,
    load_app_config,
    get_setting,
    require_setting,
    resolve_path,
    PROJECT_ROOT,
    CONFIG_DIR,
    APP_CONFIG_PATH,
)

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
