"""Platform-aware path utilities for Caelus.

Provides a single source of truth for config and profile paths so Windows
entry points can map to APPDATA while Unix-like platforms continue to use
XDG-style defaults.
"""
from __future__ import annotations

import os
import platform
from pathlib import Path


def _is_windows() -> bool:
    return platform.system().lower().startswith("windows")


def get_config_root() -> Path:
    """Return the base configuration directory.

    Environment overrides (CAELUS_CONFIG_DIR) take precedence. On Windows we
    align with %APPDATA%\\Caelus\\config; otherwise ~/.config/caelus is used.
    """

    override = os.environ.get("CAELUS_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    if _is_windows():
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "Caelus" / "config"

    return Path.home() / ".config" / "caelus"


def get_config_file() -> Path:
    """Return the settings file path."""

    override = os.environ.get("CAELUS_CONFIG_FILE")
    if override:
        return Path(override).expanduser()
    return get_config_root() / "config.yaml"


def get_profile_path() -> Path:
    """Return where the finalized visitor profile is written."""

    override = os.environ.get("CAELUS_PROFILE_PATH")
    if override:
        return Path(override).expanduser()

    if _is_windows():
        local_appdata = os.environ.get("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / "Caelus" / "profile" / "user_profile.json"

    return Path.home() / ".cache" / "caelus" / "profile" / "user_profile.json"
