"""Configuration service for Caelus.

Loads and saves a single JSON/YAML settings file, fills in defaults, and
applies ``CAELUS__SECTION__KEY`` environment overrides.
"""
from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from caelus.path_utils import get_config_file

logger = logging.getLogger(__name__)

ENV_PREFIX = "CAELUS__"


class ConfigError(Exception):
    pass


DEFAULT_CONFIG: Dict[str, Any] = {
    "generation": {
        "chat_model": "gpt-4",
        "image_model": "dall-e-3",
        "image_size": "1024x1024",
        "image_quality": "standard",
        "response_format": "url",
        "temperature": 0.7,
        "suggestion_max_tokens": 500,
        "analysis_max_tokens": 1000,
    },
    "storage": {
        "profile_path": "",
    },
    "logging": {
        "level": "INFO",
    },
}


@dataclass
class LoadedConfig:
    data: Dict[str, Any]
    warnings: List[str]

    def get(self, path: str, default: Any = None) -> Any:
        value = deep_get(self.data, path)
        return default if value is None else value


def coerce_value(value: Any) -> Any:
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in {"true", "yes", "on"}:
            return True
        if lower in {"false", "no", "off"}:
            return False
        if lower.isdigit():
            return int(lower)
        try:
            return float(lower)
        except ValueError:
            return value
    return value


def resolve_log_level(value: Any) -> Any:
    """Normalize a level from settings or the command line for ``logging``.

    Numeric levels may arrive as ints (env coercion) or digit strings.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip().upper()
    if text.isdigit():
        return int(text)
    if not isinstance(logging.getLevelName(text), int):
        raise ConfigError(f"Unknown logging level {value!r}")
    return text


def deep_get(data: Dict[str, Any], path: str) -> Any:
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def deep_set(data: Dict[str, Any], path: str, value: Any) -> None:
    current = data
    parts = path.split(".")
    for key in parts[:-1]:
        if key not in current or not isinstance(current[key], dict):
            current[key] = {}
        current = current[key]
    current[parts[-1]] = value


def load_structured_file(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError("Configuration root must be an object/dictionary.")
    return loaded


def _merge_defaults(data: Dict[str, Any], warnings: List[str]) -> Dict[str, Any]:
    merged = deepcopy(DEFAULT_CONFIG)
    for section, values in data.items():
        if section not in DEFAULT_CONFIG:
            warnings.append(f"Unknown section '{section}' preserved as-is.")
            merged[section] = values
            continue
        if not isinstance(values, dict):
            warnings.append(f"Section '{section}' must be a mapping; using defaults.")
            continue
        for key, value in values.items():
            if key not in DEFAULT_CONFIG[section]:
                warnings.append(f"Unknown field '{section}.{key}' preserved as-is.")
            merged[section][key] = value
    return merged


def apply_env_overrides(config: Dict[str, Any], warnings: List[str], prefix: str = ENV_PREFIX) -> None:
    for key, value in sorted(os.environ.items()):
        if not key.startswith(prefix):
            continue
        path = key[len(prefix) :].lower().replace("__", ".")
        if not path:
            continue
        deep_set(config, path, coerce_value(value))
        warnings.append(f"Environment override {key} applied to {path}")


def load_config(path: Optional[Path] = None) -> LoadedConfig:
    """Load settings from ``path`` (or the platform default) merged over defaults."""

    source = Path(path) if path else get_config_file()
    warnings: List[str] = []
    raw: Dict[str, Any] = {}
    if source.exists():
        raw = load_structured_file(source)
    else:
        logger.debug("No settings file at %s; using defaults", source)

    data = _merge_defaults(raw, warnings)
    apply_env_overrides(data, warnings)
    for warning in warnings:
        logger.warning(warning)
    return LoadedConfig(data=data, warnings=warnings)


def save_config(data: Dict[str, Any], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
    else:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
