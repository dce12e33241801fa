#!/usr/bin/env python3
"""
CMDY CONFIG - Settings Loader
-----------------------------
Resolves the runtime settings: built-in defaults, optionally overridden by
a YAML file. The file is looked up in this order:

1. An explicit path (the CLI's --config flag).
2. The CMDY_CONFIG environment variable.
3. ~/.config/cmdy/config.yaml, only if it exists.

Author: Cmdy Team
Date: 2026-10-19
"""

import os
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from cmdy.core.errors import ConfigError

logger = logging.getLogger("cmdy.config")

DEFAULT_BASE_URL = "https://command-not-found.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
CONFIG_ENV_VAR = "CMDY_CONFIG"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT      # Seconds, applied to the whole request
    user_agent: str = DEFAULT_USER_AGENT

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Returns a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def default_config_path() -> Path:
    return Path.home() / ".config" / "cmdy" / "config.yaml"


def _resolve_path(explicit: Optional[str]) -> Optional[Path]:
    if explicit:
        return Path(explicit).expanduser()
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def _coerce(raw: Dict[str, Any], source: Path) -> Dict[str, Any]:
    """Validates the raw mapping against the Settings fields."""
    known = {f.name for f in fields(Settings)}
    values: Dict[str, Any] = {}

    for key, value in raw.items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}' in {source}")
            continue
        if key == "timeout":
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigError(f"'timeout' in {source} must be a positive number, got {value!r}")
            values[key] = float(value)
        else:
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{key}' in {source} must be a non-empty string, got {value!r}")
            values[key] = value.strip()

    if "base_url" in values:
        values["base_url"] = _check_base_url(values["base_url"].rstrip("/"), source)
    return values


def _check_base_url(value: str, source: Path) -> str:
    """Rejects anything httpx cannot use as an absolute http(s) base."""
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise ConfigError(f"'base_url' in {source} is not a valid URL: {e}")
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"'base_url' in {source} must be an absolute http(s) URL, got {value!r}")
    return value


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Builds the Settings for this run.

    Raises:
        ConfigError: the selected file is missing (when requested explicitly),
            unreadable, not YAML, or holds invalid values.
    """
    config_path = _resolve_path(path)
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return Settings()

    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except OSError as e:
        raise ConfigError(f"Unable to read config file {config_path}: {e}")

    try:
        raw = YAML(typ="safe").load(text)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}")

    if raw is None:
        logger.debug(f"Config file {config_path} is empty, using defaults")
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping at the top level")

    logger.debug(f"Loaded settings from {config_path}")
    return Settings(**_coerce(raw, config_path))
