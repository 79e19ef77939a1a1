"""Configuration loading and precedence for the npmrange CLI.

Settings come from, highest precedence first: CLI flags, environment
variables, a YAML/JSON config file, then Constants defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Settings:
    """Effective runtime settings."""
    include_prerelease: bool = Constants.INCLUDE_PRERELEASE
    log_level: str = Constants.LOG_LEVEL


def _find_default_config() -> Optional[str]:
    for candidate in Constants.DEFAULT_CONFIG_PATHS:
        path = os.path.expanduser(candidate)
        if os.path.isfile(path):
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from file.

    Args:
        config_path: Path to a YAML or JSON config file. When omitted, the
            first existing file in Constants.DEFAULT_CONFIG_PATHS is used.

    Returns:
        The ``npmrange`` section if present, else the top-level mapping.
        Empty dict when there is no usable file.
    """
    path = config_path or _find_default_config()
    if not path:
        return {}

    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    return section if isinstance(section, dict) else {}


def _coerce_bool(value: Any) -> Optional[bool]:
    """Best-effort convert config/env values to bool; None if unrecognized."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return None


def resolve_settings(args: Any, config: Optional[Dict[str, Any]] = None) -> Settings:
    """Merge CLI args, environment and config into Settings.

    Args:
        args: Parsed CLI namespace (INCLUDE_PRERELEASE, LOG_LEVEL attributes).
        config: Mapping returned by load_config.
    """
    config = config or {}
    settings = Settings()

    if "include_prerelease" in config:
        value = _coerce_bool(config["include_prerelease"])
        if value is None:
            logger.warning("Ignoring invalid include_prerelease value in config: %r", config["include_prerelease"])
        else:
            settings.include_prerelease = value
    level = config.get("log_level")
    if isinstance(level, str) and level.upper() in Constants.LOG_LEVELS:
        settings.log_level = level.upper()

    env_prerelease = os.environ.get(Constants.ENV_INCLUDE_PRERELEASE)
    if env_prerelease is not None:
        value = _coerce_bool(env_prerelease)
        if value is not None:
            settings.include_prerelease = value
    env_level = os.environ.get(Constants.ENV_LOG_LEVEL)
    if env_level and env_level.upper() in Constants.LOG_LEVELS:
        settings.log_level = env_level.upper()

    if getattr(args, "INCLUDE_PRERELEASE", False):
        settings.include_prerelease = True
    if getattr(args, "LOG_LEVEL", None):
        settings.log_level = str(args.LOG_LEVEL).upper()

    return settings
