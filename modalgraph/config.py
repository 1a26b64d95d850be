"""
Configuration management for modalgraph.

Settings come from config.json in the project root; environment variables
(optionally loaded from a .env file by the app) take priority:

- MODALGRAPH_LOG_LEVEL / "log_level": logging level name (default INFO)
- MODALGRAPH_NOTIFY_TIMEOUT / "notify_timeout": seconds an error toast stays up
"""

import json
import logging
import os
from typing import Any, Optional

from modalgraph.paths import get_config_path

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_NOTIFY_TIMEOUT = 2.0


def load_config() -> dict:
    """Load configuration from config.json."""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}
        return config if isinstance(config, dict) else {}
    return {}


def _get_setting(env_name: str, key: str) -> Optional[Any]:
    env_value = os.environ.get(env_name)
    if env_value:
        return env_value
    return load_config().get(key)


def get_log_level() -> str:
    level = str(_get_setting("MODALGRAPH_LOG_LEVEL", "log_level") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def get_notify_timeout() -> float:
    value = _get_setting("MODALGRAPH_NOTIFY_TIMEOUT", "notify_timeout")
    if value is None:
        return DEFAULT_NOTIFY_TIMEOUT
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return DEFAULT_NOTIFY_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_NOTIFY_TIMEOUT


def configure_logging() -> None:
    """Configure root logging for the app entry point."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
