"""User-level configuration for mcp-server-manager defaults.

Reads from ~/.config/mcp-server-manager/config.yaml. Recognised keys:

``config_path``
    Registry file used by ``install`` when no path is passed explicitly.
``python_launcher``
    ``uv`` (default) or ``python``; how a root ``server.py`` is registered.
``build_timeout``
    Seconds before an external build command is abandoned. Unset means no
    timeout.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from mcp_server_manager.models import PythonLauncher
from mcp_server_manager.paths import default_registry_path, resolve_path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "mcp-server-manager"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Keys that map to enum types for validation
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "python_launcher": PythonLauncher,
}

KNOWN_KEYS = ("config_path", "python_launcher", "build_timeout")


def get_config_path() -> Path:
    """Return the path to the user config file."""
    return CONFIG_FILE


def load_user_config() -> dict[str, Any]:
    """Load user configuration from disk.

    Returns an empty dict if the file doesn't exist or is invalid.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load user config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"User config is not a mapping: {config_path}")
        return {}

    validated: dict[str, Any] = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning(f"Unknown key '{key}' in user config, ignoring")
            continue
        if key in _ENUM_FIELDS and value is not None:
            try:
                _ENUM_FIELDS[key](value)
            except ValueError:
                valid = [e.value for e in _ENUM_FIELDS[key]]
                logger.warning(
                    f"Invalid value '{value}' for '{key}' in user config. Valid: {valid}"
                )
                continue
        if key == "build_timeout" and value is not None:
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                logger.warning(f"Invalid build_timeout '{value}' in user config, ignoring")
                continue
        validated[key] = value

    return validated


def save_user_config(config: dict[str, Any]) -> Path:
    """Save configuration to the user config file.

    Returns the path written to.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return config_path


def get_registry_path(override: str | Path | None = None) -> Path:
    """Pick the registry file: explicit override, then user config, then platform default."""
    if override:
        return resolve_path(override)
    configured = load_user_config().get("config_path")
    if configured:
        return resolve_path(configured)
    return default_registry_path()


def get_python_launcher() -> PythonLauncher:
    value = load_user_config().get("python_launcher")
    return PythonLauncher(value) if value else PythonLauncher.UV


def get_build_timeout() -> int | None:
    return load_user_config().get("build_timeout")
