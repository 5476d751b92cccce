"""Path resolution helpers."""

import os
import platform
from pathlib import Path

REGISTRY_DIR_NAME = "Claude"
REGISTRY_FILE_NAME = "claude_desktop_config.json"


def resolve_path(value: str | Path) -> Path:
    """Resolve a user-supplied path to an absolute one.

    A leading ``~`` stands for the home directory; anything else is taken
    relative to the current working directory.
    """
    text = str(value)
    if text.startswith("~"):
        rest = text[1:].lstrip("/\\")
        expanded = Path.home() / rest if rest else Path.home()
        return Path(os.path.abspath(expanded))
    return Path(os.path.abspath(text))


def default_registry_path() -> Path:
    """Return the platform-default location of the desktop client config."""
    system = platform.system()

    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"

    return base / REGISTRY_DIR_NAME / REGISTRY_FILE_NAME
