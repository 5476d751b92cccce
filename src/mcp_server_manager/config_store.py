"""Read, merge and atomically rewrite the shared server registry.

The registry is a JSON document shared with other tools. Only the entry
being installed is touched; every other server entry and every other
top-level key is written back unchanged.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mcp_server_manager.errors import ConfigCorrupt
from mcp_server_manager.models import LaunchSpec

logger = logging.getLogger(__name__)

SERVERS_KEY = "mcpServers"


@dataclass(frozen=True)
class Registry:
    """A parsed registry document."""

    document: dict[str, Any] = field(default_factory=lambda: {SERVERS_KEY: {}})

    @property
    def servers(self) -> dict[str, Any]:
        return self.document.get(SERVERS_KEY, {})

    def get(self, name: str) -> dict[str, Any] | None:
        return self.servers.get(name)


def load(path: Path) -> Registry:
    """Load the registry at ``path``.

    A missing file yields an empty registry.

    Raises:
        ConfigCorrupt: If the file exists but is not a usable registry.
    """
    if not path.exists():
        logger.debug(f"No registry at {path}, starting empty")
        return Registry()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigCorrupt(f"Failed to read config {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigCorrupt(f"Malformed JSON in {path}: not valid UTF-8 ({e})") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigCorrupt(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(document, dict):
        raise ConfigCorrupt(f"Malformed JSON in {path}: root must be an object.")

    servers = document.get(SERVERS_KEY)
    if servers is None:
        document[SERVERS_KEY] = {}
    elif not isinstance(servers, dict):
        raise ConfigCorrupt(f"Malformed JSON in {path}: `{SERVERS_KEY}` must be an object.")

    return Registry(document=document)


def merge(registry: Registry, name: str, spec: LaunchSpec) -> Registry:
    """Return a new registry with ``name`` set to ``spec``.

    An existing entry keeps its other fields (``env`` and the like); only
    ``command`` and ``args`` are replaced.
    """
    document = copy.deepcopy(registry.document)
    servers = document.setdefault(SERVERS_KEY, {})

    existing = servers.get(name)
    entry = dict(existing) if isinstance(existing, dict) else {}
    entry.update(spec.to_entry())
    servers[name] = entry

    return Registry(document=document)


def save(path: Path, registry: Registry) -> None:
    """Write the registry to ``path`` atomically.

    The document is flushed to a temporary file beside the real target and
    renamed over it, so readers see either the old or the new file. A
    symlinked registry stays a symlink, and an existing file keeps its
    permission bits.
    """
    target = path.resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else None

    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(registry.document, handle, indent=2)
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())
        if mode is not None:
            os.chmod(temp_path, mode)
        os.replace(temp_path, target)
        logger.debug(f"Wrote registry: {target}")
    finally:
        temp_path.unlink(missing_ok=True)


def install_entry(path: Path, name: str, spec: LaunchSpec) -> Registry:
    """Read the registry fresh, set one entry and write it back."""
    registry = merge(load(path), name, spec)
    save(path, registry)
    logger.info(f"Registered server '{name}' in {path}")
    return registry
