"""Pytest fixtures for mcp-server-manager tests."""

from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def user_config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the user config at a private file so the real one is never read."""
    config_file = tmp_path / "user-config" / "config.yaml"
    with patch("mcp_server_manager.user_config.get_config_path", return_value=config_file):
        yield config_file


@pytest.fixture
def registry_path(tmp_path: Path) -> Path:
    """Location of a registry file that does not exist yet."""
    return tmp_path / "Claude" / "claude_desktop_config.json"


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create a project directory holding the given (empty) files and directories."""

    def _make(
        name: str = "my-server",
        files: Iterable[str] = (),
        dirs: Iterable[str] = (),
    ) -> Path:
        project = tmp_path / "projects" / name
        project.mkdir(parents=True)
        for rel in dirs:
            (project / rel).mkdir(parents=True, exist_ok=True)
        for rel in files:
            path = project / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("")
        return project

    return _make
