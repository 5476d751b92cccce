"""Project-type detection from a directory's file listing."""

import logging
from dataclasses import dataclass
from pathlib import Path

from mcp_server_manager.errors import DirectoryNotFound, UnrecognizedProjectKind
from mcp_server_manager.models import ProjectKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionRule:
    """Markers that identify one project kind.

    ``files`` are matched against top-level entry names; ``dirs`` are
    relative directory paths that must exist.
    """

    kind: ProjectKind
    files: frozenset[str]
    dirs: tuple[str, ...] = ()

    def matches(self, directory: Path, entries: set[str]) -> bool:
        if self.files & entries:
            return True
        return any((directory / rel).is_dir() for rel in self.dirs)


# Order matters: a project may carry markers of several kinds.
DETECTION_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(ProjectKind.TYPESCRIPT, frozenset({"package.json"})),
    DetectionRule(
        ProjectKind.PYTHON,
        frozenset({"requirements.txt", "pyproject.toml", "server.py"}),
    ),
    DetectionRule(
        ProjectKind.JAVA,
        frozenset({"pom.xml", "build.gradle", "build.gradle.kts"}),
        dirs=("target", "build/libs"),
    ),
)


def list_entries(directory: Path) -> set[str]:
    """Return the names of the entries directly inside ``directory``."""
    if not directory.is_dir():
        raise DirectoryNotFound(f"Directory {directory} does not exist.")
    return {entry.name for entry in directory.iterdir()}


def detect(directory: Path) -> ProjectKind:
    """Infer the project kind of ``directory``.

    Raises:
        DirectoryNotFound: If the directory is missing.
        UnrecognizedProjectKind: If no rule matches.
    """
    entries = list_entries(directory)

    for rule in DETECTION_RULES:
        if rule.matches(directory, entries):
            logger.debug(f"Detected {rule.kind.value} project in {directory}")
            return rule.kind

    raise UnrecognizedProjectKind(
        f"Unable to determine project type in {directory}. "
        "Make sure it's a valid MCP server project."
    )
