"""Error taxonomy for mcp-server-manager.

Components raise these; the operation dispatcher converts them into
structured failure results. Each class carries the ``kind`` string reported
to callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_server_manager.models import CommandResult


class ManagerError(Exception):
    """Base class for all expected failures."""

    kind = "ManagerError"


class InvalidArgument(ManagerError):
    """Raised when an operation receives an unusable argument."""

    kind = "InvalidArgument"


class DirectoryNotFound(ManagerError):
    """Raised when a project directory does not exist."""

    kind = "DirectoryNotFound"


class AlreadyExists(ManagerError):
    """Raised when the target path of a new project is already taken."""

    kind = "AlreadyExists"


class UnrecognizedProjectKind(ManagerError):
    """Raised when no detection rule matches a directory."""

    kind = "UnrecognizedProjectKind"


class ArtifactNotFound(ManagerError):
    """Raised when the expected build output is missing."""

    kind = "ArtifactNotFound"


class NoArchiveFound(ArtifactNotFound):
    """Raised when a JVM output directory holds no jar file."""

    kind = "NoArchiveFound"


class ConfigCorrupt(ManagerError):
    """Raised when the registry file exists but cannot be used."""

    kind = "ConfigCorrupt"


class ScaffoldFailed(ManagerError):
    """Raised when a project template cannot be expanded."""

    kind = "ScaffoldFailed"


class BuildToolFailed(ManagerError):
    """Raised when every candidate command of a build step failed."""

    kind = "BuildToolFailed"

    def __init__(self, message: str, attempts: list[CommandResult] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.attempts = attempts or []

    def __str__(self) -> str:
        parts = [self.message]
        for attempt in self.attempts:
            parts.append(f"Command failed: {' '.join(attempt.command)}")
            if attempt.return_code is not None and attempt.return_code >= 0:
                parts.append(f"Exit code: {attempt.return_code}")
            if attempt.stdout.strip():
                parts.append(f"Stdout: {attempt.stdout.strip()}")
            if attempt.stderr.strip():
                parts.append(f"Stderr: {attempt.stderr.strip()}")
        return "\n".join(parts)
