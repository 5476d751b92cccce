"""Data models for mcp-server-manager."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectKind(StrEnum):
    """Implementation kind of an MCP server project."""

    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"

    @property
    def label(self) -> str:
        """Human-readable name used in messages."""
        return _KIND_LABELS[self]


_KIND_LABELS: dict[ProjectKind, str] = {
    ProjectKind.TYPESCRIPT: "TypeScript",
    ProjectKind.PYTHON: "Python",
    ProjectKind.JAVA: "Java",
}


class Language(StrEnum):
    """Language a new server project is scaffolded in."""

    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"

    @property
    def kind(self) -> ProjectKind:
        return ProjectKind(self.value)


class PythonLauncher(StrEnum):
    """Launcher used when registering a Python ``server.py``."""

    UV = "uv"
    PYTHON = "python"


@dataclass(frozen=True)
class Artifact:
    """The runnable output of a project.

    Exactly one of ``path`` (a script, bundle or archive) and ``module``
    (a Python module run with ``-m``) is set.
    """

    kind: ProjectKind
    path: Path | None = None
    module: str | None = None

    @property
    def is_module(self) -> bool:
        return self.module is not None


class LaunchSpec(BaseModel):
    """How a registered server process is started."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., description="Executable to run")
    args: tuple[str, ...] = Field(default=(), description="Ordered arguments")

    def to_entry(self) -> dict[str, Any]:
        """Return the registry JSON shape of this spec."""
        return {"command": self.command, "args": list(self.args)}


@dataclass(frozen=True)
class BuildStep:
    """One step of a build; candidates are tried in order until one succeeds."""

    description: str
    candidates: tuple[tuple[str, ...], ...]


@dataclass
class CommandResult:
    """Result of running one external command."""

    success: bool
    command: list[str]
    stdout: str = ""
    stderr: str = ""
    return_code: int | None = -1


class OperationError(BaseModel):
    """Failure detail of an operation."""

    kind: str = Field(..., description="Error kind, e.g. 'DirectoryNotFound'")
    message: str = Field(..., description="Human-readable description")


class OperationResult(BaseModel):
    """Uniform result of the create, build and install operations."""

    success: bool
    message: str
    path: str | None = Field(None, description="Absolute project directory")
    config_path: str | None = Field(None, description="Absolute registry file path")
    server_name: str | None = Field(None, description="Registered server name")
    error: OperationError | None = None

    @classmethod
    def failure(cls, kind: str, message: str) -> "OperationResult":
        return cls(success=False, message=message, error=OperationError(kind=kind, message=message))
