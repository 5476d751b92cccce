"""Build plans per project kind and their execution.

A plan is a list of steps. Each step lists candidate commands in order of
preference (``uv`` before plain ``pip``, the Gradle wrapper before a global
``gradle``); the first candidate that succeeds completes the step.
"""

import logging
import platform
import sys
from pathlib import Path

from mcp_server_manager.errors import BuildToolFailed
from mcp_server_manager.models import BuildStep, CommandResult, ProjectKind
from mcp_server_manager.runner import run_command

logger = logging.getLogger(__name__)

VENV_DIR = ".venv"


def _is_windows() -> bool:
    return platform.system() == "Windows"


def _venv_pip(directory: Path) -> str:
    if _is_windows():
        return str(directory / VENV_DIR / "Scripts" / "pip")
    return str(directory / VENV_DIR / "bin" / "pip")


def _pip_install_step(directory: Path, description: str, *install_args: str) -> BuildStep:
    return BuildStep(
        description=description,
        candidates=(
            ("uv", "pip", "install", *install_args),
            (_venv_pip(directory), "install", *install_args),
        ),
    )


def _typescript_plan(directory: Path) -> list[BuildStep]:
    return [
        BuildStep("Install dependencies", (("npm", "install"),)),
        BuildStep("Compile TypeScript", (("npm", "run", "build"),)),
    ]


def _python_plan(directory: Path) -> list[BuildStep]:
    steps: list[BuildStep] = []

    if not (directory / VENV_DIR).exists():
        steps.append(
            BuildStep(
                "Create virtual environment",
                (("uv", "venv"), (sys.executable, "-m", "venv", VENV_DIR)),
            )
        )

    if (directory / "requirements.txt").exists():
        steps.append(
            _pip_install_step(directory, "Install requirements", "-r", "requirements.txt")
        )
    elif (directory / "pyproject.toml").exists():
        steps.append(_pip_install_step(directory, "Install project", "-e", "."))
    else:
        steps.append(_pip_install_step(directory, "Install MCP SDK", "mcp[cli]"))

    return steps


def _java_plan(directory: Path) -> list[BuildStep]:
    if (directory / "pom.xml").exists():
        return [BuildStep("Maven package", (("mvn", "clean", "package"),))]

    if (directory / "build.gradle").exists() or (directory / "build.gradle.kts").exists():
        wrapper = ("gradlew.bat", "build") if _is_windows() else ("./gradlew", "build")
        return [BuildStep("Gradle build", (wrapper, ("gradle", "build")))]

    raise BuildToolFailed(f"No Maven or Gradle build files found in {directory}")


def build_plan(directory: Path, kind: ProjectKind) -> list[BuildStep]:
    """Return the ordered build steps for a project."""
    match kind:
        case ProjectKind.TYPESCRIPT:
            return _typescript_plan(directory)
        case ProjectKind.PYTHON:
            return _python_plan(directory)
        case ProjectKind.JAVA:
            return _java_plan(directory)
    raise BuildToolFailed(f"No build plan for project kind '{kind}'")


def run_step(step: BuildStep, directory: Path, *, timeout: int | None = None) -> CommandResult:
    """Run the candidates of ``step`` until one succeeds.

    Raises:
        BuildToolFailed: If every candidate failed.
    """
    attempts: list[CommandResult] = []
    for candidate in step.candidates:
        result = run_command(candidate, directory, timeout=timeout)
        if result.success:
            return result
        attempts.append(result)
        logger.warning(f"{step.description}: '{' '.join(candidate)}' failed")

    raise BuildToolFailed(f"{step.description} failed in {directory}", attempts)


def run_build(
    directory: Path,
    kind: ProjectKind,
    *,
    timeout: int | None = None,
) -> list[CommandResult]:
    """Build a project by running its plan step by step.

    Returns:
        The successful command of each step, in order.

    Raises:
        BuildToolFailed: If a step could not be completed.
    """
    results: list[CommandResult] = []
    for step in build_plan(directory, kind):
        logger.info(f"{step.description} ({kind.label})")
        results.append(run_step(step, directory, timeout=timeout))
    return results
