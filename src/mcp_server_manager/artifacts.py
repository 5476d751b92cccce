"""Locate the runnable build output of a detected project."""

import logging
import re
from pathlib import Path

from mcp_server_manager.errors import ArtifactNotFound, NoArchiveFound
from mcp_server_manager.models import Artifact, ProjectKind

logger = logging.getLogger(__name__)

TYPESCRIPT_ENTRY = Path("build") / "index.js"
PYTHON_ENTRY = "server.py"

# Maven output wins over Gradle output when both exist.
JVM_OUTPUT_DIRS: tuple[Path, ...] = (Path("target"), Path("build") / "libs")

# Bundled-dependency archive names, most preferred first.
BUNDLED_JAR_SUFFIXES: tuple[str, ...] = ("-jar-with-dependencies.jar", "-all.jar")
_IGNORED_JAR_SUFFIXES: tuple[str, ...] = ("-sources.jar", "-javadoc.jar")

_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")


def normalize_module_name(name: str) -> str:
    """Turn a project name into a Python module name (``my-server`` -> ``my_server``)."""
    return _NON_IDENTIFIER.sub("_", name)


def locate(directory: Path, kind: ProjectKind) -> Artifact:
    """Find the launch target of a project of the given kind.

    Raises:
        ArtifactNotFound: If a JVM project has no build output directory.
        NoArchiveFound: If the JVM output directory holds no jar.
    """
    match kind:
        case ProjectKind.TYPESCRIPT:
            # Produced by `build`; not checked here.
            return Artifact(kind=kind, path=directory / TYPESCRIPT_ENTRY)
        case ProjectKind.PYTHON:
            return _locate_python(directory)
        case ProjectKind.JAVA:
            return _locate_jar(directory)
    raise ArtifactNotFound(f"No artifact rule for project kind '{kind}'")


def _locate_python(directory: Path) -> Artifact:
    entry = directory / PYTHON_ENTRY
    if entry.is_file():
        return Artifact(kind=ProjectKind.PYTHON, path=entry)
    module = normalize_module_name(directory.name)
    logger.debug(f"No {PYTHON_ENTRY} in {directory}, using module '{module}'")
    return Artifact(kind=ProjectKind.PYTHON, module=module)


def _locate_jar(directory: Path) -> Artifact:
    for rel in JVM_OUTPUT_DIRS:
        output_dir = directory / rel
        if output_dir.is_dir():
            jar = select_jar(output_dir)
            if jar is None:
                raise NoArchiveFound(f"No jar file found in {output_dir}")
            logger.debug(f"Selected archive {jar}")
            return Artifact(kind=ProjectKind.JAVA, path=jar)

    raise ArtifactNotFound(
        f"No Maven or Gradle build artifacts found in {directory}. "
        "Build the server before installing it."
    )


def select_jar(output_dir: Path) -> Path | None:
    """Pick the archive to launch from a build output directory."""
    jars = sorted(
        p
        for p in output_dir.iterdir()
        if p.is_file() and p.name.endswith(".jar") and not p.name.endswith(_IGNORED_JAR_SUFFIXES)
    )
    if not jars:
        return None

    for suffix in BUNDLED_JAR_SUFFIXES:
        for jar in jars:
            if jar.name.endswith(suffix):
                return jar
    return jars[0]
