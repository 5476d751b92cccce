"""The create, build and install operations.

Each operation validates its input, runs the components, and returns an
``OperationResult``. Nothing raised inside a component escapes: expected
failures become a result carrying the error kind, unexpected ones are
logged and reported as ``InternalError``.
"""

import functools
import logging
import re
from collections.abc import Callable
from pathlib import Path

from mcp_server_manager import config_store
from mcp_server_manager.artifacts import locate
from mcp_server_manager.builder import run_build
from mcp_server_manager.detector import detect
from mcp_server_manager.errors import (
    AlreadyExists,
    DirectoryNotFound,
    InvalidArgument,
    ManagerError,
)
from mcp_server_manager.launch_spec import build_launch_spec
from mcp_server_manager.models import Language, OperationResult
from mcp_server_manager.paths import resolve_path
from mcp_server_manager.scaffold import scaffold_project
from mcp_server_manager.user_config import (
    get_build_timeout,
    get_python_launcher,
    get_registry_path,
)

logger = logging.getLogger(__name__)

SERVER_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")

_Operation = Callable[..., OperationResult]


def _operation(name: str) -> Callable[[_Operation], _Operation]:
    """Convert every exception raised by an operation into a failure result."""

    def decorator(func: _Operation) -> _Operation:
        @functools.wraps(func)
        def wrapper(*args: object, **kwargs: object) -> OperationResult:
            try:
                return func(*args, **kwargs)
            except ManagerError as e:
                logger.error(f"{name} failed: {e}")
                return OperationResult.failure(e.kind, str(e))
            except Exception as e:
                logger.exception(f"Unexpected error during {name}")
                return OperationResult.failure("InternalError", f"Failed to {name} server: {e}")

        return wrapper

    return decorator


def validate_server_name(name: str) -> str:
    """Check that ``name`` can serve as directory, package and registry key."""
    name = name.strip()
    if not name:
        raise InvalidArgument("Server name must not be empty.")
    if not SERVER_NAME_PATTERN.match(name):
        raise InvalidArgument(
            f"Invalid server name '{name}': use letters, digits, '-' and '_', "
            "starting with a letter."
        )
    return name


def _parse_language(language: Language | str) -> Language:
    try:
        return Language(language)
    except ValueError:
        valid = ", ".join(lang.value for lang in Language)
        raise InvalidArgument(f"Unsupported language '{language}'. Valid: {valid}") from None


def _existing_directory(directory: str | Path) -> Path:
    if not str(directory).strip():
        raise InvalidArgument("Directory must not be empty.")
    full_path = resolve_path(directory)
    if not full_path.is_dir():
        raise DirectoryNotFound(f"Directory {full_path} does not exist.")
    return full_path


@_operation("create")
def create_server(name: str, language: Language | str, directory: str | Path) -> OperationResult:
    """Scaffold a new server project at ``<directory>/<name>``.

    A directory created before scaffolding failed is left in place.
    """
    name = validate_server_name(name)
    lang = _parse_language(language)
    if not str(directory).strip():
        raise InvalidArgument("Directory must not be empty.")

    full_path = resolve_path(directory) / name
    if full_path.exists():
        raise AlreadyExists(
            f"Directory {full_path} already exists. Please choose a different name or directory."
        )

    full_path.mkdir(parents=True)
    scaffold_project(name, lang, full_path)

    return OperationResult(
        success=True,
        message=f'Successfully created {lang.value} MCP server project "{name}" at {full_path}',
        path=str(full_path),
        server_name=name,
    )


@_operation("build")
def build_server(directory: str | Path) -> OperationResult:
    """Detect the project kind and run its build tools."""
    full_path = _existing_directory(directory)
    kind = detect(full_path)

    run_build(full_path, kind, timeout=get_build_timeout())

    return OperationResult(
        success=True,
        message=f"Successfully built {kind.label} MCP server at {full_path}",
        path=str(full_path),
    )


@_operation("install")
def install_server(
    directory: str | Path,
    config_path: str | Path | None = None,
    name: str | None = None,
) -> OperationResult:
    """Register a built server in the shared registry.

    Args:
        directory: Project directory.
        config_path: Registry file; defaults to the user config or platform path.
        name: Registry key; defaults to the directory name.
    """
    full_path = _existing_directory(directory)
    server_name = validate_server_name(name) if name else full_path.name

    kind = detect(full_path)
    artifact = locate(full_path, kind)
    spec = build_launch_spec(kind, artifact, full_path, get_python_launcher())

    registry_path = get_registry_path(config_path)
    config_store.install_entry(registry_path, server_name, spec)

    return OperationResult(
        success=True,
        message=(
            f'Successfully installed MCP server "{server_name}" at {full_path} '
            f"in config at {registry_path}"
        ),
        path=str(full_path),
        config_path=str(registry_path),
        server_name=server_name,
    )
