"""Run external build tools and capture their output."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from mcp_server_manager.models import CommandResult

logger = logging.getLogger(__name__)


def run_command(
    command: Sequence[str],
    cwd: Path,
    *,
    timeout: int | None = None,
) -> CommandResult:
    """Run ``command`` in ``cwd``.

    Never raises for a failing tool: a missing executable, an OS error or a
    timeout is reported as an unsuccessful result.

    Args:
        command: Executable and arguments.
        cwd: Working directory.
        timeout: Seconds before the command is abandoned, or None to wait.

    Returns:
        CommandResult with captured output.
    """
    cmd = list(command)
    logger.info("Running: %s (cwd=%s)", " ".join(cmd), cwd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult(
            success=False,
            command=cmd,
            stderr=f"Command timed out after {timeout}s",
            return_code=-1,
        )
    except OSError as e:
        return CommandResult(
            success=False,
            command=cmd,
            stderr=f"Failed to execute: {e}",
            return_code=-1,
        )

    if result.returncode != 0:
        logger.debug("Command exited with %s: %s", result.returncode, " ".join(cmd))

    return CommandResult(
        success=result.returncode == 0,
        command=cmd,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        return_code=result.returncode,
    )
