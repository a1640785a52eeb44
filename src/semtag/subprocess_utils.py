"""Subprocess helpers for running git with consistent error reporting."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from semtag.errors import GitCommandError
from semtag.output import forward_command_output

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment suitable for non-interactive git.

    GIT_TERMINAL_PROMPT=0 makes git fail fast instead of waiting on a
    credential prompt that nobody will answer.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command capturing stdout and stderr as one combined stream.

    Args:
        cmd: Command and arguments
        operation_context: Description used in error messages (e.g. "fetch tags")
        cwd: Working directory for the process
        check: If True, a non-zero exit forwards the output to stderr and raises
        env: Environment for the process (defaults to the current environment)

    Returns:
        The completed process; ``stdout`` holds the combined output

    Raises:
        GitCommandError: If check is True and the command exits non-zero
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    result = subprocess.run(
        list(cmd),
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
        env=env,
    )
    if check and result.returncode != 0:
        forward_command_output(result.stdout)
        raise GitCommandError(
            cmd=cmd,
            returncode=result.returncode,
            output=result.stdout,
            operation_context=operation_context,
        )
    return result


def run_git(
    args: Sequence[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run ``git <args>`` non-interactively."""
    return run_subprocess_with_context(
        cmd=["git", *args],
        operation_context=operation_context,
        cwd=cwd,
        check=check,
        env=copied_env_for_git_subprocess(),
    )
