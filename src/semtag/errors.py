"""Exception types raised by the semtag driver.

Benign outcomes (no tags yet, a lost publish race) are never raised; they are
returned as values from the gateways. Everything here is fatal to the current
invocation.
"""

from __future__ import annotations

from collections.abc import Sequence


class SemtagError(Exception):
    """Base class for all driver errors."""


class ConfigurationError(SemtagError, ValueError):
    """The driver configuration is missing or inconsistent."""


class TagParseError(SemtagError, ValueError):
    """A tag name could not be turned into a version."""


class RefResolutionError(SemtagError):
    """The commit to tag could not be determined."""


class GitCommandError(SemtagError, RuntimeError):
    """A git subprocess exited non-zero for a reason not classified as benign.

    Attributes:
        cmd: The argument list that was run
        returncode: Exit status of the process
        output: Combined stdout/stderr of the process
        operation_context: Human-readable description of what was attempted
    """

    def __init__(
        self,
        *,
        cmd: Sequence[str],
        returncode: int,
        output: str,
        operation_context: str,
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        self.operation_context = operation_context
        message = f"Failed to {operation_context} (exit code {returncode})"
        detail = output.strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
