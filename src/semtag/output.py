"""Diagnostic output helpers.

All user-facing diagnostics, including raw git output, go to stderr so that
stdout stays reserved for machine-readable command results.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message to the diagnostic stream (stderr)."""
    click.echo(message, err=True, nl=nl)


def forward_command_output(output: str) -> None:
    """Forward raw subprocess output verbatim to the diagnostic stream."""
    if not output:
        return
    user_output(output, nl=not output.endswith("\n"))
