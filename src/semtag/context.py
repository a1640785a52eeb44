"""Explicit per-invocation context for the driver operations."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from semtag.config import DriverConfig
from semtag.gateway.git.abc import Git
from semtag.gateway.git.real import create_real_git


@dataclass(frozen=True)
class DriverContext:
    """Everything a driver operation needs, owned by the caller.

    Attributes:
        git: Git gateway
        config: Validated driver configuration
        env: Environment used for the tag annotation message
    """

    git: Git
    config: DriverConfig
    env: Mapping[str, str]


def create_context(config: DriverConfig, *, dry_run: bool) -> DriverContext:
    """Create the production context for one driver invocation."""
    return DriverContext(git=create_real_git(dry_run=dry_run), config=config, env=dict(os.environ))
