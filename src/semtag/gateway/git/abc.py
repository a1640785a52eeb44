"""Aggregate of the git sub-gateways used by the driver.

Architecture:
- Git: Frozen bundle of the repo_ops, remote_ops and tag_ops sub-gateways
- real.create_real_git: Production wiring (optionally dry-run for tag mutations)
- fake.create_fake_git: In-memory wiring with shared tag state for tests
"""

from __future__ import annotations

from dataclasses import dataclass

from semtag.gateway.git.remote_ops.abc import GitRemoteOps
from semtag.gateway.git.repo_ops.abc import GitRepoOps
from semtag.gateway.git.tag_ops.abc import GitTagOps

DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class Git:
    """The git operations available to the driver."""

    repo: GitRepoOps
    remote: GitRemoteOps
    tag: GitTagOps
