"""Production wiring of the git sub-gateways."""

from semtag.gateway.git.abc import Git
from semtag.gateway.git.remote_ops.real import RealGitRemoteOps
from semtag.gateway.git.repo_ops.real import RealGitRepoOps
from semtag.gateway.git.tag_ops.abc import GitTagOps
from semtag.gateway.git.tag_ops.dry_run import DryRunGitTagOps
from semtag.gateway.git.tag_ops.real import RealGitTagOps


def create_real_git(*, dry_run: bool) -> Git:
    """Create the production Git gateway.

    In dry-run mode tag mutations are printed instead of executed; fetches and
    remote queries still run.
    """
    tag_ops: GitTagOps = RealGitTagOps()
    if dry_run:
        tag_ops = DryRunGitTagOps(tag_ops)
    return Git(repo=RealGitRepoOps(), remote=RealGitRemoteOps(), tag=tag_ops)
