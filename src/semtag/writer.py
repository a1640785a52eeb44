"""Version writer: publish a version as an annotated tag on the remote.

The publish sequence is:

    start -> fetched -> ref-resolved -> tagged-locally -> remote-reconciled -> pushed

Nothing is retried and nothing is rolled back. A push the remote rejects (another
publisher got there first) is not an error: ``write_version`` returns False and
the caller decides whether to retry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from semver import Version

from semtag.binding import RepoBinding
from semtag.context import DriverContext
from semtag.errors import ConfigurationError, RefResolutionError
from semtag.gateway.git.abc import DEFAULT_REMOTE
from semtag.gateway.git.tag_ops.types import TagPushRejected
from semtag.output import user_output
from semtag.version import format_tag_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteRef:
    """Tag whatever commit ``ref`` (a branch or HEAD) points at on the remote."""

    ref: str


@dataclass(frozen=True)
class ResourceRepo:
    """Tag the HEAD commit of another checked-out repository."""

    path: Path


RefSource = RemoteRef | ResourceRepo


def ref_source_from_params(params: Mapping[str, object] | None, branch: str | None) -> RefSource:
    """Turn the loosely typed put params into a RefSource.

    A ``repo`` entry selects the checked-out repository at that path; without
    it the remote's current commit at ``branch`` (or HEAD) is used.

    Raises:
        ConfigurationError: If ``repo`` is present but not a non-empty string
    """
    if params is not None and "repo" in params:
        repo = params["repo"]
        if not isinstance(repo, str) or not repo:
            raise ConfigurationError(
                f"The repo parameter must be a path string, got {type(repo).__name__}"
            )
        return ResourceRepo(path=Path(repo))
    return RemoteRef(ref=branch or "HEAD")


def build_tag_message(env: Mapping[str, str]) -> str:
    """Build the tag annotation from the build metadata in env."""
    return (
        f"Pipeline: {env.get('BUILD_PIPELINE_NAME', '')}\n"
        f"Job: {env.get('BUILD_JOB_NAME', '')}\n"
        f"Build: {env.get('BUILD_NAME', '')}"
    )


def resolve_target_commit(ctx: DriverContext, binding: RepoBinding, source: RefSource) -> str:
    """Determine the commit hash the new tag should point at.

    Raises:
        GitCommandError: If the underlying git query fails
        RefResolutionError: If no commit could be determined
    """
    if isinstance(source, ResourceRepo):
        user_output(f"Using the commit from resource: {source.path}")
        return ctx.git.repo.get_head_commit(source.path)

    user_output(f"Using the last commit at {source.ref}")
    commit = ctx.git.remote.get_remote_commit(binding.work_dir, DEFAULT_REMOTE, source.ref)
    if not commit:
        raise RefResolutionError(f"Remote '{DEFAULT_REMOTE}' has no ref matching '{source.ref}'")
    return commit


def write_version(
    ctx: DriverContext,
    binding: RepoBinding,
    new_version: Version,
    *,
    source: RefSource,
) -> bool:
    """Tag the target commit with new_version and push the tag.

    An existing remote tag of the same name is deleted first, so publishing
    the same version again moves the tag rather than failing.

    Args:
        ctx: Driver context
        binding: Working copy from set_up_repo()
        new_version: Version to publish
        source: Where the commit to tag comes from

    Returns:
        True if the tag was pushed, False if the remote rejected the push

    Raises:
        GitCommandError: If any git step fails for a non-benign reason
        RefResolutionError: If the target commit cannot be determined
    """
    message = build_tag_message(ctx.env)

    ctx.git.remote.check_remote_access(binding.work_dir)
    logger.debug("write_version: fetched")

    commit = resolve_target_commit(ctx, binding, source)
    logger.debug("write_version: ref-resolved (%s)", commit)

    tag_name = format_tag_name(binding.prefix, new_version)
    ctx.git.tag.create_tag(binding.work_dir, tag_name, message, commit)
    logger.debug("write_version: tagged-locally (%s)", tag_name)

    if ctx.git.remote.remote_tag_exists(binding.work_dir, DEFAULT_REMOTE, tag_name):
        logger.debug("Tag %s already exists on remote, deleting it", tag_name)
        ctx.git.tag.delete_remote_tag(binding.work_dir, DEFAULT_REMOTE, tag_name)
    logger.debug("write_version: remote-reconciled")

    result = ctx.git.tag.push_tag(binding.work_dir, DEFAULT_REMOTE, tag_name)
    if isinstance(result, TagPushRejected):
        logger.debug("write_version: push rejected (%s)", result.reason)
        return False

    logger.debug("write_version: pushed")
    return True
