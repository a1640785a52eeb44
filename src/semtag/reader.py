"""Version reader: find the current version among the remote's tags."""

import logging
from typing import NamedTuple

from semver import Version

from semtag.binding import RepoBinding
from semtag.context import DriverContext
from semtag.errors import GitCommandError, TagParseError
from semtag.gateway.git.abc import DEFAULT_REMOTE
from semtag.gateway.git.tag_ops.types import NoTagsYet
from semtag.output import forward_command_output
from semtag.version import ZERO_VERSION, current_version

logger = logging.getLogger(__name__)


class ReadResult(NamedTuple):
    """Outcome of reading the current version.

    Attributes:
        version: Highest version found, or 0.0.0 when nothing was found
        found: False only when the repository or remote is still empty. A successful
            but empty tag listing still counts as found (at 0.0.0).
    """

    version: Version
    found: bool


def read_version(ctx: DriverContext, binding: RepoBinding) -> ReadResult:
    """Fetch tags and return the highest ``<prefix>*`` version.

    When a branch is configured, only tags reachable from
    ``origin/<branch>`` are considered. A remote with no refs at all reads
    as not found rather than as an unknown branch.

    Raises:
        GitCommandError: If fetching or listing tags fails
        TagParseError: If a listed tag is not a prefixed semantic version
    """
    ctx.git.remote.fetch_tags(binding.work_dir)

    merged_into = f"{DEFAULT_REMOTE}/{binding.branch}" if binding.branch else None
    try:
        listing = ctx.git.tag.list_tags(
            binding.work_dir, f"{binding.prefix}*", merged_into=merged_into
        )
    except GitCommandError:
        # origin/<branch> cannot exist yet when nothing was ever pushed
        if merged_into is None or ctx.git.remote.has_remote_refs(binding.work_dir, DEFAULT_REMOTE):
            raise
        logger.debug("Remote has no refs, so %s does not exist yet", merged_into)
        return ReadResult(version=ZERO_VERSION, found=False)

    if isinstance(listing, NoTagsYet):
        logger.debug("No tags in repository yet")
        return ReadResult(version=ZERO_VERSION, found=False)

    try:
        version = current_version(binding.prefix, listing.output)
    except TagParseError:
        forward_command_output(listing.output)
        raise

    logger.debug("Current version is %s", version)
    return ReadResult(version=version, found=True)
