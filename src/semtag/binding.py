"""Repository binding: resolve the working copy the driver operates on."""

import logging
from dataclasses import dataclass
from pathlib import Path

from semtag.config import DEFAULT_PREFIX
from semtag.context import DriverContext
from semtag.errors import ConfigurationError
from semtag.gateway.git.abc import DEFAULT_REMOTE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoBinding:
    """A ready-to-use working copy plus the tag naming it is read with."""

    work_dir: Path
    prefix: str
    branch: str | None


def set_up_repo(ctx: DriverContext) -> RepoBinding:
    """Bind the driver to a working copy.

    With a local repository path, that path is used as-is and must exist. With a
    URI, an empty repository is initialized at the configured work dir with the
    URI as its ``origin`` remote, unless the work dir already exists, in which
    case it is reused.

    Raises:
        ConfigurationError: If neither/both of path and URI are set, or the
            local path does not exist
        GitCommandError: If initializing the working copy fails
    """
    config = ctx.config
    if config.repository is not None and config.uri is not None:
        raise ConfigurationError(
            "Expected only one of repository (path) or URI to be configured, got both."
        )

    if config.repository is not None:
        if not config.repository.exists():
            raise ConfigurationError(f"Repository path does not exist: {config.repository}")
        work_dir = config.repository
        logger.debug("Using local repository at %s", work_dir)
    elif config.uri is not None:
        work_dir = config.work_dir
        if work_dir.exists():
            logger.debug("Reusing working copy at %s", work_dir)
        else:
            logger.debug("Initializing working copy at %s for %s", work_dir, config.uri)
            ctx.git.repo.init_repo(work_dir)
            ctx.git.repo.add_remote(work_dir, DEFAULT_REMOTE, config.uri)
    else:
        raise ConfigurationError("Expected either repository (path) or URI to be configured.")

    return RepoBinding(
        work_dir=work_dir,
        prefix=config.prefix or DEFAULT_PREFIX,
        branch=config.branch,
    )
