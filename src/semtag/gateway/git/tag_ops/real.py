"""Production Git tag operations using subprocess."""

import logging
from pathlib import Path

from semtag.errors import GitCommandError
from semtag.gateway.git.tag_ops.abc import GitTagOps
from semtag.gateway.git.tag_ops.types import (
    NoTagsYet,
    TagListing,
    TagPushed,
    TagPushRejected,
    find_empty_repo_marker,
    find_push_rejection_marker,
)
from semtag.output import forward_command_output
from semtag.subprocess_utils import run_git

logger = logging.getLogger(__name__)


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tags(
        self, repo_root: Path, pattern: str, *, merged_into: str | None
    ) -> TagListing | NoTagsYet:
        """List local tags matching a glob pattern."""
        args = ["tag"]
        if merged_into is not None:
            args.append(f"--merged={merged_into}")
        args.extend(["-l", pattern])

        result = run_git(args, operation_context="list tags", cwd=repo_root, check=False)
        if result.returncode == 0:
            return TagListing(output=result.stdout)

        forward_command_output(result.stdout)
        marker = find_empty_repo_marker(result.stdout)
        if marker is not None:
            logger.debug("Treating tag listing failure as empty repository (%s)", marker)
            return NoTagsYet(output=result.stdout)
        raise GitCommandError(
            cmd=["git", *args],
            returncode=result.returncode,
            output=result.stdout,
            operation_context="list tags",
        )

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str, commit: str) -> None:
        """Create or force-move an annotated tag."""
        run_git(
            ["tag", "--force", "--annotate", "--message", message, tag_name, commit],
            operation_context=f"create tag '{tag_name}' at {commit}",
            cwd=repo_root,
        )

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Delete a tag on the remote."""
        run_git(
            ["push", remote, f":refs/tags/{tag_name}"],
            operation_context=f"delete tag '{tag_name}' from remote '{remote}'",
            cwd=repo_root,
        )

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> TagPushed | TagPushRejected:
        """Push a tag, classifying remote rejections as a lost race."""
        args = ["push", remote, tag_name]
        result = run_git(
            args,
            operation_context=f"push tag '{tag_name}' to remote '{remote}'",
            cwd=repo_root,
            check=False,
        )
        marker = find_push_rejection_marker(result.stdout)
        if marker is not None:
            forward_command_output(result.stdout)
            return TagPushRejected(reason=marker, output=result.stdout)
        if result.returncode != 0:
            forward_command_output(result.stdout)
            raise GitCommandError(
                cmd=["git", *args],
                returncode=result.returncode,
                output=result.stdout,
                operation_context=f"push tag '{tag_name}' to remote '{remote}'",
            )
        return TagPushed()
