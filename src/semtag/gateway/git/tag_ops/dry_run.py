"""No-op Git tag operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of destructive
tag operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from semtag.gateway.git.tag_ops.abc import GitTagOps
from semtag.gateway.git.tag_ops.types import NoTagsYet, TagListing, TagPushed, TagPushRejected
from semtag.output import user_output


class DryRunGitTagOps(GitTagOps):
    """No-op wrapper that prevents execution of destructive tag operations.

    This wrapper intercepts destructive git operations (create_tag,
    delete_remote_tag, push_tag) and prints what would happen. Read-only
    operations (list_tags) are delegated to the wrapped implementation.

    Usage:
        real_ops = RealGitTagOps()
        noop_ops = DryRunGitTagOps(real_ops)

        # Query operations work normally
        listing = noop_ops.list_tags(repo_root, "v*", merged_into=None)

        # Mutation operations print dry-run message
        noop_ops.push_tag(repo_root, "origin", "v1.0.0")
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        """Create a dry-run wrapper around a GitTagOps implementation.

        Args:
            wrapped: The GitTagOps implementation to wrap (usually RealGitTagOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def list_tags(
        self, repo_root: Path, pattern: str, *, merged_into: str | None
    ) -> TagListing | NoTagsYet:
        """List tags (read-only, delegates to wrapped)."""
        return self._wrapped.list_tags(repo_root, pattern, merged_into=merged_into)

    # ============================================================================
    # Mutation Operations (print dry-run message)
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str, commit: str) -> None:
        """Print dry-run message instead of creating tag."""
        user_output(f"[DRY RUN] Would run: git tag --force --annotate {tag_name} {commit}")

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Print dry-run message instead of deleting the remote tag."""
        user_output(f"[DRY RUN] Would run: git push {remote} :refs/tags/{tag_name}")

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> TagPushed | TagPushRejected:
        """Print dry-run message instead of pushing tag."""
        user_output(f"[DRY RUN] Would run: git push {remote} {tag_name}")
        return TagPushed()
