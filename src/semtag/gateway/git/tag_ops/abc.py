"""Abstract base class for Git tag operations.

This sub-gateway covers listing local tags, creating annotated tags, and
pushing or deleting tags on the remote.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from semtag.gateway.git.tag_ops.types import NoTagsYet, TagListing, TagPushed, TagPushRejected


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    This interface contains both query and mutation operations for tags.
    All implementations (real, fake, dry-run) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_tags(
        self, repo_root: Path, pattern: str, *, merged_into: str | None
    ) -> TagListing | NoTagsYet:
        """List local tags matching a glob pattern.

        Args:
            repo_root: Path to the repository root
            pattern: Tag glob (e.g., 'v*')
            merged_into: If set, only tags reachable from this ref
                (e.g., 'origin/main')

        Returns:
            TagListing on success, NoTagsYet if git reports an empty repository

        Raises:
            GitCommandError: On any other git failure
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, message: str, commit: str) -> None:
        """Create or force-move an annotated tag to point at commit.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., 'v1.0.0')
            message: Tag annotation message
            commit: Commit hash the tag should point at

        Raises:
            GitCommandError: If git tag fails
        """
        ...

    @abstractmethod
    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Delete a tag on the remote (``git push <remote> :refs/tags/<tag>``).

        Raises:
            GitCommandError: If the push fails
        """
        ...

    @abstractmethod
    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> TagPushed | TagPushRejected:
        """Push a tag to a remote.

        Returns:
            TagPushed on success, TagPushRejected if the remote refused the update

        Raises:
            GitCommandError: On any other push failure
        """
        ...
