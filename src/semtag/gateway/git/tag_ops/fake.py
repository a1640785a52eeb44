"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path

from semtag.errors import GitCommandError
from semtag.gateway.git.tag_ops.abc import GitTagOps
from semtag.gateway.git.tag_ops.types import (
    MALFORMED_OBJECT_NAME_MARKER,
    NoTagsYet,
    TagListing,
    TagPushed,
    TagPushRejected,
)


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - local_tags: Mapping of tag name -> commit hash in the working copy
    - remote_tags: Mapping of tag name -> commit hash on the remote
    - merged_tags: Mapping of ref (e.g. 'origin/main') -> tag names reachable from it.
      Listing with a ref missing from this mapping fails like git does.
    - empty_repo: If True, list_tags() reports NoTagsYet like an empty repository
    - push_rejection: Result returned by push_tag() instead of updating the remote
    - create_tag_raises / delete_raises / push_raises: Exceptions to raise

    Mutation Tracking:
    -----------------
    - created_tags: List of (tag_name, message, commit) tuples from create_tag()
    - deleted_remote_tags: List of (remote, tag_name) tuples from delete_remote_tag()
    - pushed_tags: List of (remote, tag_name) tuples from successful push_tag()
    """

    def __init__(
        self,
        *,
        local_tags: dict[str, str] | None = None,
        remote_tags: dict[str, str] | None = None,
        merged_tags: dict[str, set[str]] | None = None,
        empty_repo: bool = False,
        push_rejection: TagPushRejected | None = None,
        create_tag_raises: Exception | None = None,
        delete_raises: Exception | None = None,
        push_raises: Exception | None = None,
    ) -> None:
        self._local_tags = local_tags if local_tags is not None else {}
        self._remote_tags = remote_tags if remote_tags is not None else {}
        self._merged_tags = merged_tags if merged_tags is not None else {}
        self._empty_repo = empty_repo
        self._push_rejection = push_rejection
        self._create_tag_raises = create_tag_raises
        self._delete_raises = delete_raises
        self._push_raises = push_raises

        # Mutation tracking
        self._created_tags: list[tuple[str, str, str]] = []
        self._deleted_remote_tags: list[tuple[str, str]] = []
        self._pushed_tags: list[tuple[str, str]] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tags(
        self, repo_root: Path, pattern: str, *, merged_into: str | None
    ) -> TagListing | NoTagsYet:
        """List tags from the fake state in sorted order, like git."""
        if self._empty_repo:
            return NoTagsYet(output="fatal: Not a valid object name HEAD\n")
        names = [name for name in self._local_tags if fnmatchcase(name, pattern)]
        if merged_into is not None:
            if merged_into not in self._merged_tags:
                raise GitCommandError(
                    cmd=["git", "tag", f"--merged={merged_into}", "-l", pattern],
                    returncode=128,
                    output=f"fatal: {MALFORMED_OBJECT_NAME_MARKER} {merged_into}\n",
                    operation_context="list tags",
                )
            reachable = self._merged_tags[merged_into]
            names = [name for name in names if name in reachable]
        return TagListing(output="".join(f"{name}\n" for name in sorted(names)))

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, message: str, commit: str) -> None:
        """Create or move the tag in local state."""
        if self._create_tag_raises is not None:
            raise self._create_tag_raises
        self._local_tags[tag_name] = commit
        self._created_tags.append((tag_name, message, commit))

    def delete_remote_tag(self, repo_root: Path, remote: str, tag_name: str) -> None:
        """Remove the tag from remote state."""
        if self._delete_raises is not None:
            raise self._delete_raises
        self._remote_tags.pop(tag_name, None)
        self._deleted_remote_tags.append((remote, tag_name))

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> TagPushed | TagPushRejected:
        """Copy the local tag to remote state unless a rejection is configured."""
        if self._push_raises is not None:
            raise self._push_raises
        if self._push_rejection is not None:
            return self._push_rejection
        self._remote_tags[tag_name] = self._local_tags[tag_name]
        self._pushed_tags.append((remote, tag_name))
        return TagPushed()

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def created_tags(self) -> list[tuple[str, str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, message, commit) tuples.
        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def deleted_remote_tags(self) -> list[tuple[str, str]]:
        """Get list of (remote, tag_name) tuples deleted from the remote."""
        return self._deleted_remote_tags.copy()

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        """Get list of tags pushed during test.

        Returns list of (remote, tag_name) tuples.
        This property is for test assertions only.
        """
        return self._pushed_tags.copy()
