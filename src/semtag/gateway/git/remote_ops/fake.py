"""Fake implementation of Git remote operations for testing."""

from __future__ import annotations

from pathlib import Path

from semtag.gateway.git.remote_ops.abc import GitRemoteOps


class FakeGitRemoteOps(GitRemoteOps):
    """In-memory fake implementation of Git remote operations.

    The fake models a single remote. Tag state is held in plain dicts mapping
    tag name -> commit hash, which FakeGitTagOps shares (see
    ``semtag.gateway.git.fake.create_fake_git``) so that a pushed tag becomes
    visible to ``remote_tag_exists`` and a fetch makes remote tags local.

    Constructor Injection:
    ---------------------
    - remote_refs: Mapping of ref name (branch or 'HEAD') -> commit hash
    - remote_tags: Tags present on the remote
    - local_tags: Tags present in the local working copy
    - fetch_raises: Exception to raise when fetch_tags() is called
    - check_access_raises: Exception to raise when check_remote_access() is called

    Mutation Tracking:
    -----------------
    - fetch_count: Number of fetch_tags() calls
    - access_checks: Number of check_remote_access() calls
    """

    def __init__(
        self,
        *,
        remote_refs: dict[str, str] | None = None,
        remote_tags: dict[str, str] | None = None,
        local_tags: dict[str, str] | None = None,
        fetch_raises: Exception | None = None,
        check_access_raises: Exception | None = None,
    ) -> None:
        self._remote_refs = remote_refs if remote_refs is not None else {}
        self._remote_tags = remote_tags if remote_tags is not None else {}
        self._local_tags = local_tags if local_tags is not None else {}
        self._fetch_raises = fetch_raises
        self._check_access_raises = check_access_raises

        self._fetch_count = 0
        self._access_checks = 0

    def fetch_tags(self, repo_root: Path) -> None:
        """Copy remote tags into the local tag state."""
        self._fetch_count += 1
        if self._fetch_raises is not None:
            raise self._fetch_raises
        self._local_tags.update(self._remote_tags)

    def check_remote_access(self, repo_root: Path) -> None:
        """Record the check, or raise if failure configured."""
        self._access_checks += 1
        if self._check_access_raises is not None:
            raise self._check_access_raises

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_remote_commit(self, repo_root: Path, remote: str, ref: str) -> str | None:
        """Look up the ref in the configured remote refs."""
        return self._remote_refs.get(ref)

    def has_remote_refs(self, repo_root: Path, remote: str) -> bool:
        """A remote with no refs and no tags has never been pushed to."""
        return bool(self._remote_refs) or bool(self._remote_tags)

    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        """Check the shared remote tag state."""
        return tag_name in self._remote_tags

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def fetch_count(self) -> int:
        return self._fetch_count

    @property
    def access_checks(self) -> int:
        return self._access_checks
