"""Abstract base class for Git remote operations.

This sub-gateway covers fetching tags and querying refs on the remote.
Pushing and deleting tags lives in tag_ops.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitRemoteOps(ABC):
    """Abstract interface for Git remote operations.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def fetch_tags(self, repo_root: Path) -> None:
        """Fetch all tags from the default remote (``git fetch --tags``).

        Raises:
            GitCommandError: If the fetch fails
        """
        ...

    @abstractmethod
    def check_remote_access(self, repo_root: Path) -> None:
        """Verify the remote is reachable and credentials work.

        Runs ``git fetch --tags --dry-run --depth=1``, which touches the remote
        without changing local state.

        Raises:
            GitCommandError: If the remote cannot be reached
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_remote_commit(self, repo_root: Path, remote: str, ref: str) -> str | None:
        """Get the commit hash a ref currently points at on the remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            ref: Ref to query (branch name or 'HEAD')

        Returns:
            The hash from the first ``git ls-remote`` line, or None if the
            remote has no matching ref

        Raises:
            GitCommandError: If git ls-remote fails
            RefResolutionError: If the output does not start with an object id
        """
        ...

    @abstractmethod
    def has_remote_refs(self, repo_root: Path, remote: str) -> bool:
        """Check whether the remote has any refs at all (``git ls-remote <remote>``).

        A remote nobody has pushed to yet has none.

        Raises:
            GitCommandError: If git ls-remote fails
        """
        ...

    @abstractmethod
    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        """Check whether ``refs/tags/<tag_name>`` exists on the remote.

        Raises:
            GitCommandError: If git ls-remote fails
        """
        ...
