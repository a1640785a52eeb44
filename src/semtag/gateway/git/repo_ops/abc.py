"""Abstract base class for Git repository setup operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for creating a working copy and reading commits.

    All implementations (real, fake) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_head_commit(self, repo_path: Path) -> str:
        """Get the HEAD commit hash of another checked-out repository.

        Args:
            repo_path: Path to the checkout (its ``.git`` directory is queried)

        Returns:
            Full commit hash

        Raises:
            GitCommandError: If git log fails
            RefResolutionError: If the output is not a commit hash
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def init_repo(self, path: Path) -> None:
        """Initialize an empty repository at path.

        Raises:
            GitCommandError: If git init fails
        """
        ...

    @abstractmethod
    def add_remote(self, repo_root: Path, name: str, url: str) -> None:
        """Register a remote in the repository.

        Args:
            repo_root: Path to the repository root
            name: Remote name (e.g., 'origin')
            url: Remote URL

        Raises:
            GitCommandError: If git remote add fails
        """
        ...
