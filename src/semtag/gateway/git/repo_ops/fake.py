"""Fake implementation of Git repository setup operations for testing."""

from __future__ import annotations

from pathlib import Path

from semtag.errors import RefResolutionError
from semtag.gateway.git.repo_ops.abc import GitRepoOps


class FakeGitRepoOps(GitRepoOps):
    """In-memory fake implementation of Git repository setup operations.

    Constructor Injection:
    ---------------------
    - head_commits: Mapping of repo path -> HEAD commit hash
    - init_raises: Exception to raise when init_repo() is called
    - add_remote_raises: Exception to raise when add_remote() is called

    Mutation Tracking:
    -----------------
    - initialized_repos: List of paths passed to init_repo()
    - added_remotes: List of (repo_root, name, url) tuples from add_remote()
    """

    def __init__(
        self,
        *,
        head_commits: dict[Path, str] | None = None,
        init_raises: Exception | None = None,
        add_remote_raises: Exception | None = None,
    ) -> None:
        self._head_commits = head_commits if head_commits is not None else {}
        self._init_raises = init_raises
        self._add_remote_raises = add_remote_raises

        self._initialized_repos: list[Path] = []
        self._added_remotes: list[tuple[Path, str, str]] = []

    def get_head_commit(self, repo_path: Path) -> str:
        """Return the configured HEAD commit, or fail like an unreadable repo."""
        commit = self._head_commits.get(repo_path)
        if commit is None:
            raise RefResolutionError(f"No HEAD commit configured for {repo_path}")
        return commit

    def init_repo(self, path: Path) -> None:
        """Record the init (does not touch the filesystem)."""
        if self._init_raises is not None:
            raise self._init_raises
        self._initialized_repos.append(path)

    def add_remote(self, repo_root: Path, name: str, url: str) -> None:
        """Record the remote registration."""
        if self._add_remote_raises is not None:
            raise self._add_remote_raises
        self._added_remotes.append((repo_root, name, url))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def initialized_repos(self) -> list[Path]:
        """Paths passed to init_repo(), for test assertions."""
        return list(self._initialized_repos)

    @property
    def added_remotes(self) -> list[tuple[Path, str, str]]:
        """(repo_root, name, url) tuples from add_remote(), for test assertions."""
        return list(self._added_remotes)
