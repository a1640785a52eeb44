"""Fixtures for tests that run the real git binary."""

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(*args: str, cwd: Path) -> str:
    """Run git in cwd and return its stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def git_identity(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Give git a committer identity and isolate it from the user's config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


def init_remote_with_commit(root: Path) -> tuple[Path, str]:
    """Create a bare 'remote' repository with one commit on main.

    Returns:
        (bare repository path, commit hash on main)
    """
    remote = root / "remote.git"
    seed = root / "seed"
    remote.mkdir()
    seed.mkdir()
    git("init", "--bare", "--initial-branch=main", cwd=remote)
    git("init", "--initial-branch=main", cwd=seed)
    (seed / "README.md").write_text("hello\n", encoding="utf-8")
    git("add", "README.md", cwd=seed)
    git("commit", "-m", "Initial commit", cwd=seed)
    git("remote", "add", "origin", str(remote), cwd=seed)
    git("push", "origin", "main", cwd=seed)
    return remote, git("rev-parse", "HEAD", cwd=seed)


def add_commit(repo: Path, filename: str) -> str:
    """Commit a new file in repo and return the commit hash."""
    (repo / filename).write_text(f"{filename}\n", encoding="utf-8")
    git("add", filename, cwd=repo)
    git("commit", "-m", f"Add {filename}", cwd=repo)
    return git("rev-parse", "HEAD", cwd=repo)
