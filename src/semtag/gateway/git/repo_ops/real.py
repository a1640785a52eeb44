"""Production Git repository setup operations using subprocess."""

import re
from pathlib import Path

from semtag.errors import RefResolutionError
from semtag.gateway.git.repo_ops.abc import GitRepoOps
from semtag.output import forward_command_output, user_output
from semtag.subprocess_utils import run_git

# git log is asked for a quoted hash (--pretty=format:"%H"); SHA-1 or SHA-256.
_QUOTED_HASH_RE = re.compile(r'^"([0-9a-f]{40}|[0-9a-f]{64})"$')


def parse_quoted_commit_hash(output: str) -> str:
    """Extract the commit hash from ``git log -1 --pretty=format:"%H"`` output.

    Raises:
        RefResolutionError: If the output is not a single quoted hash
    """
    match = _QUOTED_HASH_RE.match(output.strip())
    if match is None:
        raise RefResolutionError(f"Could not parse commit hash from git log output: {output!r}")
    return match.group(1)


class RealGitRepoOps(GitRepoOps):
    """Production implementation of Git repository setup operations."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_head_commit(self, repo_path: Path) -> str:
        """Get the HEAD commit hash of another checked-out repository."""
        result = run_git(
            [f"--git-dir={repo_path / '.git'}", "log", "-1", '--pretty=format:"%H"'],
            operation_context=f"read HEAD commit of '{repo_path}'",
        )
        try:
            return parse_quoted_commit_hash(result.stdout)
        except RefResolutionError:
            forward_command_output(result.stdout)
            raise

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def init_repo(self, path: Path) -> None:
        """Initialize an empty repository at path."""
        result = run_git(["init", str(path)], operation_context=f"initialize repository at '{path}'")
        forward_command_output(result.stdout)

    def add_remote(self, repo_root: Path, name: str, url: str) -> None:
        """Register a remote in the repository."""
        user_output(f"Adding remote '{name}': {url}")
        result = run_git(
            ["remote", "add", name, url],
            operation_context=f"add remote '{name}'",
            cwd=repo_root,
        )
        forward_command_output(result.stdout)
