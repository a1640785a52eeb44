"""Production implementation of Git remote operations using subprocess."""

import re
from pathlib import Path

from semtag.errors import RefResolutionError
from semtag.gateway.git.remote_ops.abc import GitRemoteOps
from semtag.output import forward_command_output
from semtag.subprocess_utils import run_git

# SHA-1 or SHA-256 object id.
_OBJECT_ID_RE = re.compile(r"^([0-9a-f]{40}|[0-9a-f]{64})$")


def parse_ls_remote_hash(output: str) -> str | None:
    """Return the hash column of the first ``git ls-remote`` line, if any.

    Raises:
        RefResolutionError: If the first line does not start with an object id
    """
    for line in output.splitlines():
        if line.strip():
            commit = line.split("\t")[0].strip()
            if _OBJECT_ID_RE.match(commit) is None:
                raise RefResolutionError(
                    f"Could not parse commit hash from git ls-remote output: {output!r}"
                )
            return commit
    return None


def parse_ls_remote_refs(output: str) -> list[str]:
    """Return the ref column of every ``git ls-remote`` line."""
    refs: list[str] = []
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) == 2:
            refs.append(parts[1].strip())
    return refs


class RealGitRemoteOps(GitRemoteOps):
    """Real implementation of Git remote operations using subprocess."""

    def fetch_tags(self, repo_root: Path) -> None:
        """Fetch all tags from the default remote."""
        result = run_git(["fetch", "--tags"], operation_context="fetch tags", cwd=repo_root)
        forward_command_output(result.stdout)

    def check_remote_access(self, repo_root: Path) -> None:
        """Dry-run a shallow tag fetch to verify the remote is reachable."""
        run_git(
            ["fetch", "--tags", "--dry-run", "--depth=1"],
            operation_context="reach remote (dry-run fetch)",
            cwd=repo_root,
        )

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_remote_commit(self, repo_root: Path, remote: str, ref: str) -> str | None:
        """Get the commit hash a ref currently points at on the remote."""
        result = run_git(
            ["ls-remote", remote, ref],
            operation_context=f"look up '{ref}' on remote '{remote}'",
            cwd=repo_root,
        )
        return parse_ls_remote_hash(result.stdout)

    def has_remote_refs(self, repo_root: Path, remote: str) -> bool:
        """Check whether ``git ls-remote`` lists anything for the remote."""
        result = run_git(
            ["ls-remote", remote],
            operation_context=f"list refs on remote '{remote}'",
            cwd=repo_root,
        )
        return len(parse_ls_remote_refs(result.stdout)) > 0

    def remote_tag_exists(self, repo_root: Path, remote: str, tag_name: str) -> bool:
        """Check whether the tag ref exists on the remote."""
        tag_ref = f"refs/tags/{tag_name}"
        result = run_git(
            ["ls-remote", remote, tag_ref],
            operation_context=f"look up tag '{tag_name}' on remote '{remote}'",
            cwd=repo_root,
        )
        return tag_ref in parse_ls_remote_refs(result.stdout)
