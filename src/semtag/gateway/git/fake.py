"""In-memory Git gateway for tests."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from semtag.gateway.git.abc import Git
from semtag.gateway.git.remote_ops.fake import FakeGitRemoteOps
from semtag.gateway.git.repo_ops.fake import FakeGitRepoOps
from semtag.gateway.git.tag_ops.fake import FakeGitTagOps
from semtag.gateway.git.tag_ops.types import TagPushRejected


@dataclass(frozen=True)
class FakeGit(Git):
    """Git bundle whose sub-gateways are typed as fakes for test assertions."""

    repo: FakeGitRepoOps
    remote: FakeGitRemoteOps
    tag: FakeGitTagOps
    local_tags: dict[str, str]
    remote_tags: dict[str, str]


def create_fake_git(
    *,
    local_tags: dict[str, str] | None = None,
    remote_tags: dict[str, str] | None = None,
    remote_refs: dict[str, str] | None = None,
    merged_tags: dict[str, set[str]] | None = None,
    head_commits: dict[Path, str] | None = None,
    empty_repo: bool = False,
    push_rejection: TagPushRejected | None = None,
) -> FakeGit:
    """Create a FakeGit whose remote_ops and tag_ops share one tag state.

    Pushing a tag makes it visible on the remote; fetching copies remote tags
    into the local working copy.
    """
    local = dict(local_tags) if local_tags is not None else {}
    remote = dict(remote_tags) if remote_tags is not None else {}
    return FakeGit(
        repo=FakeGitRepoOps(head_commits=head_commits),
        remote=FakeGitRemoteOps(remote_refs=remote_refs, remote_tags=remote, local_tags=local),
        tag=FakeGitTagOps(
            local_tags=local,
            remote_tags=remote,
            merged_tags=merged_tags,
            empty_repo=empty_repo,
            push_rejection=push_rejection,
        ),
        local_tags=local,
        remote_tags=remote,
    )
