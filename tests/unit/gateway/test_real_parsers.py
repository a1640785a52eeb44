"""Tests for parsing git output in the real repo and remote gateways."""

import pytest

from semtag.errors import RefResolutionError
from semtag.gateway.git.remote_ops.real import parse_ls_remote_hash, parse_ls_remote_refs
from semtag.gateway.git.repo_ops.real import parse_quoted_commit_hash

SHA = "0123456789abcdef0123456789abcdef01234567"


def test_parse_ls_remote_hash_takes_first_line() -> None:
    output = f"{SHA}\tHEAD\n{'f' * 40}\trefs/heads/main\n"

    assert parse_ls_remote_hash(output) == SHA


def test_parse_ls_remote_hash_empty_output() -> None:
    assert parse_ls_remote_hash("") is None
    assert parse_ls_remote_hash("\n") is None


def test_parse_ls_remote_refs() -> None:
    output = f"{SHA}\trefs/tags/v1.0.0\n{'f' * 40}\trefs/tags/v1.0.0^{{}}\n"

    assert parse_ls_remote_refs(output) == ["refs/tags/v1.0.0", "refs/tags/v1.0.0^{}"]


def test_parse_quoted_commit_hash() -> None:
    assert parse_quoted_commit_hash(f'"{SHA}"') == SHA
    assert parse_quoted_commit_hash(f'"{SHA}"\n') == SHA


def test_parse_quoted_commit_hash_accepts_sha256() -> None:
    sha256 = "ab" * 32

    assert parse_quoted_commit_hash(f'"{sha256}"') == sha256


@pytest.mark.parametrize("output", ["", SHA, '"not-a-hash"', "fatal: bad default revision 'HEAD'"])
def test_parse_quoted_commit_hash_rejects_garbage(output: str) -> None:
    with pytest.raises(RefResolutionError):
        parse_quoted_commit_hash(output)


def test_parse_ls_remote_hash_accepts_sha256() -> None:
    sha256 = "cd" * 32

    assert parse_ls_remote_hash(f"{sha256}\trefs/heads/main\n") == sha256


@pytest.mark.parametrize(
    "output",
    [
        f"warning: redirecting to https://example.com/repo.git/\n{SHA}\tHEAD\n",
        "not-a-hash\tHEAD\n",
    ],
)
def test_parse_ls_remote_hash_rejects_non_object_id(output: str) -> None:
    with pytest.raises(RefResolutionError):
        parse_ls_remote_hash(output)
