"""Discriminated union types for Git tag operations.

TagListing | NoTagsYet and TagPushed | TagPushRejected separate the benign,
expected failure modes of git from genuine errors. Classification is done by
matching git's human-readable output; the markers below are therefore part of
the contract with the installed git version.
"""

from dataclasses import dataclass

# `git tag` / `git describe` output when the repository has no usable tags or no
# commits yet.
NO_NAMES_FOUND_MARKER = "No names found, cannot describe anything"
NOT_A_VALID_OBJECT_MARKER = "Not a valid object name HEAD"
EMPTY_REPO_MARKERS = (NO_NAMES_FOUND_MARKER, NOT_A_VALID_OBJECT_MARKER)

# Current git (2.3x) lists the tags of an empty repository without error. With
# --merged=origin/<branch> against a remote nobody has pushed to yet it fails
# with this message instead, which a mistyped branch also produces. The reader
# tells the two apart by asking whether the remote has any refs at all.
MALFORMED_OBJECT_NAME_MARKER = "malformed object name"

# `git push` output when the remote refused the update, e.g. because another
# publisher created the same tag first.
PUSH_REJECTED_MARKER = "[rejected]"
PUSH_REMOTE_REJECTED_MARKER = "[remote rejected]"
PUSH_REJECTION_MARKERS = (PUSH_REJECTED_MARKER, PUSH_REMOTE_REJECTED_MARKER)


@dataclass(frozen=True)
class TagListing:
    """Successful tag listing; output holds one tag name per line."""

    output: str


@dataclass(frozen=True)
class NoTagsYet:
    """Tag listing failed because the repository is empty or uninitialized."""

    output: str


@dataclass(frozen=True)
class TagPushed:
    """Success result from pushing a tag."""


@dataclass(frozen=True)
class TagPushRejected:
    """The remote rejected the tag push (a concurrent publisher won the race)."""

    reason: str
    output: str


def find_empty_repo_marker(output: str) -> str | None:
    """Return the empty-repository marker contained in output, if any."""
    for marker in EMPTY_REPO_MARKERS:
        if marker in output:
            return marker
    return None


def find_push_rejection_marker(output: str) -> str | None:
    """Return the push-rejection marker contained in output, if any."""
    for marker in PUSH_REJECTION_MARKERS:
        if marker in output:
            return marker
    return None
