"""Tests for tag parsing and version reduction."""

import random

import pytest
from semver import Version

from semtag.errors import TagParseError
from semtag.version import ZERO_VERSION, current_version, format_tag_name, parse_tag_name

SAMPLE_TAGS = [
    "v2.10.0",
    "v2.9.4",
    "v2.9.3",
    "v2.10.2",
    "v2.10.1",
    "v2.9.2",
    "v2.9.1",
    "v2.9.0",
    "v2.8.2",
    "v2.8.1",
]


def test_current_version_of_empty_output_is_zero() -> None:
    assert current_version("v", "") == ZERO_VERSION
    assert str(current_version("v", "")) == "0.0.0"


def test_current_version_ignores_blank_lines() -> None:
    assert current_version("v", "\n  \nv1.0.0\n\n") == Version(1, 0, 0)


def test_current_version_picks_maximum() -> None:
    output = "\n".join(SAMPLE_TAGS) + "\n"

    assert str(current_version("v", output)) == "2.10.2"


def test_current_version_is_independent_of_order() -> None:
    """Shuffled input yields the same maximum."""
    shuffled = SAMPLE_TAGS.copy()
    random.Random(1234).shuffle(shuffled)

    assert str(current_version("v", "\n".join(shuffled))) == "2.10.2"
    assert str(current_version("v", "\n".join(reversed(SAMPLE_TAGS)))) == "2.10.2"


def test_current_version_orders_numerically_not_lexically() -> None:
    assert current_version("v", "v1.9.0\nv1.10.0\n") == Version(1, 10, 0)


def test_current_version_prerelease_sorts_before_release() -> None:
    assert current_version("v", "v1.0.0-rc.1\nv1.0.0\nv1.0.0-beta\n") == Version(1, 0, 0)
    assert current_version("v", "v1.0.0-rc.1\nv1.0.0-rc.2\n") == Version.parse("1.0.0-rc.2")


def test_current_version_with_custom_prefix() -> None:
    assert current_version("release-", "release-0.3.1\nrelease-0.12.0\n") == Version(0, 12, 0)


def test_current_version_rejects_unprefixed_tag() -> None:
    """A line without the prefix fails the parse instead of being skipped."""
    with pytest.raises(TagParseError, match="Unexpected tag: 1.2.3"):
        current_version("v", "v1.0.0\n1.2.3\nv2.0.0\n")


def test_current_version_rejects_invalid_semver() -> None:
    with pytest.raises(TagParseError, match="v1.2"):
        current_version("v", "v1.0.0\nv1.2\n")


def test_parse_tag_name_keeps_build_metadata() -> None:
    version = parse_tag_name("v", "v1.2.3+build.7")

    assert version.build == "build.7"
    assert version == Version(1, 2, 3)


def test_format_tag_name() -> None:
    assert format_tag_name("v", Version(1, 2, 3)) == "v1.2.3"
    assert format_tag_name("v", Version.parse("1.2.3-rc.1+abc")) == "v1.2.3-rc.1+abc"
    assert format_tag_name("", Version(0, 1, 0)) == "0.1.0"
