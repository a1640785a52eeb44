"""Version parsing and tag-name formatting.

Versions are ``semver.Version`` values; a tag name is the configured prefix
followed by the version string (e.g. ``v1.2.3``).
"""

from __future__ import annotations

from semver import Version

from semtag.errors import TagParseError

ZERO_VERSION = Version(0, 0, 0)


def format_tag_name(prefix: str, version: Version) -> str:
    """Return the tag name for a version (prefix followed by the version string)."""
    return f"{prefix}{version}"


def parse_tag_name(prefix: str, tag_name: str) -> Version:
    """Parse a single tag name into a version.

    Raises:
        TagParseError: If the tag does not start with the prefix or the
            remainder is not a valid semantic version
    """
    if not tag_name.startswith(prefix):
        raise TagParseError(f"Unexpected tag: {tag_name}")
    version_str = tag_name[len(prefix) :]
    try:
        return Version.parse(version_str)
    except ValueError as e:
        raise TagParseError(f"Invalid version in tag {tag_name!r}: {e}") from e


def current_version(prefix: str, tag_output: str) -> Version:
    """Reduce ``git tag -l`` output to the highest version.

    Blank lines are ignored. Every other line must be a prefixed semantic
    version; a line that is not fails the whole parse rather than being
    skipped. Empty output yields ``0.0.0``.

    Args:
        prefix: Tag prefix (e.g. "v")
        tag_output: Newline separated tag names

    Returns:
        The maximum version by semantic-version precedence

    Raises:
        TagParseError: On the first malformed tag line
    """
    highest = ZERO_VERSION
    for line in tag_output.splitlines():
        tag_name = line.strip()
        if not tag_name:
            continue
        version = parse_tag_name(prefix, tag_name)
        if version > highest:
            highest = version
    return highest
