"""Semantic version helpers for configuration documents.

Documents carry their schema version as a plain ``major.minor.patch`` string.
Parsing goes through ``packaging.version.Version`` so ordering is the usual
lexicographic order over the release triple.
"""

import os
import re
from collections.abc import Iterable

from packaging.version import InvalidVersion, Version

from hsvconfig import __version__

_TRIPLE_RE = re.compile(r"^\d+\.\d+\.\d+$")


class InvalidConfigVersion(ValueError):
    """Raised when a version string is not a plain major.minor.patch triple."""


def parse_version(text: str | Version) -> Version:
    """Parse a ``major.minor.patch`` string into a Version.

    Args:
        text: Version string such as "2.1.0", or an existing Version

    Returns:
        Version: Parsed version

    Raises:
        InvalidConfigVersion: If the string is not a plain triple
    """
    if isinstance(text, Version):
        if len(text.release) != 3 or text.is_prerelease or text.is_postrelease or text.local:
            raise InvalidConfigVersion(f"Invalid config version: {text}")
        return text

    candidate = str(text).strip()
    if not _TRIPLE_RE.match(candidate):
        raise InvalidConfigVersion(f"Invalid config version: {text!r}")
    try:
        return Version(candidate)
    except InvalidVersion as e:
        raise InvalidConfigVersion(f"Invalid config version: {text!r}") from e


def format_version(version: Version) -> str:
    """Render a version as its canonical ``major.minor.patch`` string."""
    major, minor, patch = version.release
    return f"{major}.{minor}.{patch}"


def compare(a: Version, b: Version) -> int:
    """Compare two versions, returning -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def min_version(versions: Iterable[Version]) -> Version:
    """Smallest version of a non-empty collection."""
    versions = list(versions)
    if not versions:
        raise ValueError("No versions to compare")
    return min(versions)


def max_version(versions: Iterable[Version]) -> Version:
    """Largest version of a non-empty collection."""
    versions = list(versions)
    if not versions:
        raise ValueError("No versions to compare")
    return max(versions)


def get_app_version() -> Version:
    """Get the running application version.

    HSV_APP_VERSION overrides the installed package version.
    """
    return parse_version(os.getenv("HSV_APP_VERSION", __version__))
