# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Ordering rules, applied in turn until one decides:

1. major, minor and patch, numerically
2. revision, but only when both versions have one; a three-component
   version ties with any revision of the same major.minor.patch
3. a release sorts after any pre-release
4. pre-release identifiers, pairwise; a shorter list that is a prefix of a
   longer one sorts first

Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Union

from .prerelease import PrereleaseIdentifier, compare_identifiers

if TYPE_CHECKING:
    from .semver import Version


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, str):
        from .semver import parse_version

        return parse_version(version)
    return version


def _compare_numbers(a: int, b: int) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_prerelease(
    pre1: Sequence[PrereleaseIdentifier], pre2: Sequence[PrereleaseIdentifier]
) -> int:
    """Compare two pre-release identifier lists.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for p1, p2 in zip(pre1, pre2):
        result = compare_identifiers(p1, p2)
        if result != 0:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _compare_numbers(len(pre1), len(pre2))


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.3", "1.2.3.0")
        0
        >>> compare_versions("1.2.3.1", "1.2.4")
        -1
        >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        result = _compare_numbers(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    # Revision only decides when both versions carry one
    if v1.has_revision and v2.has_revision and v1.revision != v2.revision:
        return _compare_numbers(v1.revision, v2.revision)

    return compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    The revision rule cannot be expressed as a plain tuple, so the key wraps
    :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(_coerce(version))


_VersionKey = functools.cmp_to_key(compare_versions)


def sort_versions(versions: Iterable[Union[str, Version]], reverse: bool = False) -> list[Version]:
    """Return the given versions as a new list in ascending order.

    Strings are parsed strictly. The sort is stable, so versions that compare
    equal keep their input order.

    Examples:
        >>> sort_versions(["0.1.0", "1.0.0", "0.0.1"])
        [<Version('0.0.1')>, <Version('0.1.0')>, <Version('1.0.0')>]
    """
    parsed = [_coerce(version) for version in versions]
    return sorted(parsed, key=_VersionKey, reverse=reverse)
