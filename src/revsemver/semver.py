# SPDX-License-Identifier: MIT
"""Extended semantic version parsing.

Supports MAJOR.MINOR.PATCH with an optional fourth REVISION component, plus
optional pre-release and build metadata:

- ``1.2.3``, ``1.2.3.4``
- Pre-release: ``1.0.0-alpha``, ``1.0.0-alpha.1``, ``1.2.3.4-rc.2``
- Build metadata: ``1.0.0+build``, ``1.0.0+build.123``, ``1.0.0-rc.1+20240101``

A revision of ``-1`` means the version has three components.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional

from .compare import compare_versions
from .errors import (
    EmptyIdentifierError,
    EmptyInputError,
    GrammarMismatchError,
    InvalidBuildSegmentError,
    InvalidCharacterError,
    NumericOverflowError,
    ShortFormWithSuffixError,
    VersionError,
)
from .grammar import ALPHANUMERIC, contains_only, match_strict, match_tolerant, strip_leading_zeros
from .prerelease import (
    UINT64_MAX,
    AlphanumericIdentifier,
    NumericIdentifier,
    PrereleaseIdentifier,
    parse_identifier,
)

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1

# Revision value of a three-component version
NO_REVISION = -1


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed extended semantic version.

    Versions are immutable. The ``increment_*`` methods return new instances.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        revision: Optional fourth component, ``-1`` when absent
        prerelease: Pre-release identifiers, empty for a release
        build: Build metadata segments, never used for ordering
    """

    major: int
    minor: int
    patch: int
    revision: int = NO_REVISION
    prerelease: tuple[PrereleaseIdentifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable for the sequence fields but store tuples
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a strict version string. Alias of :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.finalize_version()
        if self.prerelease:
            version += "-" + ".".join(str(part) for part in self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __repr__(self) -> str:
        return f"<Version('{self}')>"

    def __hash__(self) -> int:
        # Revision is left out: 1.2.3 and 1.2.3.0 compare equal
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) != 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) >= 0

    # Named comparison helpers

    def compare(self, other: Version) -> int:
        """Compare to ``other``: -1 if less, 0 if equal, 1 if greater."""
        return compare_versions(self, other)

    def equals(self, other: Version) -> bool:
        return self.compare(other) == 0

    def eq(self, other: Version) -> bool:
        return self.compare(other) == 0

    def ne(self, other: Version) -> bool:
        return self.compare(other) != 0

    def gt(self, other: Version) -> bool:
        return self.compare(other) == 1

    def gte(self, other: Version) -> bool:
        return self.compare(other) >= 0

    ge = gte

    def lt(self, other: Version) -> bool:
        return self.compare(other) == -1

    def lte(self, other: Version) -> bool:
        return self.compare(other) <= 0

    le = lte

    @property
    def has_revision(self) -> bool:
        """Return True if this is a four-component version."""
        return self.revision >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return len(self.prerelease) > 0

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return self.finalize_version()

    def finalize(self) -> Version:
        """Return a copy of this version with pre-release and build cleared."""
        return dataclasses.replace(self, prerelease=(), build=())

    def finalize_version(self) -> str:
        """Return major, minor, patch and revision only.

        Examples:
            >>> parse_version("1.2.3.4-rc.1+build").finalize_version()
            '1.2.3.4'
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.has_revision:
            version += f".{self.revision}"
        return version

    # Increments never add or remove the revision component, they only
    # reset an existing one. Pre-release and build are kept as they are.

    def increment_revision(self) -> Version:
        """Return a version with the revision bumped, if it has one."""
        if not self.has_revision:
            return self
        return dataclasses.replace(self, revision=self.revision + 1)

    def increment_patch(self) -> Version:
        """Return a version with the patch bumped."""
        return dataclasses.replace(
            self,
            patch=self.patch + 1,
            revision=0 if self.has_revision else NO_REVISION,
        )

    def increment_minor(self) -> Version:
        """Return a version with the minor bumped and patch reset.

        Examples:
            >>> str(parse_version("1.2.3.4").increment_minor())
            '1.3.0.0'
        """
        return dataclasses.replace(
            self,
            minor=self.minor + 1,
            patch=0,
            revision=0 if self.has_revision else NO_REVISION,
        )

    def increment_major(self) -> Version:
        """Return a version with the major bumped and minor and patch reset."""
        return dataclasses.replace(
            self,
            major=self.major + 1,
            minor=0,
            patch=0,
            revision=0 if self.has_revision else NO_REVISION,
        )

    def validate(self) -> Optional[VersionError]:
        """Check the numeric fields, pre-release and build segments of this version.

        Versions built by the parser always pass. This is meant for versions
        constructed by hand.

        Returns:
            The first violation found, or None if the version is valid
        """
        for name, value, limit in (
            ("major", self.major, UINT64_MAX),
            ("minor", self.minor, UINT64_MAX),
            ("patch", self.patch, UINT64_MAX),
        ):
            if not 0 <= value <= limit:
                return NumericOverflowError(str(value), f"{name} out of range: {value}")
        if not NO_REVISION <= self.revision <= INT64_MAX:
            return NumericOverflowError(
                str(self.revision), f"revision out of range: {self.revision}"
            )

        for identifier in self.prerelease:
            if isinstance(identifier, NumericIdentifier):
                if not 0 <= identifier.value <= UINT64_MAX:
                    return NumericOverflowError(
                        str(identifier.value),
                        f"Numeric pre-release identifier out of range: {identifier.value}",
                    )
            elif not isinstance(identifier, AlphanumericIdentifier):
                return InvalidCharacterError(str(identifier))
            elif not identifier.text:
                return EmptyIdentifierError(identifier.text)
            elif not contains_only(identifier.text, ALPHANUMERIC):
                return InvalidCharacterError(identifier.text)

        for segment in self.build:
            if not isinstance(segment, str):
                return InvalidBuildSegmentError(str(segment))
            try:
                new_build_identifier(segment)
            except InvalidBuildSegmentError as e:
                return e

        return None


# Latest fully supported SemVer specification version
SPEC_VERSION = Version(2, 0, 0)


def _parse_unsigned(field: str, name: str, version_string: str, limit: int) -> int:
    value = int(field)
    if value > limit:
        raise NumericOverflowError(
            version_string, f"{name} out of range in {version_string!r}: {field}"
        )
    return value


def new_build_identifier(segment: str) -> str:
    """Validate a single build metadata segment.

    Raises:
        InvalidBuildSegmentError: If the segment is empty or contains
            characters outside ``[0-9A-Za-z-]``
    """
    if not segment:
        raise InvalidBuildSegmentError(segment)
    if not contains_only(segment, ALPHANUMERIC):
        raise InvalidBuildSegmentError(segment)
    return segment


def parse_version(version_string: str) -> Version:
    """Parse a strict version string into a Version object.

    Args:
        version_string: A string of the form
            MAJOR.MINOR.PATCH[.REVISION][-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        EmptyInputError: If the string is empty
        GrammarMismatchError: If the string does not follow the grammar
        NumericOverflowError: If a numeric component is out of range
        VersionError: Any other failure while building identifiers

    Examples:
        >>> parse_version("1.2.3")
        <Version('1.2.3')>

        >>> parse_version("1.2.3.4-alpha.1")
        <Version('1.2.3.4-alpha.1')>

        >>> parse_version("2.0.0-rc.1+build.456").build
        ('build', '456')
    """
    if not isinstance(version_string, str):
        raise GrammarMismatchError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise EmptyInputError(version_string)

    fields = match_strict(version_string)

    major = _parse_unsigned(fields.major, "major", version_string, UINT64_MAX)
    minor = _parse_unsigned(fields.minor, "minor", version_string, UINT64_MAX)
    patch = _parse_unsigned(fields.patch, "patch", version_string, UINT64_MAX)

    revision = NO_REVISION
    if fields.revision is not None:
        revision = _parse_unsigned(fields.revision, "revision", version_string, INT64_MAX)

    prerelease: tuple[PrereleaseIdentifier, ...] = ()
    if fields.prerelease is not None:
        prerelease = tuple(parse_identifier(part) for part in fields.prerelease.split("."))

    build: tuple[str, ...] = ()
    if fields.build is not None:
        build = tuple(new_build_identifier(part) for part in fields.build.split("."))

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        revision=revision,
        prerelease=prerelease,
        build=build,
    )


def parse_tolerant(version_string: str) -> Version:
    """Parse a version string that may not strictly follow the grammar.

    The input is normalized and then handed to :func:`parse_version`:

    - surrounding whitespace and a leading ``v`` are removed
    - leading zeroes are stripped from numeric components
    - missing major, minor or patch components are filled with ``0``,
      but only when no pre-release or build metadata is present

    Raises:
        GrammarMismatchError: If the string does not follow the tolerant grammar
        ShortFormWithSuffixError: If a shortened version carries a suffix
        VersionError: Any error raised by strict parsing of the normalized form

    Examples:
        >>> parse_tolerant("v1.2")
        <Version('1.2.0')>
        >>> parse_tolerant(" 01.002.0003.04 ")
        <Version('1.2.3.4')>
    """
    if not isinstance(version_string, str):
        raise GrammarMismatchError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    fields = match_tolerant(version_string)

    major = strip_leading_zeros(fields.major)
    minor = strip_leading_zeros(fields.minor)
    patch = strip_leading_zeros(fields.patch)
    revision = strip_leading_zeros(fields.revision)

    if fields.is_short:
        if fields.has_suffix:
            raise ShortFormWithSuffixError(version_string)
        major = major or "0"
        minor = minor or "0"
        patch = patch or "0"

    normalized = f"{major}.{minor}.{patch}"
    if revision is not None:
        normalized += f".{revision}"
    if fields.prerelease is not None:
        normalized += f"-{fields.prerelease}"
    if fields.build is not None:
        normalized += f"+{fields.build}"

    if normalized != version_string:
        logger.debug("Normalized tolerant version %r to %r", version_string, normalized)

    return parse_version(normalized)


def must_parse(version_string: str) -> Version:
    """Parse a version string that is known to be valid.

    Meant for literals and constants, where a malformed version is a
    programming error rather than bad input.

    Raises:
        RuntimeError: If the version cannot be parsed
    """
    try:
        return parse_version(version_string)
    except VersionError as e:
        raise RuntimeError(f"revsemver: parse_version({version_string!r}): {e}") from e


def finalize_version(version_string: str) -> str:
    """Parse a version string and return it without pre-release or build.

    Examples:
        >>> finalize_version("1.2.3-rc.1+build.5")
        '1.2.3'
    """
    return parse_version(version_string).finalize_version()


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid strict version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0.0.1")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string)
    except VersionError:
        return False
    return True
