# SPDX-License-Identifier: MIT
"""Extended semantic version parsing and comparison.

This package parses, compares and bumps versions of the form
``MAJOR.MINOR.PATCH[.REVISION][-PRERELEASE][+BUILD]``: SemVer 2.0.0 with an
optional fourth numeric component.

Example:
    >>> from revsemver import parse_version, parse_tolerant, compare_versions
    >>> version = parse_version("1.2.3.4-alpha.1+build.456")
    >>> version.revision
    4
    >>> str(version.increment_minor())
    '1.3.0.0-alpha.1+build.456'
    >>> parse_tolerant("v1.2") == parse_version("1.2.0")
    True
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ErrorCode,
    VersionError,
    InvalidVersionError,
    EmptyInputError,
    GrammarMismatchError,
    NumericOverflowError,
    LeadingZeroError,
    InvalidCharacterError,
    EmptyIdentifierError,
    InvalidBuildSegmentError,
    ShortFormWithSuffixError,
)
from .grammar import (
    STRICT_PATTERN,
    TOLERANT_PATTERN,
    VersionFields,
    match_strict,
    match_tolerant,
)
from .prerelease import (
    PrereleaseIdentifier,
    NumericIdentifier,
    AlphanumericIdentifier,
    parse_identifier,
    compare_identifiers,
)
from .semver import (
    Version,
    SPEC_VERSION,
    parse_version,
    parse_tolerant,
    must_parse,
    finalize_version,
    is_valid_semver,
    new_build_identifier,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    sort_versions,
    version_key,
)

__all__ = [
    # Errors
    "ErrorCode",
    "VersionError",
    "InvalidVersionError",
    "EmptyInputError",
    "GrammarMismatchError",
    "NumericOverflowError",
    "LeadingZeroError",
    "InvalidCharacterError",
    "EmptyIdentifierError",
    "InvalidBuildSegmentError",
    "ShortFormWithSuffixError",
    # Grammar
    "STRICT_PATTERN",
    "TOLERANT_PATTERN",
    "VersionFields",
    "match_strict",
    "match_tolerant",
    # Pre-release identifiers
    "PrereleaseIdentifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "parse_identifier",
    "compare_identifiers",
    # Version parsing
    "Version",
    "SPEC_VERSION",
    "parse_version",
    "parse_tolerant",
    "must_parse",
    "finalize_version",
    "is_valid_semver",
    "new_build_identifier",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "sort_versions",
    "version_key",
]
