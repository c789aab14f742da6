# SPDX-License-Identifier: MIT
"""Exception classes for version parsing and validation.

Every parsing failure is a :class:`VersionError`. Subclasses classify the
failure and carry a stable ``code`` string so callers can branch on the
kind of problem without matching on messages.
"""

from __future__ import annotations


class ErrorCode:
    """Stable error codes for version failures."""

    EMPTY_INPUT = "EMPTY_INPUT"
    GRAMMAR_MISMATCH = "GRAMMAR_MISMATCH"
    NUMERIC_OVERFLOW = "NUMERIC_OVERFLOW"
    LEADING_ZERO = "LEADING_ZERO"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    EMPTY_IDENTIFIER = "EMPTY_IDENTIFIER"
    INVALID_BUILD_SEGMENT = "INVALID_BUILD_SEGMENT"
    SHORT_FORM_WITH_SUFFIX = "SHORT_FORM_WITH_SUFFIX"


class VersionError(ValueError):
    """Raised when a version string or component is not valid.

    Attributes:
        version: The offending input (whole version string or segment)
        message: Human-readable error message
        code: Error code from :class:`ErrorCode`
    """

    code = "INVALID_VERSION"

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


# Generic name kept for callers that only care that parsing failed
InvalidVersionError = VersionError


class EmptyInputError(VersionError):
    """Raised when an empty string is given to the parser."""

    code = ErrorCode.EMPTY_INPUT

    def __init__(self, version: str = "", message: str = ""):
        super().__init__(version, message or "Version string empty")


class GrammarMismatchError(VersionError):
    """Raised when a string does not match the version grammar."""

    code = ErrorCode.GRAMMAR_MISMATCH


class NumericOverflowError(VersionError):
    """Raised when a numeric field does not fit its integer width."""

    code = ErrorCode.NUMERIC_OVERFLOW


class LeadingZeroError(VersionError):
    """Raised when a numeric pre-release identifier has a leading zero."""

    code = ErrorCode.LEADING_ZERO

    def __init__(self, version: str, message: str = ""):
        super().__init__(
            version,
            message or f"Numeric pre-release identifier must not contain leading zeroes: {version!r}",
        )


class InvalidCharacterError(VersionError):
    """Raised when a pre-release identifier contains a disallowed character."""

    code = ErrorCode.INVALID_CHARACTER

    def __init__(self, version: str, message: str = ""):
        super().__init__(
            version, message or f"Invalid character(s) found in pre-release: {version!r}"
        )


class EmptyIdentifierError(VersionError):
    """Raised when a pre-release identifier is empty."""

    code = ErrorCode.EMPTY_IDENTIFIER

    def __init__(self, version: str = "", message: str = ""):
        super().__init__(version, message or "Pre-release identifier is empty")


class InvalidBuildSegmentError(VersionError):
    """Raised when a build metadata segment is empty or malformed."""

    code = ErrorCode.INVALID_BUILD_SEGMENT

    def __init__(self, version: str, message: str = ""):
        if not message:
            if version:
                message = f"Invalid character(s) found in build metadata: {version!r}"
            else:
                message = "Build metadata segment is empty"
        super().__init__(version, message)


class ShortFormWithSuffixError(VersionError):
    """Raised when a shortened tolerant version carries a pre-release or build."""

    code = ErrorCode.SHORT_FORM_WITH_SUFFIX

    def __init__(self, version: str, message: str = ""):
        super().__init__(
            version,
            message or f"Short version cannot contain pre-release/build metadata: {version!r}",
        )
