# SPDX-License-Identifier: MIT
"""Textual grammars for extended semantic versions.

Two independent grammars are defined here:

- The strict grammar, ``MAJOR.MINOR.PATCH[.REVISION][-PRERELEASE][+BUILD]``,
  which follows SemVer 2.0.0 with an optional fourth numeric component.
- The tolerant grammar, which additionally accepts surrounding whitespace, a
  leading ``v``, leading zeroes in numeric parts and shortened forms such as
  ``1.2`` or ``v3``.

Both grammars only extract text. Converting the extracted fields to integers
and pre-release identifiers is the parser's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import GrammarMismatchError

# Character set allowed in pre-release identifiers and build metadata
ALPHANUMERIC = frozenset("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-")
DIGITS = frozenset("0123456789")

_NUMBER = r"0|[1-9][0-9]*"
_PRERELEASE_PART = r"(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_PART = r"[0-9a-zA-Z-]+"

# Strict grammar, SemVer 2.0.0 plus an optional revision
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
STRICT_PATTERN = re.compile(
    rf"(?P<major>{_NUMBER})"
    rf"\.(?P<minor>{_NUMBER})"
    rf"\.(?P<patch>{_NUMBER})"
    rf"(?:\.(?P<revision>{_NUMBER}))?"
    rf"(?:-(?P<prerelease>{_PRERELEASE_PART}(?:\.{_PRERELEASE_PART})*))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD_PART}(?:\.{_BUILD_PART})*))?"
)

# Numeric pre-release parts may carry leading zeroes here; the strict grammar
# still rejects them once the version is normalized.
_TOLERANT_PRERELEASE_PART = r"(?:[0-9]+|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"

# A dot before minor or patch may stand alone, so "1." and "1.2." are short forms
TOLERANT_PATTERN = re.compile(
    r"\s*v?"
    r"(?P<major>[0-9]+)?"
    r"(?:\.(?P<minor>[0-9]+)?)?"
    r"(?:\.(?P<patch>[0-9]+)?)?"
    r"(?:\.(?P<revision>[0-9]+))?"
    rf"(?:-(?P<prerelease>{_TOLERANT_PRERELEASE_PART}(?:\.{_TOLERANT_PRERELEASE_PART})*))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD_PART}(?:\.{_BUILD_PART})*))?"
    r"\s*"
)


@dataclass(frozen=True)
class VersionFields:
    """Raw text fields extracted from a version string.

    A field is ``None`` when the corresponding part was absent from the input.
    """

    major: Optional[str] = None
    minor: Optional[str] = None
    patch: Optional[str] = None
    revision: Optional[str] = None
    prerelease: Optional[str] = None
    build: Optional[str] = None

    @property
    def is_short(self) -> bool:
        """Return True if any of major, minor or patch is missing."""
        return self.major is None or self.minor is None or self.patch is None

    @property
    def has_suffix(self) -> bool:
        """Return True if a pre-release or build suffix is present."""
        return self.prerelease is not None or self.build is not None


def _fields_from_match(match: re.Match[str]) -> VersionFields:
    return VersionFields(
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        revision=match.group("revision"),
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )


def match_strict(text: str) -> VersionFields:
    """Match ``text`` against the strict grammar.

    Raises:
        GrammarMismatchError: If the text is not a strict version string
    """
    match = STRICT_PATTERN.fullmatch(text)
    if match is None:
        raise GrammarMismatchError(text)
    return _fields_from_match(match)


def match_tolerant(text: str) -> VersionFields:
    """Match ``text`` against the tolerant grammar.

    At least one of major, minor or patch must be present, so blank input,
    a bare ``v`` or a lone suffix never match.

    Raises:
        GrammarMismatchError: If the text is not a tolerant version string
    """
    match = TOLERANT_PATTERN.fullmatch(text)
    if match is None:
        raise GrammarMismatchError(text, f"Invalid tolerant version: {text!r}")

    fields = _fields_from_match(match)
    if fields.major is None and fields.minor is None and fields.patch is None:
        raise GrammarMismatchError(text, f"Invalid tolerant version: {text!r}")
    return fields


def contains_only(text: str, allowed: frozenset[str]) -> bool:
    """Return True if every character of ``text`` is in ``allowed``."""
    return all(char in allowed for char in text)


def strip_leading_zeros(field: Optional[str]) -> Optional[str]:
    """Remove leading zeroes from a numeric field, keeping a single ``0``."""
    if field is None or len(field) <= 1:
        return field
    return field.lstrip("0") or "0"
