# SPDX-License-Identifier: MIT
"""Pre-release identifiers.

A pre-release suffix such as ``alpha.1.x-y`` is a dot-separated list of
identifiers. Each identifier is either numeric (``1``) or alphanumeric
(``alpha``, ``x-y``), and the two kinds order differently:

- Numeric identifiers compare by value, so ``2 < 11``.
- Numeric identifiers always sort before alphanumeric ones.
- Alphanumeric identifiers compare lexically by byte order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import (
    EmptyIdentifierError,
    InvalidCharacterError,
    LeadingZeroError,
    NumericOverflowError,
)
from .grammar import ALPHANUMERIC, DIGITS, contains_only

UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, e.g. the ``1`` in ``rc.1``."""

    value: int

    @property
    def is_numeric(self) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class AlphanumericIdentifier:
    """A pre-release identifier containing at least one non-digit."""

    text: str

    @property
    def is_numeric(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text


PrereleaseIdentifier = Union[NumericIdentifier, AlphanumericIdentifier]


def has_leading_zero(segment: str) -> bool:
    """Return True if a digit string has a disallowed leading zero."""
    return len(segment) > 1 and segment[0] == "0"


def parse_identifier(segment: str) -> PrereleaseIdentifier:
    """Build a pre-release identifier from a single dot-separated segment.

    Args:
        segment: One segment of a pre-release suffix (no dots)

    Returns:
        A NumericIdentifier for digit-only segments, otherwise an
        AlphanumericIdentifier

    Raises:
        EmptyIdentifierError: If the segment is empty
        LeadingZeroError: If a numeric segment starts with ``0``
        NumericOverflowError: If a numeric segment exceeds 64 bits
        InvalidCharacterError: If the segment contains characters outside
            ``[0-9A-Za-z-]``

    Examples:
        >>> parse_identifier("11")
        NumericIdentifier(value=11)
        >>> parse_identifier("beta")
        AlphanumericIdentifier(text='beta')
    """
    if not segment:
        raise EmptyIdentifierError(segment)

    if contains_only(segment, DIGITS):
        if has_leading_zero(segment):
            raise LeadingZeroError(segment)
        value = int(segment)
        if value > UINT64_MAX:
            raise NumericOverflowError(
                segment, f"Numeric pre-release identifier out of range: {segment!r}"
            )
        return NumericIdentifier(value)

    if contains_only(segment, ALPHANUMERIC):
        return AlphanumericIdentifier(segment)

    raise InvalidCharacterError(segment)


def compare_identifiers(a: PrereleaseIdentifier, b: PrereleaseIdentifier) -> int:
    """Compare two pre-release identifiers.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b
    """
    if isinstance(a, NumericIdentifier) and isinstance(b, NumericIdentifier):
        if a.value == b.value:
            return 0
        return -1 if a.value < b.value else 1

    # Numeric < alphanumeric
    if isinstance(a, NumericIdentifier):
        return -1
    if isinstance(b, NumericIdentifier):
        return 1

    # Identifiers are ASCII, so str ordering is byte ordering
    if a.text == b.text:
        return 0
    return -1 if a.text < b.text else 1
