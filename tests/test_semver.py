# SPDX-License-Identifier: MIT
"""Unit tests for version parsing, formatting and increments."""

import logging

import pytest

from revsemver import (
    SPEC_VERSION,
    AlphanumericIdentifier,
    EmptyIdentifierError,
    EmptyInputError,
    GrammarMismatchError,
    InvalidBuildSegmentError,
    InvalidCharacterError,
    InvalidVersionError,
    NumericIdentifier,
    NumericOverflowError,
    ShortFormWithSuffixError,
    Version,
    VersionError,
    finalize_version,
    is_valid_semver,
    must_parse,
    new_build_identifier,
    parse_tolerant,
    parse_version,
)


def fields(v: Version) -> tuple:
    """Return every field of a version, including build metadata."""
    return (v.major, v.minor, v.patch, v.revision, v.prerelease, v.build)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.revision == -1
        assert v.has_revision is False
        assert v.prerelease == ()
        assert v.build == ()

    def test_revision(self):
        """Test parsing a four-component version."""
        v = parse_version("1.2.3.4")
        assert v.revision == 4
        assert v.has_revision is True

    def test_zero_revision_is_present(self):
        """Test that a zero revision is distinct from an absent one."""
        assert parse_version("1.2.3.0").revision == 0

    def test_prerelease_identifiers(self):
        """Test pre-release segments become typed identifiers."""
        v = parse_version("1.0.0-alpha.1.x-y")
        assert v.prerelease == (
            AlphanumericIdentifier("alpha"),
            NumericIdentifier(1),
            AlphanumericIdentifier("x-y"),
        )
        assert v.is_prerelease is True

    def test_build_metadata(self):
        """Test build metadata is split on dots and keeps leading zeroes."""
        v = parse_version("1.0.0+build.007")
        assert v.build == ("build", "007")
        assert v.is_prerelease is False

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse_version("1.2.3.4-rc.1+sha.5114f85")
        assert v.revision == 4
        assert v.prerelease == (AlphanumericIdentifier("rc"), NumericIdentifier(1))
        assert v.build == ("sha", "5114f85")

    def test_max_values(self):
        """Test the largest accepted numeric components."""
        u64 = 2**64 - 1
        i64 = 2**63 - 1
        v = parse_version(f"{u64}.{u64}.{u64}.{i64}")
        assert (v.major, v.minor, v.patch, v.revision) == (u64, u64, u64, i64)

    def test_version_parse_alias(self):
        """Test the Version.parse classmethod."""
        assert fields(Version.parse("1.2.3-rc+b")) == fields(parse_version("1.2.3-rc+b"))


class TestParseVersionErrors:
    """Tests for strict parsing failures."""

    def test_empty_string(self):
        """Test that empty string raises EmptyInputError."""
        with pytest.raises(EmptyInputError) as exc_info:
            parse_version("")
        assert exc_info.value.code == "EMPTY_INPUT"

    @pytest.mark.parametrize(
        "text",
        ["   ", "1.0", "1", "01.0.0", "1.0.0-01", "v1.0.0", "1.2.3.4.5", "a.b.c", "1.0.0-"],
    )
    def test_grammar_mismatch(self, text):
        """Test strings outside the strict grammar."""
        with pytest.raises(GrammarMismatchError) as exc_info:
            parse_version(text)
        assert exc_info.value.version == text
        assert exc_info.value.code == "GRAMMAR_MISMATCH"

    @pytest.mark.parametrize(
        "text",
        [
            f"{2**64}.0.0",
            f"0.{2**64}.0",
            f"0.0.{2**64}",
            f"0.0.0.{2**63}",
            f"1.0.0-{2**64}",
        ],
    )
    def test_numeric_overflow(self, text):
        """Test that numeric components are range checked."""
        with pytest.raises(NumericOverflowError):
            parse_version(text)

    def test_non_string_input(self):
        """Test that non-string input raises error."""
        with pytest.raises(GrammarMismatchError):
            parse_version(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionError):
            parse_version(None)  # type: ignore

    def test_errors_are_value_errors(self):
        """Test that every parse failure is a ValueError."""
        with pytest.raises(ValueError):
            parse_version("nope")

    def test_is_valid_semver(self):
        """Test the boolean validity check."""
        assert is_valid_semver("1.0.0")
        assert is_valid_semver("1.0.0.1-rc.1+b")
        assert not is_valid_semver("")
        assert not is_valid_semver("1.0")
        assert not is_valid_semver("01.0.0")
        assert not is_valid_semver(None)  # type: ignore


class TestParseTolerant:
    """Tests for parse_tolerant function."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("01.0.0", "1.0.0"),
            ("v1.2.3", "1.2.3"),
            ("  1.2.3  ", "1.2.3"),
            ("v1.2", "1.2.0"),
            ("1", "1.0.0"),
            ("00.00.00", "0.0.0"),
            ("v01.02.03.04", "1.2.3.4"),
            ("1.2.3.000", "1.2.3.0"),
            ("v1.2.3-rc.1+b.01", "1.2.3-rc.1+b.01"),
            ("010.020.030-alpha", "10.20.30-alpha"),
            ("1.", "1.0.0"),
            ("v1.2.", "1.2.0"),
            (".5", "0.5.0"),
            ("1..2.3", "1.0.2.3"),
        ],
    )
    def test_normalization(self, text, expected):
        """Test that tolerant input matches the equivalent strict version."""
        assert fields(parse_tolerant(text)) == fields(parse_version(expected))

    def test_strict_input_unchanged(self):
        """Test that strict strings parse identically in tolerant mode."""
        for text in ("0.0.0", "1.2.3.4", "1.0.0-alpha.1+build.5"):
            assert fields(parse_tolerant(text)) == fields(parse_version(text))

    @pytest.mark.parametrize("text", ["1.2-alpha", "1+build", "v3-rc.1+b"])
    def test_short_form_with_suffix(self, text):
        """Test that shortened versions cannot carry a suffix."""
        with pytest.raises(ShortFormWithSuffixError):
            parse_tolerant(text)

    @pytest.mark.parametrize("text", ["", "   ", "v", ".", "version1", "1.2.3.", "1.2.3.4.5"])
    def test_grammar_mismatch(self, text):
        """Test strings outside the tolerant grammar."""
        with pytest.raises(GrammarMismatchError):
            parse_tolerant(text)

    def test_zero_padded_prerelease_rejected(self):
        """Test that a numeric pre-release with leading zero still fails."""
        with pytest.raises(VersionError):
            parse_tolerant("1.2.3-01")

    def test_logs_normalization(self, caplog):
        """Test that normalization is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="revsemver.semver"):
            parse_tolerant("v01.2")
        assert "'1.2.0'" in caplog.text


class TestMustParse:
    """Tests for must_parse function."""

    def test_valid(self):
        """Test that valid input parses normally."""
        assert str(must_parse("1.2.3.4")) == "1.2.3.4"

    def test_invalid_is_fatal(self):
        """Test that invalid input raises RuntimeError naming the input."""
        with pytest.raises(RuntimeError, match="not-a-version") as exc_info:
            must_parse("not-a-version")
        assert isinstance(exc_info.value.__cause__, GrammarMismatchError)


class TestFormatting:
    """Tests for string rendering."""

    @pytest.mark.parametrize(
        "text",
        ["0.0.0", "1.2.3", "1.2.3.0", "1.2.3.4", "1.0.0-0.3.7", "1.0.0-x.7.z.92", "1.0.0+20130313144700", "1.2.3.4-beta+exp.sha.5114f85"],
    )
    def test_round_trip(self, text):
        """Test that str() reproduces canonical input."""
        assert str(parse_version(text)) == text

    def test_manual_construction(self):
        """Test rendering of a hand-built version."""
        v = Version(1, 2, 3, 4, (AlphanumericIdentifier("rc"), NumericIdentifier(1)), ("b",))
        assert str(v) == "1.2.3.4-rc.1+b"

    def test_sequences_stored_as_tuples(self):
        """Test that list arguments are stored as tuples."""
        v = Version(1, 0, 0, prerelease=[AlphanumericIdentifier("rc")], build=["b"])
        assert v.prerelease == (AlphanumericIdentifier("rc"),)
        assert v.build == ("b",)

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(parse_version("1.2.3-rc.1")) == "<Version('1.2.3-rc.1')>"

    def test_finalize_version(self):
        """Test dropping pre-release and build metadata."""
        v = parse_version("1.2.3.4-rc.1+build.5")
        assert v.finalize_version() == "1.2.3.4"
        assert v.base_version == "1.2.3.4"
        assert parse_version("1.2.3-rc.1").finalize_version() == "1.2.3"
        # v itself is left untouched
        assert str(v) == "1.2.3.4-rc.1+build.5"

    def test_finalize(self):
        """Test the finalized copy of a version."""
        v = parse_version("1.2.3-rc.1+build.5").finalize()
        assert fields(v) == fields(parse_version("1.2.3"))

    def test_finalize_version_function(self):
        """Test the module-level finalize helper."""
        assert finalize_version("1.2.3-rc.1+build.5") == "1.2.3"
        with pytest.raises(VersionError):
            finalize_version("1.2")

    def test_spec_version(self):
        """Test the SemVer specification version constant."""
        assert str(SPEC_VERSION) == "2.0.0"


class TestIncrements:
    """Tests for increment methods."""

    def test_increment_minor_with_revision(self):
        """Test that minor bumps reset patch and revision."""
        v = parse_version("1.2.3.4").increment_minor()
        assert fields(v) == fields(parse_version("1.3.0.0"))

    @pytest.mark.parametrize(
        "text, part, expected",
        [
            ("1.2.3", "major", "2.0.0"),
            ("1.2.3", "minor", "1.3.0"),
            ("1.2.3", "patch", "1.2.4"),
            ("1.2.3", "revision", "1.2.3"),
            ("1.2.3.4", "major", "2.0.0.0"),
            ("1.2.3.4", "minor", "1.3.0.0"),
            ("1.2.3.4", "patch", "1.2.4.0"),
            ("1.2.3.4", "revision", "1.2.3.5"),
            ("0.0.0.0", "revision", "0.0.0.1"),
        ],
    )
    def test_increments(self, text, part, expected):
        """Test each increment with and without a revision."""
        v = getattr(parse_version(text), f"increment_{part}")()
        assert str(v) == expected

    def test_increments_keep_component_mode(self):
        """Test that increments never add or remove the revision."""
        for name in ("increment_major", "increment_minor", "increment_patch", "increment_revision"):
            assert getattr(parse_version("1.2.3"), name)().revision == -1
            assert getattr(parse_version("1.2.3.9"), name)().revision >= 0

    def test_increments_keep_prerelease_and_build(self):
        """Test that increments leave pre-release and build alone."""
        v = parse_version("1.2.3-rc.1+b.2").increment_patch()
        assert str(v) == "1.2.4-rc.1+b.2"

    def test_increments_return_new_instances(self):
        """Test that the version being bumped is not modified."""
        v = parse_version("1.2.3.4")
        v.increment_major()
        assert str(v) == "1.2.3.4"


class TestValidate:
    """Tests for Version.validate."""

    def test_parsed_versions_are_valid(self):
        """Test that parser output always validates."""
        assert parse_version("1.2.3.4-rc.1+b.5").validate() is None
        assert parse_version("0.0.0").validate() is None

    def test_empty_prerelease_identifier(self):
        """Test that an empty alphanumeric identifier is reported."""
        v = Version(1, 0, 0, prerelease=(AlphanumericIdentifier(""),))
        assert isinstance(v.validate(), EmptyIdentifierError)

    def test_invalid_prerelease_character(self):
        """Test that bad characters in an identifier are reported."""
        v = Version(1, 0, 0, prerelease=(AlphanumericIdentifier("al pha"),))
        assert isinstance(v.validate(), InvalidCharacterError)

    @pytest.mark.parametrize("build", [("ok", ""), ("b@d",), ("sp ace",)])
    def test_invalid_build(self, build):
        """Test that empty or malformed build segments are reported."""
        v = Version(1, 0, 0, build=build)
        assert isinstance(v.validate(), InvalidBuildSegmentError)

    def test_untyped_prerelease_identifier(self):
        """Test that a bare string in the pre-release is reported, not raised."""
        v = Version(1, 0, 0, prerelease=("alpha",))
        error = v.validate()
        assert isinstance(error, InvalidCharacterError)
        assert error.version == "alpha"

    def test_non_string_build_segment(self):
        """Test that a non-string build segment is reported, not raised."""
        v = Version(1, 0, 0, build=(5,))
        error = v.validate()
        assert isinstance(error, InvalidBuildSegmentError)
        assert error.version == "5"

    def test_first_violation_returned(self):
        """Test that pre-release is checked before build."""
        v = Version(1, 0, 0, prerelease=(AlphanumericIdentifier("!"),), build=("",))
        assert isinstance(v.validate(), InvalidCharacterError)

    @pytest.mark.parametrize(
        "v",
        [
            Version(-1, 0, 0),
            Version(0, 2**64, 0),
            Version(0, 0, 0, revision=-2),
            Version(0, 0, 0, revision=2**63),
            Version(0, 0, 0, prerelease=(NumericIdentifier(-1),)),
        ],
    )
    def test_out_of_range(self, v):
        """Test that numeric fields outside their width are reported."""
        assert isinstance(v.validate(), NumericOverflowError)


class TestNewBuildIdentifier:
    """Tests for new_build_identifier function."""

    def test_valid(self):
        """Test that valid segments are returned unchanged."""
        assert new_build_identifier("exp-007") == "exp-007"

    @pytest.mark.parametrize("segment", ["", "a.b", "a+b", "ä"])
    def test_invalid(self, segment):
        """Test that invalid segments are rejected."""
        with pytest.raises(InvalidBuildSegmentError) as exc_info:
            new_build_identifier(segment)
        assert exc_info.value.code == "INVALID_BUILD_SEGMENT"
