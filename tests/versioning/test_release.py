"""
Tests for release parsing.

All tests in this file are marked as 'short' since they don't require
external dependencies, containers, or network I/O.
"""

import pytest

from releaseparser.versioning.exceptions import InvalidRelease, InvalidReleaseReason
from releaseparser.versioning.release import Release, parse_release

SHA1 = "4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b1c2d3e"


@pytest.mark.short
class TestReleaseParsing:
    """Test splitting of valid releases."""

    def test_package_and_version(self):
        r = parse_release("myapp@1.2.3")
        assert r.raw == "myapp@1.2.3"
        assert r.package == "myapp"
        assert r.version_raw == "1.2.3"
        assert r.version is not None
        assert r.version.triple() == (1, 2, 3)
        assert r.build_hash is None
        assert str(r) == "myapp@1.2.3"

    def test_package_and_hash(self):
        r = parse_release(f"myapp@{SHA1}")
        assert r.package == "myapp"
        assert r.version is None
        assert r.version_raw == SHA1
        assert r.build_hash == SHA1
        assert str(r) == f"myapp@{SHA1}"

    def test_numeric_hash_is_not_parsed_as_version(self):
        r = parse_release("myapp@123456789012")
        assert r.version is None
        assert r.build_hash == "123456789012"

    def test_build_hash_from_build_metadata(self):
        r = parse_release(f"myapp@1.0.0+{SHA1}")
        assert r.version is not None
        assert r.version.build_code == SHA1
        assert r.build_hash == SHA1

    def test_build_code_that_is_not_a_hash(self):
        r = parse_release("myapp@1.0.0+build.7")
        assert r.version.build_code == "build.7"
        assert r.build_hash is None

    def test_whitespace_is_trimmed(self):
        r = parse_release("  myapp@1.2  \t")
        assert r.raw == "myapp@1.2"
        assert r.package == "myapp"
        assert r.version_raw == "1.2"

    def test_without_package(self):
        r = parse_release("1.2.3")
        assert r.package is None
        assert r.version_raw == "1.2.3"
        assert r.version is not None
        assert r.version.components == 3
        assert str(r) == "1.2.3"

    def test_free_form_release(self):
        r = parse_release("my release name")
        assert r.package is None
        assert r.version is None
        assert r.version_raw == "my release name"
        assert str(r) == "my release name"

    def test_unparseable_version_is_kept(self):
        r = parse_release("myapp@v1.2.3")
        assert r.package == "myapp"
        assert r.version is None
        assert r.version_raw == "v1.2.3"
        assert str(r) == "myapp@v1.2.3"

    def test_empty_version_part(self):
        r = parse_release("myapp@")
        assert r.package == "myapp"
        assert r.version_raw == ""
        assert r.version is None

    def test_split_at_first_separator(self):
        r = parse_release("foo@bar@1.0")
        assert r.package == "foo"
        assert r.version_raw == "bar@1.0"
        assert r.version is None

    def test_package_with_leading_at(self):
        r = parse_release("@foo@1.0")
        assert r.package == "@foo"
        assert r.version_raw == "1.0"
        assert r.version.components == 2

    def test_leading_at_without_separator(self):
        r = parse_release("@foo")
        assert r.package is None
        assert r.version_raw == "@foo"

    def test_double_at_has_no_package(self):
        r = parse_release("@@1.0")
        assert r.package is None
        assert r.version_raw == "@@1.0"

    def test_normalization(self):
        r = parse_release("myapp@1.0rc1")
        assert r.version_raw == "1.0rc1"
        assert str(r) == "myapp@1.0-rc1"

    def test_class_method(self):
        assert Release.parse("myapp@1.0") == parse_release("myapp@1.0")

    def test_immutable(self):
        r = parse_release("myapp@1.0")
        with pytest.raises(AttributeError):
            r.package = "other"

    def test_repr(self):
        assert repr(parse_release("myapp@1.0rc1")) == "Release('myapp@1.0-rc1')"

    def test_debug_logging(self, capture_logs):
        parse_release("myapp@not a version")
        parse_release(f"myapp@{SHA1}")
        logs = capture_logs.getvalue()
        assert "is not a valid version" in logs
        assert "is a build hash" in logs


@pytest.mark.short
class TestReleaseInvalid:
    """Test rejected releases."""

    @pytest.mark.parametrize("name", [".", "..", "latest", "  latest\n"])
    def test_restricted_names(self, name):
        with pytest.raises(InvalidRelease) as excinfo:
            parse_release(name)
        assert excinfo.value.reason is InvalidReleaseReason.RESTRICTED_NAME

    def test_restricted_names_are_exact(self):
        assert parse_release("latest@1.0").package == "latest"
        assert parse_release("Latest").version_raw == "Latest"

    def test_too_long(self):
        with pytest.raises(InvalidRelease, match="too long") as excinfo:
            parse_release("a" * 251)
        assert excinfo.value.reason is InvalidReleaseReason.TOO_LONG
        assert excinfo.value.release == "a" * 251

    def test_length_limit_is_inclusive(self):
        assert parse_release("a" * 250).version_raw == "a" * 250

    def test_length_is_measured_after_trimming(self):
        assert parse_release("  " + "a" * 250 + "  ").raw == "a" * 250

    def test_length_counts_utf8_bytes(self):
        with pytest.raises(InvalidRelease) as excinfo:
            parse_release("é" * 126)
        assert excinfo.value.reason is InvalidReleaseReason.TOO_LONG

    @pytest.mark.parametrize(
        "name", ["a/b@1.0.0", "myapp@1.0/2", "my\napp@1.0", "myapp@1.0\r1"]
    )
    def test_bad_characters(self, name):
        with pytest.raises(InvalidRelease, match="bad characters") as excinfo:
            parse_release(name)
        assert excinfo.value.reason is InvalidReleaseReason.BAD_CHARACTERS

    def test_length_checked_before_characters(self):
        with pytest.raises(InvalidRelease) as excinfo:
            parse_release("/" * 300)
        assert excinfo.value.reason is InvalidReleaseReason.TOO_LONG

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_release("latest")


@pytest.mark.short
class TestReleaseRoundTrip:
    """Re-parsing the canonical form keeps the parsed structure."""

    @pytest.mark.parametrize(
        "text",
        [
            "myapp@1.2.3",
            "myapp@1.0rc1",
            "myapp@1-beta.2+exp.sha.5114f85",
            f"myapp@{SHA1}",
            f"myapp@2.0+{SHA1}",
            "@scope@1.0",
            "1.2",
            "free form",
            "foo@bar@1.0",
        ],
    )
    def test_canonical_form_is_stable(self, text):
        r = parse_release(text)
        again = parse_release(str(r))
        assert again.package == r.package
        assert again.build_hash == r.build_hash
        if r.version is None:
            assert again.version is None
        else:
            assert again.version.quad() == r.version.quad()
            assert again.version.build_code == r.version.build_code
            assert again.version.components == r.version.components
        assert str(again) == str(r)
