"""Tests for spec classification and token helpers."""

import pytest

from versioning.models import SpecKind
from versioning.parser import (
    classify_spec,
    otp_major,
    parse_range,
    split_prefixed,
    strip_leading_v,
    strip_otp_suffix,
)


class TestClassifySpec:
    """Each spec is classified once, with a fixed precedence."""

    @pytest.mark.parametrize("spec", ["", "   ", None])
    def test_empty(self, spec):
        assert classify_spec(spec) is SpecKind.EMPTY

    def test_release_candidate_wins_over_strict(self):
        assert classify_spec("25.0-rc1") is SpecKind.RELEASE_CANDIDATE
        assert classify_spec("25.0-rc1", strict=True) is SpecKind.RELEASE_CANDIDATE

    def test_strict_is_exact(self):
        assert classify_spec("25", strict=True) is SpecKind.EXACT
        assert classify_spec("master", strict=True) is SpecKind.EXACT

    @pytest.mark.parametrize("spec", ["25", "25.0", "^1.14", "~3.22.0", ">=1.0 <2.0"])
    def test_ranges(self, spec):
        assert classify_spec(spec) is SpecKind.RANGE

    @pytest.mark.parametrize("spec", ["OTP-25.0.4", "25.0.1.2", "maint-25"])
    def test_coerced(self, spec):
        assert classify_spec(spec) is SpecKind.COERCED

    @pytest.mark.parametrize("spec", ["master", "nightly", "main"])
    def test_branch(self, spec):
        assert classify_spec(spec) is SpecKind.BRANCH


class TestParseRange:
    """Invalid ranges are reported as None, never raised."""

    def test_invalid_range(self):
        assert parse_range("master") is None
        assert parse_range("") is None

    def test_valid_range(self):
        assert parse_range("25") is not None


class TestTokenHelpers:
    """Helpers shared by the per-tool resolvers."""

    def test_strip_otp_suffix(self):
        assert strip_otp_suffix("1.14.0-otp-25") == "1.14.0"
        assert strip_otp_suffix("1.14") == "1.14"

    def test_strip_leading_v(self):
        assert strip_leading_v("v0.30.0") == "0.30.0"
        assert strip_leading_v("0.30.0") == "0.30.0"

    def test_split_prefixed(self):
        assert split_prefixed("OTP-25.0") == ("OTP-", "25.0")
        assert split_prefixed("25.0") == (None, "25.0")

    def test_otp_major(self):
        assert otp_major("OTP-25.0.4") == "25"
        assert otp_major("25") == "25"
        assert otp_major("24.3.4.13") == "24"
        assert otp_major("master") == "master"
