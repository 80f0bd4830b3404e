"""Tests for loose semver normalization, range expansion and comparison."""

import pytest

from browserslist_useragent.versioning.models import Options
from browserslist_useragent.versioning.semver import (
    coerce_version,
    compare_versions,
    expand_range,
    normalize_version,
)


class TestNormalizeVersion:
    """Coercion of loose tokens to major.minor.patch."""

    @pytest.mark.parametrize("token,expected", [
        ("10", "10.0.0"),
        ("2.5", "2.5.0"),
        ("10.2.1", "10.2.1"),
        ("80.0.3987.132", "80.0.3987"),
        ("v12.1", "12.1.0"),
        ("Version 7", "7.0.0"),
        ("010.02", "10.2.0"),
    ])
    def test_coerces_partial_versions(self, token, expected):
        assert normalize_version(token) == expected

    @pytest.mark.parametrize("token", ["", None, "all", "TP", "garbage"])
    def test_returns_none_when_no_number(self, token):
        assert normalize_version(token) is None

    @pytest.mark.parametrize("token", ["10", "2.5", "13.0.5", "v1.2.3.4"])
    def test_idempotent(self, token):
        once = normalize_version(token)
        assert normalize_version(once) == once

    def test_coerce_returns_semantic_version(self):
        version = coerce_version("9.3")
        assert (version.major, version.minor, version.patch) == (9, 3, 0)


class TestExpandRange:
    """Expansion of browserslist ranges into minor steps."""

    def test_expands_inclusive(self):
        assert expand_range("10.0-10.2") == ["10.0.0", "10.1.0", "10.2.0"]

    def test_single_step_range(self):
        assert expand_range("17.0-17.0") == ["17.0.0"]

    def test_patch_reset_at_each_step(self):
        assert expand_range("9.0.3-9.2") == ["9.0.3", "9.1.0", "9.2.0"]

    def test_end_before_start_is_empty(self):
        assert expand_range("10.2-10.0") == []

    def test_malformed_start_is_empty(self):
        assert expand_range("garbage-10.2") == []

    def test_malformed_end_is_empty(self):
        assert expand_range("10.0-") == []


class TestCompareVersions:
    """Tolerance and directionality when comparing versions."""

    def test_patch_drift_tolerated_by_default(self):
        assert compare_versions("10.2.1", "10.2.0", Options()) is True

    def test_minor_drift_not_tolerated_with_ignore_patch(self):
        assert compare_versions("10.3.0", "10.2.0", Options(ignore_patch=True)) is False

    def test_exact_when_no_tolerance(self):
        opts = Options(ignore_patch=False, ignore_minor=False)
        assert compare_versions("10.2.0", "10.2", opts) is True
        assert compare_versions("10.2.1", "10.2.0", opts) is False

    def test_ignore_minor_allows_minor_drift(self):
        opts = Options(ignore_patch=False, ignore_minor=True)
        assert compare_versions("10.5.3", "10.2.0", opts) is True
        assert compare_versions("11.0.0", "10.2.0", opts) is False

    def test_ignore_patch_takes_precedence_over_ignore_minor(self):
        opts = Options(ignore_patch=True, ignore_minor=True)
        assert compare_versions("10.3.0", "10.2.0", opts) is False

    def test_older_version_never_matches_range(self):
        assert compare_versions("10.1.9", "10.2.0", Options()) is False

    def test_allow_higher_versions(self):
        opts = Options(allow_higher_versions=True)
        assert compare_versions("9.0.0", "10.0.0", opts) is False
        assert compare_versions("11.0.0", "10.0.0", opts) is True
        assert compare_versions("10.0.0", "10.0.0", opts) is True

    def test_allow_higher_versions_overrides_tolerance(self):
        opts = Options(allow_higher_versions=True, ignore_patch=False)
        assert compare_versions("10.4.0", "10.0.0", opts) is True

    @pytest.mark.parametrize("a,b", [("all", "10"), ("10", "all"), ("", "10"), ("10", "")])
    def test_unparseable_versions_never_match(self, a, b):
        assert compare_versions(a, b, Options()) is False
