"""Tests for browser name aliasing and browserslist result parsing."""

import pytest

from browserslist_useragent.browsers.aliases import alias_family, normalize_query
from browserslist_useragent.browsers.parser import parse_browsers_list
from browserslist_useragent.constants import BROWSER_NAME_MAP
from browserslist_useragent.versioning.models import QueryEntry


class TestAliasFamily:
    """Direct lookups against the alias map."""

    @pytest.mark.parametrize("name,family", [
        ("ie", "Explorer"),
        ("ie_mob", "ExplorerMobile"),
        ("and_chr", "Chrome"),
        ("ios_saf", "iOS"),
        ("op_mob", "OperaMobile"),
        ("ff", "Firefox"),
    ])
    def test_known_aliases(self, name, family):
        assert alias_family(name) == family

    def test_unknown_name_passes_through(self):
        assert alias_family("safari") == "safari"

    def test_lookup_is_case_sensitive(self):
        assert alias_family("IE") == "IE"

    def test_canonical_names_are_stable(self):
        for family in BROWSER_NAME_MAP.values():
            assert alias_family(family) == family

    def test_map_is_read_only(self):
        with pytest.raises(TypeError):
            BROWSER_NAME_MAP["ie"] = "Other"  # type: ignore[index]


class TestNormalizeQuery:
    """Rewriting alias tokens inside free-text queries."""

    def test_rewrites_alias(self):
        assert normalize_query("ie 11") == "Explorer 11"

    def test_longer_alias_wins_at_same_position(self):
        assert normalize_query("ie_mob 11") == "ExplorerMobile 11"

    def test_query_without_alias_unchanged(self):
        assert normalize_query("last 2 versions") == "last 2 versions"
        assert normalize_query("> 1%") == "> 1%"

    def test_only_first_alias_rewritten(self):
        assert normalize_query("ff > 60 or ie 11") == "Firefox > 60 or ie 11"

    def test_rest_of_query_untouched(self):
        assert normalize_query("last 2 ios_saf versions") == "last 2 iOS versions"


class TestParseBrowsersList:
    """Flattening browserslist output into QueryEntry records."""

    def test_aliases_expands_ranges_and_drops_previews(self):
        result = parse_browsers_list(["ie 11", "chrome 10.0-10.2", "firefox TP"])
        assert result == [
            QueryEntry("Explorer", "11"),
            QueryEntry("chrome", "10.0.0"),
            QueryEntry("chrome", "10.1.0"),
            QueryEntry("chrome", "10.2.0"),
        ]

    def test_aliased_range(self):
        result = parse_browsers_list(["ios_saf 12.0-12.1"])
        assert result == [QueryEntry("iOS", "12.0.0"), QueryEntry("iOS", "12.1.0")]

    def test_single_versions_not_normalized(self):
        assert parse_browsers_list(["safari 13.1"]) == [QueryEntry("safari", "13.1")]

    def test_malformed_range_dropped(self):
        assert parse_browsers_list(["ios_saf x-12.1", "ie 11"]) == [QueryEntry("Explorer", "11")]

    def test_leading_dash_not_a_range(self):
        assert parse_browsers_list(["chrome -1"]) == [QueryEntry("chrome", "-1")]

    def test_non_numeric_version_kept(self):
        assert parse_browsers_list(["op_mini all"]) == [QueryEntry("OperaMini", "all")]

    def test_missing_version(self):
        assert parse_browsers_list(["chrome"]) == [QueryEntry("chrome", None)]

    def test_duplicates_preserved(self):
        assert len(parse_browsers_list(["ie 11", "ie 11"])) == 2

    def test_empty(self):
        assert parse_browsers_list([]) == []
