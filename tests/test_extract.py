"""Tests for the dotted-identifier key extractor."""

from __future__ import annotations

from resw_audit.core.extract import extract_keys


class TestExtractKeys:
    """Lexical extraction of candidate keys."""

    def test_mixed_boundaries(self):
        assert extract_keys("Foo.Bar baz.Qux_1 ...Edge") == {"Bar", "Qux_1", "Edge"}

    def test_empty_candidates_discarded_by_default(self):
        assert extract_keys("end.") == set()
        assert extract_keys("a..b") == {"b"}

    def test_keep_empty_retains_empty_candidate(self):
        assert extract_keys("Foo.Bar baz.Qux_1 ...Edge", keep_empty=True) == {
            "Bar",
            "Qux_1",
            "Edge",
            "",
        }
        assert extract_keys("trailing.", keep_empty=True) == {""}

    def test_no_dot_yields_nothing(self):
        assert extract_keys("") == set()
        assert extract_keys("no dots here at all") == set()

    def test_key_never_contains_a_dot(self):
        # Scanning resumes after "App", so "Views" and "MainPage" come from
        # the following dots rather than one "Views.MainPage" token.
        assert extract_keys("App.Views.MainPage") == {"Views", "MainPage"}

    def test_duplicates_collapse(self):
        text = "Strings.Save; Strings.Save; Strings.Cancel"
        assert extract_keys(text) == {"Save", "Cancel"}

    def test_xaml_binding(self):
        text = '<TextBlock Text="{x:Bind Strings.AppTitle}" />'
        assert extract_keys(text) == {"AppTitle"}

    def test_unicode_letters_and_digits(self):
        assert extract_keys("Strings.Überschrift2 x.ñandú") == {"Überschrift2", "ñandú"}

    def test_punctuation_terminates_key(self):
        assert extract_keys("Format(Strings.NewsCount, n)") == {"NewsCount"}
        assert extract_keys("x.Key-Suffix") == {"Key"}

    def test_leading_digits_are_candidates(self):
        # Numeric literals are not special-cased.
        assert extract_keys("Version 1.25") == {"25"}

    def test_idempotent(self):
        text = "a.One b.Two c.One ..Three"
        assert extract_keys(text) == extract_keys(text)

    def test_combining_mark_ends_key(self):
        # U+093E is a spacing combining mark, not alphanumeric for str.
        assert extract_keys("Strings.\u0915\u093e") == {"\u0915"}
        assert extract_keys("Strings.\u0915\u093eB") == {"\u0915"}
