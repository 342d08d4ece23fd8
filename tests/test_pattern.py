"""Tests for wildcard detection, capture extraction and sanitizing."""
from __future__ import annotations

import pytest

from globimport.errors import CaptureMismatchError, ErrorKind
from globimport.models import Identifier, ImportDeclaration, ImportDefaultSpecifier
from globimport.pattern import (
    build_capture_regex,
    extract_fragment,
    is_wildcard_import,
    is_wildcard_pattern,
    sanitize_name,
    split_at_wildcard,
)


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


class TestIsWildcardPattern:
    def test_single_wildcard(self):
        assert is_wildcard_pattern("./*.js") is True

    def test_wildcard_in_directory(self):
        assert is_wildcard_pattern("./pages/*/index.js") is True

    def test_no_wildcard(self):
        assert is_wildcard_pattern("./a.js") is False
        assert is_wildcard_pattern("react") is False

    def test_two_wildcards_are_not_wildcard_imports(self):
        assert is_wildcard_pattern("./*-*.js") is False

    def test_three_wildcards(self):
        assert is_wildcard_pattern("./*/*/*.js") is False

    def test_is_wildcard_import_reads_source(self):
        decl = ImportDeclaration("./*.js", [ImportDefaultSpecifier(Identifier("foo"))])
        assert is_wildcard_import(decl) is True
        decl = ImportDeclaration("./foo.js", [ImportDefaultSpecifier(Identifier("foo"))])
        assert is_wildcard_import(decl) is False


# ---------------------------------------------------------------------------
# Capture extractor
# ---------------------------------------------------------------------------


class TestCaptureRegex:
    def test_captures_filename_stem(self):
        regex = build_capture_regex("/src/./*.js")
        assert extract_fragment(regex, "/src/./button.js") == "button"

    def test_captures_directory_segment(self):
        regex = build_capture_regex("/src/pages/*/index.js")
        assert extract_fragment(regex, "/src/pages/about-us/index.js") == "about-us"

    def test_regex_metacharacters_are_literal(self):
        regex = build_capture_regex("/a+b/(x)/[y]/*.min.js")
        assert extract_fragment(regex, "/a+b/(x)/[y]/app.min.js") == "app"

    def test_dot_does_not_match_any_character(self):
        regex = build_capture_regex("/src/*.js")
        with pytest.raises(CaptureMismatchError):
            extract_fragment(regex, "/src/appxjs")

    def test_empty_fragment(self):
        regex = build_capture_regex("/src/prefix*.js")
        assert extract_fragment(regex, "/src/prefix.js") == ""

    def test_mismatch_is_internal_consistency_error(self):
        regex = build_capture_regex("/x/*.js")
        with pytest.raises(CaptureMismatchError) as exc_info:
            extract_fragment(regex, "/y/a.js")
        assert exc_info.value.kind == ErrorKind.INTERNAL_CONSISTENCY
        assert exc_info.value.details["path"] == "/y/a.js"


# ---------------------------------------------------------------------------
# Sanitizer
# ---------------------------------------------------------------------------


class TestSanitizeName:
    def test_dashes_and_punctuation(self):
        assert sanitize_name("foo-bar!!baz") == "foo_bar_baz"

    def test_trims_underscores(self):
        assert sanitize_name("--a--") == "a"

    def test_plain_name_unchanged(self):
        assert sanitize_name("Button_2") == "Button_2"

    def test_collapses_underscore_runs(self):
        assert sanitize_name("a___b__c") == "a_b_c"

    def test_dots_and_spaces_removed(self):
        assert sanitize_name("my file.test") == "myfiletest"

    def test_removed_chars_between_underscores_collapse(self):
        assert sanitize_name("a_!_b") == "a_b"

    def test_non_ascii_removed(self):
        assert sanitize_name("café-menü") == "caf_men"

    def test_leading_digit_kept(self):
        assert sanitize_name("01-intro") == "01_intro"

    def test_nothing_alphanumeric_gives_empty(self):
        assert sanitize_name("--!!--") == ""

    @pytest.mark.parametrize("fragment", ["x", "a-b", "__init__", "v1.2.3", "$weird$name", "--a--"])
    def test_result_is_word_characters_without_edge_underscores(self, fragment):
        name = sanitize_name(fragment)
        assert name
        assert all(c.isascii() and (c.isalnum() or c == "_") for c in name)
        assert not name.startswith("_")
        assert not name.endswith("_")
        assert "__" not in name


class TestSplitAtWildcard:
    def test_splits_on_the_marker(self):
        assert split_at_wildcard("/src/./*.js") == ("/src/./", ".js")

    def test_last_marker_is_the_wildcard(self):
        """An earlier "*" can only come from the anchor directory."""
        assert split_at_wildcard("/odd*dir/./*.js") == ("/odd*dir/./", ".js")

    def test_regex_treats_anchor_star_literally(self):
        regex = build_capture_regex("/odd*dir/./*.js")
        assert extract_fragment(regex, "/odd*dir/./a.js") == "a"
        with pytest.raises(CaptureMismatchError):
            extract_fragment(regex, "/oddXdir/./a.js")
