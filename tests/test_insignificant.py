"""Unit tests for insignificant character handling.

WHY: The six transforms differ only at the edges and in their separators,
which is exactly where copy-and-paste implementations go wrong. Prepared
values are compared byte for byte, so every SPACE matters.

HOW: One test class per transform checks the empty-input law, plain
words, and edge conditionality. Property tests check idempotence, the
separator count, and that re-splitting the output gives back the words.

RULES:
- Transforms are called directly; no mapping or normalization runs here.
"""

import pytest

from ldap_stringprep.insignificant import (
    POLICIES,
    apply_handling,
    apply_numeric_string_handling,
    apply_space_handling,
    apply_space_handling_any,
    apply_space_handling_final,
    apply_space_handling_initial,
    apply_telephone_number_handling,
    remove_hyphens,
)
from ldap_stringprep.segment import split_words

from conftest import COMBINING_MARK as MARK
from conftest import HYPHEN_CHARACTERS

SAMPLE_VALUES = [
    "foo",
    "  foo  ",
    "foo bar",
    " a  b   c ",
    "a " + MARK + "b c",
    "  " + MARK + "x  y",
]


class TestEmptyInputLaws:
    """Each transform has a fixed output for a value with no words."""

    @pytest.mark.parametrize("value", ["", " ", "    "])
    def test_whole_value(self, value):
        assert apply_space_handling(value) == "  "

    @pytest.mark.parametrize("value", ["", " ", "    "])
    def test_substrings(self, value):
        assert apply_space_handling_initial(value) == " "
        assert apply_space_handling_final(value) == " "
        assert apply_space_handling_any(value) == " "

    @pytest.mark.parametrize("value", ["", " ", "    "])
    def test_numeric_and_telephone(self, value):
        assert apply_numeric_string_handling(value) == ""
        assert apply_telephone_number_handling(value) == ""


class TestWholeValue:
    """Attribute values: single SPACE at each edge, double SPACE inside."""

    def test_one_word(self):
        assert apply_space_handling("foo") == " foo "

    def test_strips_and_pads(self):
        assert apply_space_handling("   foo   ") == " foo "

    def test_two_words(self):
        assert apply_space_handling("foo bar") == " foo  bar "

    def test_collapses_runs(self):
        assert apply_space_handling("  foo     bar  baz ") == " foo  bar  baz "

    def test_keeps_space_with_combining_mark(self):
        assert apply_space_handling("a " + MARK + "b") == " a " + MARK + "b "

    def test_space_base_after_boundary(self):
        assert apply_space_handling("a  " + MARK) == " a   " + MARK + " "


class TestInitial:
    """Initial substrings: leading SPACE always, trailing only if present."""

    def test_no_trailing_space(self):
        assert apply_space_handling_initial("foo") == " foo"

    def test_trailing_space_kept(self):
        assert apply_space_handling_initial("foo ") == " foo "

    def test_trailing_spaces_collapse(self):
        assert apply_space_handling_initial("foo    ") == " foo "

    def test_leading_space_is_not_doubled(self):
        assert apply_space_handling_initial("   foo") == " foo"

    def test_interior_separator(self):
        assert apply_space_handling_initial("foo bar") == " foo  bar"

    def test_trailing_mark_is_not_a_space(self):
        assert apply_space_handling_initial("foo " + MARK) == " foo " + MARK


class TestFinal:
    """Final substrings: leading SPACE only if present, trailing always."""

    def test_no_leading_space(self):
        assert apply_space_handling_final("foo") == "foo "

    def test_leading_space_kept(self):
        assert apply_space_handling_final("  foo") == " foo "

    def test_interior_separator(self):
        assert apply_space_handling_final("foo bar") == "foo  bar "

    def test_leading_space_with_mark_is_not_an_edge(self):
        assert apply_space_handling_final(" " + MARK + "a") == " " + MARK + "a "


class TestAny:
    """Any substrings: both edges conditional on the original value."""

    @pytest.mark.parametrize("value,expected", [
        ("foo", "foo"),
        (" foo", " foo"),
        ("foo ", "foo "),
        ("  foo  ", " foo "),
        ("foo  bar", "foo  bar"),
        (" " + MARK + "a", " " + MARK + "a"),
    ])
    def test_edges(self, value, expected):
        assert apply_space_handling_any(value) == expected


class TestNumericString:
    """numericString handling drops every boundary SPACE."""

    def test_removes_spaces(self):
        assert apply_numeric_string_handling("123 456") == "123456"

    def test_removes_edge_spaces(self):
        assert apply_numeric_string_handling("  1 2  3 ") == "123"

    def test_keeps_space_with_combining_mark(self):
        value = "123 " + MARK + "456"
        assert apply_numeric_string_handling(value) == "".join(split_words(value))
        assert apply_numeric_string_handling(value) == value

    def test_keeps_punctuation(self):
        assert apply_numeric_string_handling("1.5 - 2") == "1.5-2"


class TestTelephoneNumber:
    """telephoneNumber handling drops spaces and free hyphens."""

    def test_hyphen_minus(self):
        assert apply_telephone_number_handling("1-800-555-0199") == "18005550199"

    def test_spaces_and_hyphens(self):
        assert apply_telephone_number_handling("+1 800 - 555-0199 ") == "+18005550199"

    @pytest.mark.parametrize("hyphen", HYPHEN_CHARACTERS)
    def test_every_hyphen_kind(self, hyphen):
        assert apply_telephone_number_handling("555" + hyphen + "0199") == "5550199"

    def test_hyphen_with_combining_mark_is_kept(self):
        value = "555-" + MARK + "0199"
        assert apply_telephone_number_handling(value) == value

    def test_lone_hyphen_word_is_dropped(self):
        assert apply_telephone_number_handling("555 - 0199") == "5550199"

    def test_only_hyphens(self):
        assert apply_telephone_number_handling("- -") == ""

    def test_trailing_hyphen(self):
        assert remove_hyphens("555-") == "555"


class TestPolicyTable:
    """apply_handling() dispatches through POLICIES."""

    def test_names(self):
        assert set(POLICIES) == {"value", "initial", "final", "any", "numeric", "telephone"}

    def test_dispatch_matches_entry_points(self):
        value = " foo bar "
        assert apply_handling(value, "value") == apply_space_handling(value)
        assert apply_handling(value, "initial") == apply_space_handling_initial(value)
        assert apply_handling(value, "final") == apply_space_handling_final(value)
        assert apply_handling(value, "any") == apply_space_handling_any(value)
        assert apply_handling(value, "numeric") == apply_numeric_string_handling(value)
        assert apply_handling(value, "telephone") == apply_telephone_number_handling(value)

    def test_unknown_handling(self):
        with pytest.raises(ValueError, match="Unknown handling 'middle'"):
            apply_handling("foo", "middle")


class TestProperties:
    """Structural properties of the whole-value canonical form."""

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_idempotent(self, value):
        once = apply_space_handling(value)
        assert apply_space_handling(once) == once

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_round_trip_words(self, value):
        assert split_words(apply_space_handling(value)) == split_words(value)

    @pytest.mark.parametrize("value", ["a", "a b", "a b c", " one  two three four "])
    def test_separator_count(self, value):
        words = split_words(value)
        out = apply_space_handling(value)
        assert out.startswith(" ") and not out.startswith("  ")
        assert out.endswith(" ") and not out.endswith("  ")
        assert out[1:-1].count("  ") == len(words) - 1
        assert out == " " + "  ".join(words) + " "
