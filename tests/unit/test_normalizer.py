"""Unit tests for text normalization."""

import itertools

import pytest

from docsafe.parsing.normalizer import normalize_text

SAMPLES = [
    "Hello  world ,test",
    "a ,b ;c :d !e ?f",
    "Trailing space before period .",
    "  line one  \n   line two\t\t\n",
    "zero\u200bwidth\u200b space",
    "Wait!?Really?!",
    "a , , b",
    "a ,.b",
    "a,\n b",
    ": :",
    "tabs\tand\t\tspaces   everywhere",
    "Fin de phrase ; puis : suite !",
    "",
    "   ",
    "\n\n",
    "no change needed.",
]


class TestNormalizeRules:
    """Tests for each normalization rule."""

    def test_collapses_spaces_and_fixes_comma(self) -> None:
        """Double space collapsed and space moved after the comma."""
        assert normalize_text("Hello  world ,test") == "Hello world, test"

    def test_removes_zero_width_spaces(self) -> None:
        assert normalize_text("ab\u200bc") == "abc"

    def test_collapses_tabs(self) -> None:
        assert normalize_text("a\t \tb") == "a b"

    def test_trims_around_newlines(self) -> None:
        assert normalize_text("one  \n  two") == "one\ntwo"

    @pytest.mark.parametrize("mark", [",", ";", ":", "!", "?"])
    def test_single_space_after_punctuation(self, mark: str) -> None:
        assert normalize_text(f"a {mark}b") == f"a{mark} b"

    def test_no_space_before_period(self) -> None:
        assert normalize_text("The end .") == "The end."

    def test_trims_whole_string(self) -> None:
        assert normalize_text("  padded  ") == "padded"

    def test_trailing_punctuation_has_no_trailing_space(self) -> None:
        assert normalize_text("Really ?") == "Really?"

    def test_empty_string_is_returned_unchanged(self) -> None:
        assert normalize_text("") == ""


class TestNormalizeIdempotence:
    """Normalizing already-normalized text changes nothing."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_normalizing_twice_equals_once(self, text: str) -> None:
        once = normalize_text(text)

        assert normalize_text(once) == once

    def test_idempotent_for_all_short_combinations(self) -> None:
        """Every string of up to four characters from a punctuation-heavy alphabet."""
        alphabet = ["a", " ", "\t", "\n", ",", ";", ".", "!", "?", "\u200b"]
        failures = []
        for length in range(1, 5):
            for chars in itertools.product(alphabet, repeat=length):
                once = normalize_text("".join(chars))
                if normalize_text(once) != once:
                    failures.append("".join(chars))

        assert failures == []
