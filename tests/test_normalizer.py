"""Tests for normalize().

Covers:
- Each transform in isolation (trim, whitespace collapse, lowercase)
- Fixed transform order: trim -> collapse -> lowercase
- Unicode whitespace (NBSP, tabs) in trimming and collapsing
- Totality: empty and whitespace-only input
- Idempotence for every options combination
"""

from __future__ import annotations

import itertools

import pytest

from list_diff.normalizer import normalize
from list_diff.options import NormalizationOptions

ALL_OPTIONS = [
    NormalizationOptions(
        case_sensitive=cs,
        ignore_begin_end_spaces=trim,
        ignore_extra_spaces=collapse,
    )
    for cs, trim, collapse in itertools.product([False, True], repeat=3)
]

SAMPLES = [
    "",
    " ",
    "\t\n",
    "apple",
    "  Apple  ",
    "a  b",
    " A \t B ",
    "\u00a0Café\u00a0 Noir ",
    "Straße",
    "İstanbul",
    "x\r",
]

RAW = NormalizationOptions(
    case_sensitive=True, ignore_begin_end_spaces=False, ignore_extra_spaces=False
)

# ---------------------------------------------------------------------------
# Individual transforms
# ---------------------------------------------------------------------------


class TestTransforms:
    def test_all_off_is_identity(self) -> None:
        assert normalize("  A  b ", RAW) == "  A  b "

    def test_trim_strips_edges_only(self) -> None:
        options = NormalizationOptions(case_sensitive=True)
        assert normalize("  A  b ", options) == "A  b"

    def test_trim_strips_tabs_and_carriage_return(self) -> None:
        options = NormalizationOptions(case_sensitive=True)
        assert normalize("\tA\r", options) == "A"

    def test_collapse_replaces_runs_with_single_space(self) -> None:
        options = NormalizationOptions(
            case_sensitive=True,
            ignore_begin_end_spaces=False,
            ignore_extra_spaces=True,
        )
        assert normalize("a \t\t b", options) == "a b"

    def test_lowercase_when_case_insensitive(self) -> None:
        options = NormalizationOptions(ignore_begin_end_spaces=False)
        assert normalize("ApPlE", options) == "apple"

    def test_case_sensitive_keeps_case(self) -> None:
        options = NormalizationOptions(case_sensitive=True)
        assert normalize("ApPlE", options) == "ApPlE"

    def test_lowercase_is_not_casefold(self) -> None:
        options = NormalizationOptions()
        assert normalize("STRASSE", options) != normalize("Straße", options)


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------


class TestOrder:
    def test_collapse_without_trim_leaves_single_edge_spaces(self) -> None:
        options = NormalizationOptions(
            ignore_begin_end_spaces=False, ignore_extra_spaces=True
        )
        assert normalize("   A   B   ", options) == " a b "

    def test_trim_then_collapse_leaves_no_edge_space(self) -> None:
        options = NormalizationOptions(ignore_extra_spaces=True)
        assert normalize("   A   B   ", options) == "a b"


# ---------------------------------------------------------------------------
# Unicode whitespace
# ---------------------------------------------------------------------------


class TestUnicodeWhitespace:
    def test_nbsp_is_trimmed(self) -> None:
        assert normalize("\u00a0apple\u00a0", NormalizationOptions()) == "apple"

    def test_nbsp_is_collapsed(self) -> None:
        options = NormalizationOptions(ignore_extra_spaces=True)
        assert normalize("a\u00a0\u00a0b", options) == "a b"

    def test_mixed_whitespace_run_becomes_one_ascii_space(self) -> None:
        options = NormalizationOptions(ignore_extra_spaces=True)
        assert normalize("a \u00a0\t\u2003b", options) == "a b"


# ---------------------------------------------------------------------------
# Totality and idempotence
# ---------------------------------------------------------------------------


class TestTotality:
    def test_empty_string(self) -> None:
        assert normalize("", NormalizationOptions()) == ""

    def test_whitespace_only_with_trim_is_empty(self) -> None:
        assert normalize(" \t ", NormalizationOptions()) == ""

    def test_whitespace_only_without_trim_collapses(self) -> None:
        options = NormalizationOptions(
            ignore_begin_end_spaces=False, ignore_extra_spaces=True
        )
        assert normalize(" \t ", options) == " "


class TestIdempotence:
    @pytest.mark.parametrize("options", ALL_OPTIONS)
    @pytest.mark.parametrize("line", SAMPLES)
    def test_normalize_twice_equals_once(
        self, line: str, options: NormalizationOptions
    ) -> None:
        once = normalize(line, options)
        assert normalize(once, options) == once
