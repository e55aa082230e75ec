"""Public API functions for list-diff.

``compare`` works on line lists, ``compare_text`` on raw pasted text.
Each call creates a fresh ListComparator, so there is no state shared
between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from list_diff.comparator import ListComparator
from list_diff.normalizer import normalize
from list_diff.options import NormalizationOptions
from list_diff.result import ComparisonResult
from list_diff.text import split_lines

__all__ = ["compare", "compare_text", "normalize"]


def compare(
    list_a: Iterable[str],
    list_b: Iterable[str],
    options: NormalizationOptions | None = None,
) -> ComparisonResult:
    """Compare two line lists and return a ComparisonResult.

    Args:
        list_a:  Lines of list A.
        list_b:  Lines of list B.
        options: Normalization switches.  Defaults to
                 ``NormalizationOptions()`` when None.

    Returns:
        A ``ComparisonResult`` with a_only, b_only, intersection and union.
    """
    return ListComparator(options=options).compare(list_a, list_b)


def compare_text(
    text_a: str,
    text_b: str,
    options: NormalizationOptions | None = None,
) -> ComparisonResult:
    """Split two pasted text blobs into lines and compare them.

    Args:
        text_a:  Raw text of list A, one item per line.
        text_b:  Raw text of list B, one item per line.
        options: Normalization switches.  Defaults to
                 ``NormalizationOptions()`` when None.

    Returns:
        The same ``ComparisonResult`` as ``compare`` on the split lines.
    """
    return compare(split_lines(text_a), split_lines(text_b), options=options)
