"""List diff - set comparison of two lists of text lines."""

from __future__ import annotations

from list_diff.api import compare, compare_text, normalize
from list_diff.comparator import ListComparator
from list_diff.options import NormalizationOptions
from list_diff.result import ComparisonResult
from list_diff.text import count_items, join_lines, split_lines

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonResult",
    "ListComparator",
    "NormalizationOptions",
    "compare",
    "compare_text",
    "count_items",
    "join_lines",
    "normalize",
    "split_lines",
]
