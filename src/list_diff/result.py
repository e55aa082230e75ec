"""ComparisonResult dataclass for list comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SECTION_TITLES", "ComparisonResult"]

# Display titles, in display order
SECTION_TITLES: tuple[str, str, str, str] = ("A only", "A ∩ B", "B only", "A ∪ B")


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Every list holds original (non-normalized) text, with at most one entry
    per normalized key.

    Attributes:
        a_only: Representatives of keys found only in list A, in A's order.
        b_only: Representatives of keys found only in list B, in B's order.
        intersection: A's representatives of keys found in both lists, in
            A's order.
        union: All of A's representatives in A's order, followed by the
            ``b_only`` entries in B's order.
    """

    a_only: list[str]
    b_only: list[str]
    intersection: list[str]
    union: list[str]

    def sections(self) -> list[tuple[str, list[str]]]:
        """Return ``(title, items)`` pairs in display order."""
        return list(
            zip(
                SECTION_TITLES,
                (self.a_only, self.intersection, self.b_only, self.union),
                strict=True,
            )
        )

    def counts(self) -> dict[str, int]:
        """Return the number of items per section title."""
        return {title: len(items) for title, items in self.sections()}
