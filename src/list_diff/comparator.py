"""ListComparator: the set comparison of two line lists.

Each list is first reduced to an insertion-ordered mapping from normalized
key to the first original line that produced it.  Blank lines are dropped
here, using an unconditional ``strip()`` test on the raw line, regardless
of ``ignore_begin_end_spaces``.  The two mappings are then walked in
order:

- A's mapping yields ``intersection`` (key also in B) or ``a_only``, and
  every entry goes to ``union``.
- B's mapping yields ``b_only`` for keys absent from A, which are also
  appended to ``union``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from list_diff.normalizer import normalize
from list_diff.options import NormalizationOptions
from list_diff.result import ComparisonResult

__all__ = ["ListComparator"]

logger = logging.getLogger(__name__)


class ListComparator:
    """Compares two lists of text lines by normalized key.

    The comparator only holds its (immutable) options, so one instance can
    be reused and shared freely; every ``compare()`` call builds a fresh
    ``ComparisonResult``.

    Example::

        from list_diff.comparator import ListComparator

        cmp = ListComparator()
        result = cmp.compare(["apple", "banana"], ["Banana", "cherry"])
        print(result.a_only)         # ["apple"]
        print(result.intersection)   # ["banana"]
    """

    def __init__(self, options: NormalizationOptions | None = None) -> None:
        """Initialise the comparator.

        Args:
            options: Normalization switches.  Defaults to
                ``NormalizationOptions()`` when None.
        """
        self._options: NormalizationOptions = (
            options if options is not None else NormalizationOptions()
        )

    @property
    def options(self) -> NormalizationOptions:
        """The normalization switches applied by ``compare()``."""
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        list_a: Iterable[str],
        list_b: Iterable[str],
    ) -> ComparisonResult:
        """Compare two line lists and return their set relationships.

        Never raises for string input; two empty lists give four empty
        result lists.

        Args:
            list_a: Lines of list A, in their original order.
            list_b: Lines of list B, in their original order.

        Returns:
            A ``ComparisonResult`` with ``a_only``, ``b_only``,
            ``intersection`` and ``union`` populated.
        """
        index_a = self._index(list_a, "A")
        index_b = self._index(list_b, "B")

        a_only: list[str] = []
        b_only: list[str] = []
        intersection: list[str] = []
        union: list[str] = []

        for key, original in index_a.items():
            if key in index_b:
                intersection.append(original)
            else:
                a_only.append(original)
            union.append(original)

        for key, original in index_b.items():
            if key not in index_a:
                b_only.append(original)
                union.append(original)

        logger.debug(
            "compared %d/%d distinct items: a_only=%d b_only=%d "
            "intersection=%d union=%d",
            len(index_a),
            len(index_b),
            len(a_only),
            len(b_only),
            len(intersection),
            len(union),
        )

        return ComparisonResult(
            a_only=a_only,
            b_only=b_only,
            intersection=intersection,
            union=union,
        )

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _index(self, lines: Iterable[str], label: str) -> dict[str, str]:
        """Map each normalized key to its first original line.

        Args:
            lines: Raw lines of one list.
            label: List name used in debug logging.

        Returns:
            Insertion-ordered dict of normalized key -> representative.
        """
        index: dict[str, str] = {}
        blank = 0
        for line in lines:
            if not line.strip():
                blank += 1
                continue
            index.setdefault(normalize(line, self._options), line)
        logger.debug(
            "list %s: %d distinct keys, %d blank lines skipped",
            label,
            len(index),
            blank,
        )
        return index
