"""Raw text helpers around the comparator.

Pasted text becomes a line list by splitting on ``"\\n"`` only; a
trailing ``"\\r"`` from Windows line endings stays on the line and is
handled as whitespace by the blank check and by trimming.  Results are
copied out as their items joined by ``"\\n"``, with no trailing newline.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["count_items", "join_lines", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split a pasted text blob into raw lines (``""`` gives ``[""]``)."""
    return text.split("\n")


def count_items(text: str) -> int:
    """Return the number of non-blank lines in ``text``."""
    return sum(1 for line in split_lines(text) if line.strip())


def join_lines(items: Iterable[str]) -> str:
    """Serialize result items in copy format."""
    return "\n".join(items)
