"""Line normalizer: turns a raw line into the key used for matching.

Three transforms are applied in a fixed order, each only when enabled:

1. Strip leading and trailing whitespace (``ignore_begin_end_spaces``).
2. Collapse every run of whitespace to one ASCII space
   (``ignore_extra_spaces``).
3. Lowercase (not ``case_sensitive``).

Whitespace follows Python's Unicode-aware ``\\s`` class and ``str.strip``,
so a non-breaking space is collapsed like any other blank.  That class
also includes the separators U+001C-U+001F and excludes U+FEFF, so a line
holding only ``"\\x1c"`` is blank while a lone byte-order mark is not.
Lowercasing uses ``str.lower`` rather than ``str.casefold``: "Straße" and
"STRASSE" stay distinct keys.
"""

from __future__ import annotations

import re

from list_diff.options import NormalizationOptions

__all__ = ["normalize"]

# Maximal run of whitespace characters (str pattern -> Unicode aware)
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize(line: str, options: NormalizationOptions) -> str:
    """Return the normalized key for ``line`` under ``options``.

    The key is only used for equality and grouping; it is never shown.
    Total over all strings: whitespace-only input yields ``""`` when
    trimming is on.

    Args:
        line:    A raw input line.
        options: The active normalization switches.

    Returns:
        The normalized key.
    """
    key = line

    if options.ignore_begin_end_spaces:
        key = key.strip()

    if options.ignore_extra_spaces:
        key = _WHITESPACE_RUN.sub(" ", key)

    if not options.case_sensitive:
        key = key.lower()

    return key
