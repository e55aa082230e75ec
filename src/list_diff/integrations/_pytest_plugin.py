"""pytest plugin for list-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from list_diff import NormalizationOptions, compare


@pytest.fixture(scope="session")
def assert_same_items() -> Any:
    """Fixture that returns a callable line-set equality asserter.

    Session-scoped: the returned callable is stateless.

    Usage in tests::

        def test_export(assert_same_items):
            assert_same_items(["b", "A"], ["a", "b"])

        def test_missing_row(assert_same_items):
            with pytest.raises(AssertionError, match=r"a_only"):
                assert_same_items(["a", "b"], ["a"])

    Returns:
        A callable ``_assert(actual, expected, options=None) -> None`` that
        raises ``AssertionError`` when the two lists differ by normalized
        key (order and duplicates are ignored).
    """

    def _assert(
        actual: Iterable[str],
        expected: Iterable[str],
        options: NormalizationOptions | None = None,
    ) -> None:
        result = compare(actual, expected, options=options)
        if result.a_only or result.b_only:
            raise AssertionError(
                f"line lists differ: "
                f"{len(result.a_only)} only in actual, "
                f"{len(result.b_only)} only in expected\n"
                f"  a_only: {result.a_only}\n"
                f"  b_only: {result.b_only}"
            )

    return _assert
