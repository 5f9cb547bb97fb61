"""pytest plugin for json-tree-scanner.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from json_tree_scanner import TreeScanner


@pytest.fixture(scope="session")
def assert_tree_value() -> Any:
    """Fixture that returns a callable asserting the value stored at a path.

    The fixture is session-scoped because the returned callable is stateless
    (each call borrows the given tree with a fresh TreeScanner).

    Usage in tests::

        def test_payload(assert_tree_value):
            assert_tree_value(payload, "person.skills[0].name", "Jump high")

        def test_missing(assert_tree_value):
            with pytest.raises(AssertionError, match=r"does not exist"):
                assert_tree_value({}, "person.name", "x")

    Returns:
        A callable ``_assert(tree, path, expected) -> None`` that raises
        ``AssertionError`` when ``path`` is missing or holds another value.
    """

    def _assert(tree: Mapping[str, Any], path: str, expected: Any) -> None:
        """Assert that ``tree`` holds ``expected`` at ``path``.

        Args:
            tree:     The mapping produced by the code under test.
            path:     Dotted path to check, e.g. ``"items[2].id"``.
            expected: The value that must be stored there.

        Raises:
            AssertionError: When the path does not exist or the stored value
                differs from ``expected``.
        """
        scanner = TreeScanner.borrow(tree)  # type: ignore[arg-type]
        if not scanner.field_exists(path):
            raise AssertionError(
                f"Path does not exist: {path!r}\n  expected: {expected!r}"
            )
        actual = scanner.get(path)
        if actual != expected:
            raise AssertionError(
                f"Value mismatch at {path!r}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
