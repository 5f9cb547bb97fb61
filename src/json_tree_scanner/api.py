"""Public one-shot functions for json-tree-scanner.

This module provides four user-facing functions for callers that hold a plain
tree and need a single lookup or edit: get_value, has_value, with_value and
without_value. Each call builds a fresh TreeScanner, so no state survives
between calls.

Reads borrow the caller's tree (no copy, no mutation). Writes work on a deep
clone and return it, leaving the caller's tree untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_tree_scanner.config import ScannerConfig
from json_tree_scanner.errors import Expected
from json_tree_scanner.scanner import TreeScanner

__all__ = ["get_value", "has_value", "with_value", "without_value"]


def get_value(
    tree: Mapping[str, Any],
    path: str,
    expected: Expected | None = None,
) -> Any:
    """Return the value at ``path`` in ``tree``, or None when absent.

    Args:
        tree:     Mapping to read from. Not copied and not modified.
        path:     Dotted path such as ``"person.skills[2].name"``.
        expected: Optional NodeKind or type the value must match. When given,
                  behaves like ``TreeScanner.get_as``.

    Returns:
        The stored value, or None.
    """
    scanner = TreeScanner.borrow(tree)  # type: ignore[arg-type]
    if expected is None:
        return scanner.get(path)
    return scanner.get_as(path, expected)


def has_value(tree: Mapping[str, Any], path: str) -> bool:
    """Return True if ``path`` addresses an existing slot in ``tree``."""
    return TreeScanner.borrow(tree).field_exists(path)  # type: ignore[arg-type]


def with_value(
    tree: Mapping[str, Any],
    path: str,
    value: Any,
    config: ScannerConfig | None = None,
) -> dict[str, Any]:
    """Return a deep copy of ``tree`` with ``value`` stored at ``path``.

    Args:
        tree:   Source mapping. Left unchanged.
        path:   Dotted path to write.
        value:  Value to store.
        config: Scanner settings. Defaults to ``ScannerConfig()`` when None.

    Returns:
        A new, independent tree.
    """
    return TreeScanner(tree, config=config).set(path, value).to_dict()


def without_value(tree: Mapping[str, Any], path: str) -> dict[str, Any]:
    """Return a deep copy of ``tree`` with ``path`` removed."""
    return TreeScanner(tree).remove(path).to_dict()
