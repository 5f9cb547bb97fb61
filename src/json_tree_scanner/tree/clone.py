"""Deep cloning of mapping/list trees.

``deep_clone`` recurses through mappings and lists only. Scalars and opaque
objects are returned as-is, so immutable values behave like copies while
mutable caller objects (a ``datetime``-like object with setters, a custom
class) remain shared between the clone and the source tree.

Cycles in the input are not supported.
"""

from __future__ import annotations

from typing import Any

from json_tree_scanner.tree.nodes import NodeKind, kind_of

__all__ = ["deep_clone"]


def deep_clone(node: Any) -> Any:
    """Return a storage-independent copy of ``node``.

    Args:
        node: A mapping, list or scalar value.

    Returns:
        A new ``dict`` (insertion order preserved) for mappings, a new ``list``
        for lists, or ``node`` itself for anything else.
    """
    kind = kind_of(node)
    if kind is NodeKind.MAPPING:
        return {key: deep_clone(value) for key, value in node.items()}
    if kind is NodeKind.LIST:
        return [deep_clone(item) for item in node]
    return node
