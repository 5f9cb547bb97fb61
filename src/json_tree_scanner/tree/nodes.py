"""NodeKind StrEnum and runtime classification of tree values.

A scanned tree is made of three kinds of node: mappings, ordered lists and
everything else. ``kind_of`` converts a raw Python value into one of these
tags once, so the scanner dispatches on ``NodeKind`` instead of scattering
``isinstance`` checks through every operation.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any


class NodeKind(StrEnum):
    """Enumeration of the three structural node kinds in a scanned tree.

    - MAPPING -> "mapping" : any ``collections.abc.Mapping`` (usually ``dict``)
    - LIST    -> "list"    : a Python ``list``; ``None`` items are real slots
    - SCALAR  -> "scalar"  : anything else, including ``None`` and tuples
    """

    MAPPING = auto()
    LIST = auto()
    SCALAR = auto()


def kind_of(value: Any) -> NodeKind:
    """Classify ``value`` as a MAPPING, LIST or SCALAR node.

    Only ``list`` counts as LIST. Tuples, strings and other sequences are
    opaque scalars and are never indexed into.
    """
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, list):
        return NodeKind.LIST
    return NodeKind.SCALAR
