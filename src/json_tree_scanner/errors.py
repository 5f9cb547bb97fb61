"""Exception types raised by json-tree-scanner.

Missing keys, ``None`` values, out-of-bounds indices and missing
intermediate nodes are never errors. What is reported:

- ``TypeMismatchError``: the node found at a path is not the shape the
  operation needs (a mapping expected but a list found, and so on).
- ``InvalidPathError``: the path continues past a list field without an
  index, or uses an index beyond the configured limit.
- ``InvalidArgumentError``: a required argument is missing or unusable.

All three derive from ``ScannerError`` and from the matching builtin
(``TypeError`` / ``ValueError``) so callers can catch either.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from json_tree_scanner.tree.nodes import NodeKind, kind_of

__all__ = [
    "AccessMode",
    "InvalidArgumentError",
    "InvalidPathError",
    "ScannerError",
    "TypeMismatchError",
]

# What a value was expected to be: a node kind, a type, or a tuple of types.
Expected = NodeKind | type | tuple[type, ...]

_ARTICLES = {NodeKind.MAPPING: "a mapping", NodeKind.LIST: "a list"}


class AccessMode(StrEnum):
    """Whether the failing operation was reading or writing."""

    READ = auto()
    WRITE = auto()


def _describe_expected(expected: Expected) -> str:
    if isinstance(expected, NodeKind):
        return _ARTICLES.get(expected, "a scalar")
    if isinstance(expected, tuple):
        return "one of " + ", ".join(t.__name__ for t in expected)
    return f"an instance of {expected.__name__}"


class ScannerError(Exception):
    """Base class for every error raised by the scanner."""


class TypeMismatchError(ScannerError, TypeError):
    """A node does not have the shape the operation requires.

    Attributes:
        field:    Name of the offending step, ``name[index]`` for list items.
        path:     Path being resolved when the mismatch was found.
        expected: The NodeKind (or Python type) the operation required.
        actual:   The value actually found.
        mode:     ``AccessMode.READ`` or ``AccessMode.WRITE``.
    """

    def __init__(
        self,
        field: str,
        path: str,
        expected: Expected,
        actual: Any,
        mode: AccessMode = AccessMode.READ,
    ) -> None:
        self.field = field
        self.path = path
        self.expected = expected
        self.actual = actual
        self.mode = mode
        preposition = "into" if mode is AccessMode.WRITE else "from"
        super().__init__(
            f'Field "{field}" was expected to be {_describe_expected(expected)}, '
            f"but got {type(actual).__name__} when trying to {mode} a value "
            f'{preposition} "{path}"'
        )

    @property
    def actual_kind(self) -> NodeKind:
        """NodeKind of the value that was found."""
        return kind_of(self.actual)


class InvalidPathError(ScannerError, ValueError):
    """The path cannot be followed as written.

    Attributes:
        field: Name of the step that made the path unusable.
        path:  Path being resolved when the problem was found.
    """

    def __init__(self, field: str, path: str, message: str | None = None) -> None:
        self.field = field
        self.path = path
        super().__init__(
            message
            or (
                f'Field "{field}" in path "{path}" is an array, but the index was '
                "not specified. Cannot continue through path without an index"
            )
        )


class InvalidArgumentError(ScannerError, ValueError):
    """A required argument was not supplied or has an unusable value."""
