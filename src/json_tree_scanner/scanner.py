"""TreeScanner: dotted-path get/set/remove/exists over nested mappings and lists.

A ``TreeScanner`` wraps one root mapping and resolves paths such as
``"person.skills[2].name"`` one segment at a time: the head segment is parsed
into an ``Attribute``, the value under its key is inspected, and when more
path remains the scanner wraps the child mapping in a *borrowed* scanner and
recurses.

Ownership:
- A top-level scanner (``TreeScanner(data)``) owns a deep clone of ``data``.
  Nothing the caller does to ``data`` afterwards reaches the scanner, and
  nothing the scanner does reaches ``data``.
- A borrowed scanner (``TreeScanner.borrow``, ``sub_scanner`` and every
  internal recursion step) aliases a mapping that lives inside someone
  else's storage. Writes through it are visible through the owner. Borrowing
  never copies, so recursion costs nothing per level.

Missing-ness is tolerated everywhere: absent keys, ``None`` values and
out-of-bounds indices read as ``None``, are created on write, and are
skipped on remove. Shape confusion (a list where a mapping is needed, and so
on) always raises ``TypeMismatchError``.

Scanners are not thread-safe. Two scanners that share storage must not be
used concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from enum import StrEnum, auto
from typing import Any

from json_tree_scanner.config import ScannerConfig
from json_tree_scanner.errors import (
    AccessMode,
    Expected,
    InvalidArgumentError,
    InvalidPathError,
    TypeMismatchError,
)
from json_tree_scanner.path.attribute import Attribute, StepKind
from json_tree_scanner.path.parser import PathParser
from json_tree_scanner.tree.clone import deep_clone
from json_tree_scanner.tree.nodes import NodeKind, kind_of

__all__ = ["Ownership", "TreeScanner"]

logger = logging.getLogger(__name__)


class Ownership(StrEnum):
    """How a scanner holds its root mapping.

    - OWNED    -> "owned"    : private deep clone, never aliases caller data
    - BORROWED -> "borrowed" : live view into storage owned elsewhere
    """

    OWNED = auto()
    BORROWED = auto()


class TreeScanner:
    """Read and write a nested mapping/list tree through dotted paths.

    Example::

        from json_tree_scanner import TreeScanner

        scanner = TreeScanner({"person": {"skills": [{"name": "Run fast"}]}})
        scanner.get("person.skills[0].name")          # "Run fast"
        scanner.set("person.skills[2].name", "Swim")  # skills[1] becomes None
        scanner.remove("person.skills[].name")        # drops "name" from each item
        scanner.to_dict()                             # independent deep copy
    """

    __slots__ = ("_config", "_data", "_ownership", "_parser")

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        config: ScannerConfig | None = None,
    ) -> None:
        """Create an owning scanner.

        Args:
            data:   Source tree. A deep clone is stored, so ``data`` itself
                    is never modified. None starts from an empty mapping.
            config: Scanner settings. Defaults to ``ScannerConfig()``.

        Raises:
            InvalidArgumentError: If ``data`` is neither a mapping nor None.
        """
        if data is not None and kind_of(data) is not NodeKind.MAPPING:
            msg = f'"data" must be a mapping or None, got {type(data).__name__}'
            raise InvalidArgumentError(msg)
        self._config = config or ScannerConfig()
        self._parser = PathParser(self._config.cache_size)
        self._ownership = Ownership.OWNED
        self._data: MutableMapping[str, Any] = (
            deep_clone(data) if data is not None else {}
        )

    @classmethod
    def borrow(
        cls,
        data: MutableMapping[str, Any],
        *,
        config: ScannerConfig | None = None,
    ) -> TreeScanner:
        """Create a scanner that works directly on ``data`` without copying it.

        Every ``set``/``remove`` through the returned scanner mutates ``data``.

        Raises:
            InvalidArgumentError: If ``data`` is not a mapping.
        """
        if kind_of(data) is not NodeKind.MAPPING:
            msg = f'"data" must be a mapping, got {type(data).__name__}'
            raise InvalidArgumentError(msg)
        config = config or ScannerConfig()
        return cls._view_of(data, config, PathParser(config.cache_size))

    @classmethod
    def _view_of(
        cls,
        data: MutableMapping[str, Any],
        config: ScannerConfig,
        parser: PathParser,
    ) -> TreeScanner:
        scanner = cls.__new__(cls)
        scanner._config = config
        scanner._parser = parser
        scanner._ownership = Ownership.BORROWED
        scanner._data = data
        return scanner

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ScannerConfig:
        """Settings shared with every scanner derived from this one."""
        return self._config

    @property
    def ownership(self) -> Ownership:
        """Whether this scanner owns its root mapping or borrows it."""
        return self._ownership

    @property
    def owns_storage(self) -> bool:
        return self._ownership is Ownership.OWNED

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def get(self, path: str) -> Any:
        """Return the value stored at ``path``, or None when it does not exist.

        ``"name[]"`` returns the whole list, ``"name[n]"`` a single item.

        Raises:
            TypeMismatchError: If the path descends through a node of the
                wrong shape (e.g. ``"nums.x"`` where ``nums`` is a list).
            InvalidPathError: If the path continues past ``name[]``.
        """
        attribute = self._parser.parse(path)
        if attribute.name not in self._data:
            return None
        value = self._data[attribute.name]

        if attribute.kind is StepKind.SCALAR:
            return value
        if attribute.kind is StepKind.MAP_FIELD:
            if value is None:
                return None
            return self._child(attribute.name, attribute, value, AccessMode.READ).get(
                attribute.remainder or ""
            )
        return self._get_from_list(attribute, value)

    def get_as(self, path: str, expected: Expected | None) -> Any:
        """Return the value at ``path`` after checking its shape.

        Args:
            path:     Dotted path to read.
            expected: A ``NodeKind`` to compare against ``kind_of(value)``, or
                      a type / tuple of types for an ``isinstance`` check.

        Returns:
            The value, or None when nothing is stored at ``path``. The shape
            check is skipped for None.

        Raises:
            InvalidArgumentError: If ``expected`` is None.
            TypeMismatchError: If the value does not have the expected shape.
        """
        if expected is None:
            raise InvalidArgumentError('"expected" argument is mandatory.')
        value = self.get(path)
        if value is None:
            return None
        if isinstance(expected, NodeKind):
            matches = kind_of(value) is expected
        else:
            matches = isinstance(value, expected)
        if not matches:
            path = path.strip()
            raise TypeMismatchError(path, path, expected, value, AccessMode.READ)
        return value

    def set(self, path: str, value: Any) -> TreeScanner:
        """Store ``value`` at ``path``, creating missing mappings and lists.

        List indices beyond the end pad the list with ``None``:
        ``set("a[5]", "x")`` on an empty scanner leaves ``[None] * 5 + ["x"]``
        under ``"a"``. ``"name[]"`` appends.

        ``value`` is stored as given, not cloned.

        Returns:
            This scanner, so calls can be chained.

        Raises:
            TypeMismatchError: If an existing node on the path has the wrong
                shape.
            InvalidPathError: If a list index exceeds ``config.max_index``.
        """
        attribute = self._parser.parse(path)
        if attribute.kind is StepKind.SCALAR:
            self._data[attribute.name] = value
        elif attribute.kind is StepKind.MAP_FIELD:
            self._data[attribute.name] = self._set_inner(
                attribute.name, attribute, self._data.get(attribute.name), value
            )
        else:
            self._set_into_list(attribute, value)
        return self

    def remove(self, path: str) -> TreeScanner:
        """Remove the field, list or list item at ``path``.

        Removing something that does not exist is a no-op and never creates
        intermediate nodes. ``"name[].field"`` removes ``field`` from every
        mapping item of the list. Removing a nested field leaves its parent
        mapping in place, even if it ends up empty.

        Returns:
            This scanner, so calls can be chained.

        Raises:
            TypeMismatchError: If an existing node on the path has the wrong
                shape.
        """
        attribute = self._parser.parse(path)
        if attribute.name not in self._data:
            return self

        if attribute.kind is StepKind.SCALAR:
            del self._data[attribute.name]
        elif attribute.kind is StepKind.MAP_FIELD:
            child = self._data[attribute.name]
            if child is not None:
                self._child(
                    attribute.name, attribute, child, AccessMode.WRITE
                ).remove(attribute.remainder or "")
        else:
            self._remove_from_list(attribute)
        return self

    def field_exists(self, path: str) -> bool:
        """Return True if ``path`` addresses an existing slot.

        A key holding None exists; so does an in-bounds list slot holding
        None. ``"name[]"`` exists whenever the key is present.

        Raises:
            TypeMismatchError: If the path descends through a node of the
                wrong shape.
            InvalidPathError: If the path continues past ``name[]``.
        """
        attribute = self._parser.parse(path)
        if attribute.name not in self._data:
            return False
        if attribute.kind is StepKind.SCALAR:
            return True
        if attribute.kind is StepKind.LIST_FIELD and attribute.index is None:
            if attribute.remainder is None:
                return True
            raise InvalidPathError(attribute.name, attribute.path)

        value = self._data[attribute.name]
        if value is None:
            return False
        if attribute.kind is StepKind.MAP_FIELD:
            return self._child(
                attribute.name, attribute, value, AccessMode.READ
            ).field_exists(attribute.remainder or "")

        items = self._expect_list(attribute, value, AccessMode.READ)
        index = attribute.index
        if index >= len(items):
            return False
        if attribute.remainder is None:
            return True
        item = items[index]
        if item is None:
            return False
        return self._child(
            attribute.label, attribute, item, AccessMode.READ
        ).field_exists(attribute.remainder)

    def sub_scanner(self, path: str) -> TreeScanner:
        """Return a borrowed scanner over the mapping at ``path``.

        The mapping (and any missing ancestors) is created when absent.
        Changes made through the returned scanner show up in this one::

            scanner.sub_scanner("person").set("firstName", "John")
            # same as scanner.set("person.firstName", "John")

        Raises:
            TypeMismatchError: If ``path`` holds something other than a
                mapping.
        """
        node = self.get_as(path, NodeKind.MAPPING)
        if node is None:
            node = {}
            self.set(path, node)
        return self._view_of(node, self._config, self._parser)

    def to_dict(self) -> dict[str, Any]:
        """Export a deep copy of the scanner's contents.

        The copy is independent: mutating it never affects the scanner.
        """
        exported: dict[str, Any] = deep_clone(self._data)
        return exported

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.field_exists(path)

    def __repr__(self) -> str:
        return f"TreeScanner(ownership={self._ownership!s}, keys={list(self._data)!r})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _child(
        self, field: str, attribute: Attribute, value: Any, mode: AccessMode
    ) -> TreeScanner:
        """Borrow ``value`` as a scanner, insisting that it is a mapping."""
        if kind_of(value) is not NodeKind.MAPPING:
            raise TypeMismatchError(
                field, attribute.path, NodeKind.MAPPING, value, mode
            )
        return self._view_of(value, self._config, self._parser)

    def _expect_list(
        self, attribute: Attribute, value: Any, mode: AccessMode
    ) -> list[Any]:
        if kind_of(value) is not NodeKind.LIST:
            raise TypeMismatchError(
                attribute.name, attribute.path, NodeKind.LIST, value, mode
            )
        items: list[Any] = value
        return items

    def _get_from_list(self, attribute: Attribute, value: Any) -> Any:
        if value is None:
            return None
        items = self._expect_list(attribute, value, AccessMode.READ)
        index = attribute.index
        if index is not None and index >= len(items):
            return None

        if attribute.remainder is None:
            return items if index is None else items[index]
        if index is None:
            raise InvalidPathError(attribute.name, attribute.path)

        item = items[index]
        if item is None:
            return None
        return self._child(attribute.label, attribute, item, AccessMode.READ).get(
            attribute.remainder
        )

    def _set_inner(
        self, field: str, attribute: Attribute, current: Any, value: Any
    ) -> MutableMapping[str, Any]:
        """Set ``attribute.remainder`` inside ``current`` (a new dict when None)."""
        if current is None:
            logger.debug("Creating mapping %r while setting %r", field, attribute.path)
            current = {}
        self._child(field, attribute, current, AccessMode.WRITE).set(
            attribute.remainder or "", value
        )
        mapping: MutableMapping[str, Any] = current
        return mapping

    def _set_into_list(self, attribute: Attribute, value: Any) -> None:
        index = attribute.index
        max_index = self._config.max_index
        if index is not None and max_index is not None and index > max_index:
            raise InvalidPathError(
                attribute.label,
                attribute.path,
                f'Index {index} of field "{attribute.name}" in path '
                f'"{attribute.path}" exceeds the maximum of {max_index}',
            )

        items = self._data.get(attribute.name)
        if items is None:
            logger.debug("Creating list %r while setting %r", attribute.name, attribute.path)
            items = []
        else:
            items = self._expect_list(attribute, items, AccessMode.WRITE)

        item = value
        if attribute.remainder is not None:
            # Reuse the existing item so its other fields survive.
            current = items[index] if index is not None and index < len(items) else None
            item = self._set_inner(attribute.label, attribute, current, value)

        if index is None:
            items.append(item)
        elif index < len(items):
            items[index] = item
        else:
            logger.debug(
                "Growing list %r from %d to %d items", attribute.name, len(items), index + 1
            )
            items.extend([None] * (index - len(items)))
            items.append(item)
        self._data[attribute.name] = items

    def _remove_from_list(self, attribute: Attribute) -> None:
        value = self._data[attribute.name]
        if value is not None:
            self._expect_list(attribute, value, AccessMode.WRITE)

        index = attribute.index
        if index is None and attribute.remainder is None:
            del self._data[attribute.name]
            return
        if value is None:
            return

        items: list[Any] = value
        if index is None:
            for item in items:
                # Non-mapping items cannot hold the field; treat as not found.
                if kind_of(item) is NodeKind.MAPPING:
                    self._view_of(item, self._config, self._parser).remove(
                        attribute.remainder or ""
                    )
            return
        if index >= len(items):
            return
        if attribute.remainder is None:
            del items[index]
            return
        item = items[index]
        if item is not None:
            self._child(attribute.label, attribute, item, AccessMode.WRITE).remove(
                attribute.remainder
            )
