"""Dotted-path parsing into Attribute steps, with an LRU-backed parser cache.

Grammar::

    path    := segment ('.' segment)*
    segment := name ('[' digits? ']')?

Parsing is total: any string yields an ``Attribute``. A bracket segment that
does not fit the grammar (empty name as in ``"[0]"``, non-numeric index as in
``"list[5a]"``) is kept verbatim and used as a literal mapping key.

``PathParser`` memoizes parse results per path string. Each instance owns
its own ``LRUCache``; there is no module-level shared cache.
"""

from __future__ import annotations

import logging
import re

from cachetools import LRUCache

from json_tree_scanner.path.attribute import Attribute, StepKind

__all__ = ["PathParser", "parse_attribute"]

logger = logging.getLogger(__name__)

# Non-empty name, then ASCII digits (or nothing) between brackets.
_LIST_SEGMENT = re.compile(r"(?P<name>[^\[]+)\[(?P<index>[0-9]*)\]")


def parse_attribute(path: str) -> Attribute:
    """Parse the head segment of ``path``.

    Args:
        path: A dotted path such as ``"person.skills[2].name"``.

    Returns:
        The ``Attribute`` describing the first segment. ``remainder`` holds
        the rest of the path (trimmed), or None when nothing but whitespace
        follows the first ``.``.
    """
    path = path.strip()
    head, dot, tail = path.partition(".")
    head = head.strip()
    remainder = tail.strip() if dot and tail.strip() else None

    match = _LIST_SEGMENT.fullmatch(head)
    if match is not None:
        digits = match.group("index")
        return Attribute(
            path=path,
            name=match.group("name"),
            kind=StepKind.LIST_FIELD,
            index=int(digits) if digits else None,
            remainder=remainder,
        )

    if remainder is not None:
        return Attribute(
            path=path, name=head, kind=StepKind.MAP_FIELD, remainder=remainder
        )
    return Attribute(path=path, name=head, kind=StepKind.SCALAR)


class PathParser:
    """Caching front-end for ``parse_attribute``.

    ``Attribute`` is frozen, so cached instances are shared freely between
    every scanner that uses the same parser.

    Args:
        cache_size: Maximum number of parsed paths to keep. ``0`` disables
            caching entirely.
    """

    def __init__(self, cache_size: int = 256) -> None:
        self._cache: LRUCache[str, Attribute] | None = (
            LRUCache(maxsize=cache_size) if cache_size > 0 else None
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of parsed paths this parser can hold."""
        return int(self._cache.maxsize) if self._cache is not None else 0

    @property
    def curr_size(self) -> int:
        """The current number of parsed paths held in the cache."""
        return int(self._cache.currsize) if self._cache is not None else 0

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, path: str) -> Attribute:
        """Return the head ``Attribute`` of ``path``, from cache when possible."""
        if self._cache is None:
            return parse_attribute(path)
        attribute = self._cache.get(path)
        if attribute is None:
            logger.debug("Parsing path %r", path)
            attribute = parse_attribute(path)
            self._cache[path] = attribute
        return attribute

    def clear(self) -> None:
        """Drop every cached parse result."""
        if self._cache is not None:
            self._cache.clear()
