"""Attribute dataclass and StepKind StrEnum for parsed path steps.

An ``Attribute`` describes the head segment of a dotted path: which key it
names, how the scanner must treat the value stored under that key, an
optional list index, and the unparsed rest of the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class StepKind(StrEnum):
    """How the head segment of a path addresses the current mapping.

    - SCALAR     -> "scalar"     : last segment, read/write the slot directly
    - MAP_FIELD  -> "map_field"  : more segments follow, descend into a mapping
    - LIST_FIELD -> "list_field" : ``name[...]`` segment, address a list
    """

    SCALAR = auto()
    MAP_FIELD = auto()
    LIST_FIELD = auto()


@dataclass(frozen=True, slots=True)
class Attribute:
    """One parsed step of a dotted path.

    Attributes:
        path:      The (trimmed) path this step was parsed from, e.g.
                   ``"skills[2].name"``. Used in error messages.
        name:      Mapping key addressed by this step. For LIST_FIELD steps
                   this is the text before ``[``.
        kind:      How the step addresses its key (see StepKind).
        index:     List index for LIST_FIELD steps written as ``name[n]``;
                   None for ``name[]`` and for every other kind.
        remainder: The rest of the path after the first ``.``, or None when
                   this is the last segment.
    """

    path: str
    name: str
    kind: StepKind
    index: int | None = None
    remainder: str | None = None

    @property
    def is_last(self) -> bool:
        """True when no further segments follow this one."""
        return self.remainder is None

    @property
    def label(self) -> str:
        """Display name of the step, ``name[index]`` for list items."""
        if self.kind is StepKind.LIST_FIELD and self.index is not None:
            return f"{self.name}[{self.index}]"
        return self.name
