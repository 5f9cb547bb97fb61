"""Path subpackage: dotted-path grammar and parsed step types.

Re-exports the public API for the path module:
- Attribute: frozen dataclass describing one parsed path step
- StepKind: StrEnum of the three step kinds (SCALAR, MAP_FIELD, LIST_FIELD)
- parse_attribute: total parser for the head segment of a path
- PathParser: LRU-caching wrapper around parse_attribute
"""

from json_tree_scanner.path.attribute import Attribute, StepKind
from json_tree_scanner.path.parser import PathParser, parse_attribute

__all__ = ["Attribute", "PathParser", "StepKind", "parse_attribute"]
