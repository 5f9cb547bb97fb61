"""Tree subpackage: node classification and deep cloning primitives.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the three node kinds (MAPPING, LIST, SCALAR)
- kind_of: classifies a raw value into a NodeKind
- deep_clone: recursive copy of mappings and lists, sharing scalars
"""

from json_tree_scanner.tree.clone import deep_clone
from json_tree_scanner.tree.nodes import NodeKind, kind_of

__all__ = ["NodeKind", "deep_clone", "kind_of"]
