"""Integrations subpackage for json-tree-scanner.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_tree_value`` fixture

The plugin module imports pytest, so it is only loaded by pytest itself and
is not re-exported here.
"""

from __future__ import annotations

__all__: list[str] = []
