"""json-tree-scanner - dotted-path access to nested mappings and lists."""

from __future__ import annotations

import logging

from json_tree_scanner.api import get_value, has_value, with_value, without_value
from json_tree_scanner.config import ScannerConfig
from json_tree_scanner.errors import (
    AccessMode,
    InvalidArgumentError,
    InvalidPathError,
    ScannerError,
    TypeMismatchError,
)
from json_tree_scanner.scanner import Ownership, TreeScanner
from json_tree_scanner.tree import NodeKind, deep_clone

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AccessMode",
    "InvalidArgumentError",
    "InvalidPathError",
    "NodeKind",
    "Ownership",
    "ScannerConfig",
    "ScannerError",
    "TreeScanner",
    "TypeMismatchError",
    "deep_clone",
    "get_value",
    "has_value",
    "with_value",
    "without_value",
]
