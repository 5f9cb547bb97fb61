"""ScannerConfig: immutable settings shared by a scanner and its sub-scanners.

ScannerConfig is a frozen (immutable) dataclass validated on construction.
A top-level ``TreeScanner`` hands its config down to every scanner derived
from it, so one config governs a whole tree.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ScannerConfig"]


@dataclass(frozen=True, slots=True)
class ScannerConfig:
    """Immutable configuration for ``TreeScanner``.

    Attributes:
        cache_size: Capacity of the parsed-path LRU cache (>= 0). ``0``
            disables caching. Default 256.
        max_index: Largest list index accepted on write, or None for no
            limit. Writing ``"items[n]"`` pads the list with ``None`` up to
            ``n``, so this bounds how far a single write can grow a list.
    """

    cache_size: int = 256
    max_index: int | None = None

    def __post_init__(self) -> None:
        if self.cache_size < 0:
            msg = f"cache_size must be >= 0, got {self.cache_size}"
            raise ValueError(msg)
        if self.max_index is not None and self.max_index < 0:
            msg = f"max_index must be >= 0 or None, got {self.max_index}"
            raise ValueError(msg)
