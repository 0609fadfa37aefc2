from __future__ import annotations

from typing import Any


class OrderedMapError(Exception):
    """Base error for ordered_map failures."""


class KeyConflict(OrderedMapError):
    """Key already present where an absent key was required."""

    def __init__(self, key: Any, snapshot: str) -> None:
        super().__init__(f"key {key!r} already exists in: {snapshot}")
        self.key = key
        self.snapshot = snapshot


class InvariantError(OrderedMapError, RuntimeError):
    """Key sequence and lookup table disagree."""
