"""Immutable insertion-ordered map with a reduce-based traversal protocol."""

from __future__ import annotations

from ordered_map.access import NOT_FOUND, POP, Found
from ordered_map.collectable import Collector, into
from ordered_map.core import (
    OrderedMap,
    delete,
    fetch,
    get,
    get_and_update,
    has_key,
    items,
    keys,
    new,
    pop,
    put,
    put_if_absent,
    put_if_absent_or_fail,
    values,
)
from ordered_map.errors import InvariantError, KeyConflict, OrderedMapError

__all__ = [
    "Collector",
    "Found",
    "InvariantError",
    "KeyConflict",
    "NOT_FOUND",
    "OrderedMap",
    "OrderedMapError",
    "POP",
    "delete",
    "fetch",
    "get",
    "get_and_update",
    "has_key",
    "into",
    "items",
    "keys",
    "new",
    "pop",
    "put",
    "put_if_absent",
    "put_if_absent_or_fail",
    "values",
]
