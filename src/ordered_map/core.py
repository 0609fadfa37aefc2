"""Insertion-ordered immutable map.

An ``OrderedMap`` keeps two views of the same entries: a persistent linked
list of keys, newest first, and a plain dict for lookup. Every mutator
returns a new map and leaves the receiver untouched, so both views are only
ever written together by ``OrderedMap._build``.
"""

from __future__ import annotations

import collections.abc as abc
from typing import Any, Callable, Iterable, Iterator

from ordered_map import _keylist, config, diagnostics, enumerable
from ordered_map._keylist import KeyNode
from ordered_map.access import NOT_FOUND, POP, FetchResult, Found
from ordered_map.errors import KeyConflict

__all__ = [
    "OrderedMap",
    "delete",
    "fetch",
    "get",
    "get_and_update",
    "has_key",
    "items",
    "keys",
    "new",
    "pop",
    "put",
    "put_if_absent",
    "put_if_absent_or_fail",
    "values",
]


class OrderedMap:
    __slots__ = ("_keys", "_lookup", "_size", "_order")

    _keys: KeyNode | None
    _lookup: dict[Any, Any]
    _size: int
    _order: tuple[Any, ...] | None

    def __new__(
        cls, pairs: abc.Mapping[Any, Any] | Iterable[Any] | None = None
    ) -> OrderedMap:
        # No __init__: fields are only ever bound here and in _build.
        empty = cls._build(None, {}, 0)
        if pairs is None:
            return empty
        from ordered_map.collectable import into

        return into(pairs, empty)

    @classmethod
    def _build(
        cls, keys: KeyNode | None, lookup: dict[Any, Any], size: int
    ) -> OrderedMap:
        omap = object.__new__(cls)
        object.__setattr__(omap, "_keys", keys)
        object.__setattr__(omap, "_lookup", lookup)
        object.__setattr__(omap, "_size", size)
        object.__setattr__(omap, "_order", None)
        diagnostics.verify(omap)
        return omap

    @classmethod
    def from_pairs(cls, pairs: abc.Mapping[Any, Any] | Iterable[Any]) -> OrderedMap:
        from ordered_map.collectable import into

        return into(pairs, cls())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _ordered(self) -> tuple[Any, ...]:
        # Oldest first; safe to compute twice, the instance never changes.
        order = self._order
        if order is None:
            order = tuple(_keylist.iter_keys(self._keys))[::-1]
            object.__setattr__(self, "_order", order)
        return order

    # Lookup

    def get(self, key: Any, default: Any = None) -> Any:
        lookup = self._lookup
        if key in lookup:
            return lookup[key]
        return default

    def has_key(self, key: Any) -> bool:
        return key in self._lookup

    def fetch(self, key: Any) -> FetchResult:
        lookup = self._lookup
        if key in lookup:
            return Found(lookup[key])
        return NOT_FOUND

    # Mutators, each returning a new map

    def put(self, key: Any, value: Any) -> OrderedMap:
        lookup = dict(self._lookup)
        if key in self._lookup:
            lookup[key] = value
            return self._build(self._keys, lookup, self._size)
        lookup[key] = value
        return self._build(_keylist.prepend(self._keys, key), lookup, self._size + 1)

    def put_if_absent(self, key: Any, value: Any) -> OrderedMap:
        if key in self._lookup:
            return self
        return self.put(key, value)

    def put_if_absent_or_fail(self, key: Any, value: Any) -> OrderedMap:
        if key in self._lookup:
            raise KeyConflict(key, repr(self))
        return self.put(key, value)

    def delete(self, key: Any) -> OrderedMap:
        if self._size == 0 or key not in self._lookup:
            return self
        lookup = dict(self._lookup)
        del lookup[key]
        return self._build(
            _keylist.remove(self._keys, key), lookup, max(self._size - 1, 0)
        )

    def pop(self, key: Any, default: Any = None) -> tuple[Any, OrderedMap]:
        if key not in self._lookup:
            return default, self
        return self._lookup[key], self.delete(key)

    def get_and_update(
        self, key: Any, fun: Callable[[Any], Any]
    ) -> tuple[Any, OrderedMap]:
        result = fun(self.get(key))
        if result is POP:
            return self.pop(key)
        if isinstance(result, tuple) and len(result) == 2:
            return_value, new_value = result
            return return_value, self.put(key, new_value)
        raise TypeError(
            "get_and_update callback must return a (value, new_value) pair "
            f"or POP, got {result!r}"
        )

    # Ordered views

    def keys(self) -> list[Any]:
        return list(self._ordered())

    def values(self) -> list[Any]:
        lookup = self._lookup
        return [lookup[key] for key in self._ordered()]

    def items(self) -> list[tuple[Any, Any]]:
        lookup = self._lookup
        return [(key, lookup[key]) for key in self._ordered()]

    def iter_entries(self) -> Iterator[tuple[Any, Any]]:
        lookup = self._lookup
        for key in self._ordered():
            yield key, lookup[key]

    # Traversal

    def reduce(
        self, signal: enumerable.Signal, step: enumerable.Step
    ) -> enumerable.Result:
        return enumerable.reduce(self, signal, step)

    def slice(self, start: int, length: int) -> list[tuple[Any, Any]]:
        return enumerable.slice(self, start, length)

    # Python protocols

    def __getitem__(self, key: Any) -> Any:
        lookup = self._lookup
        if key in lookup:
            return lookup[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ordered())

    def __reversed__(self) -> Iterator[Any]:
        return _keylist.iter_keys(self._keys)

    def __bool__(self) -> bool:
        return self._size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        if self is other:
            return True
        if self._size != other._size:
            return False
        return self._ordered() == other._ordered() and self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(tuple(self.iter_entries()))

    def __repr__(self) -> str:
        limit = config.repr_limit()
        shown: list[str] = []
        for key, value in self.iter_entries():
            if limit is not None and len(shown) >= limit:
                shown.append("...")
                break
            shown.append(f"({key!r}, {value!r})")
        if not shown:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}([{', '.join(shown)}])"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.items(),))


abc.Mapping.register(OrderedMap)


def new() -> OrderedMap:
    return OrderedMap()


def get(omap: OrderedMap, key: Any, default: Any = None) -> Any:
    return omap.get(key, default)


def has_key(omap: OrderedMap, key: Any) -> bool:
    return omap.has_key(key)


def fetch(omap: OrderedMap, key: Any) -> FetchResult:
    return omap.fetch(key)


def put(omap: OrderedMap, key: Any, value: Any) -> OrderedMap:
    return omap.put(key, value)


def put_if_absent(omap: OrderedMap, key: Any, value: Any) -> OrderedMap:
    return omap.put_if_absent(key, value)


def put_if_absent_or_fail(omap: OrderedMap, key: Any, value: Any) -> OrderedMap:
    return omap.put_if_absent_or_fail(key, value)


def delete(omap: OrderedMap, key: Any) -> OrderedMap:
    return omap.delete(key)


def pop(omap: OrderedMap, key: Any, default: Any = None) -> tuple[Any, OrderedMap]:
    return omap.pop(key, default)


def get_and_update(
    omap: OrderedMap, key: Any, fun: Callable[[Any], Any]
) -> tuple[Any, OrderedMap]:
    return omap.get_and_update(key, fun)


def keys(omap: OrderedMap) -> list[Any]:
    return omap.keys()


def values(omap: OrderedMap) -> list[Any]:
    return omap.values()


def items(omap: OrderedMap) -> list[tuple[Any, Any]]:
    return omap.items()
