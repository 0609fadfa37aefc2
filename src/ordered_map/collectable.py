"""Building an ``OrderedMap`` from a stream of pairs."""

from __future__ import annotations

import collections.abc as abc
from typing import Any, Iterable

from ordered_map.core import OrderedMap

__all__ = ["Collector", "into"]


class Collector:
    """Folds ``(key, value)`` pairs into a map one at a time.

    Later pairs overwrite the value of an earlier duplicate key but keep the
    earlier position.
    """

    def __init__(self, target: OrderedMap | None = None) -> None:
        self._current: OrderedMap | None = OrderedMap() if target is None else target
        self._state = "open"

    @property
    def state(self) -> str:
        return self._state

    def _require_open(self) -> OrderedMap:
        current = self._current
        if current is None or self._state != "open":
            raise RuntimeError(f"collector is {self._state}")
        return current

    def push(self, pair: Any) -> None:
        current = self._require_open()
        key, value = pair
        self._current = current.put(key, value)

    def done(self) -> OrderedMap:
        current = self._require_open()
        self._state = "done"
        self._current = None
        return current

    def halt(self) -> None:
        self._require_open()
        self._state = "halted"
        self._current = None


def into(
    pairs: abc.Mapping[Any, Any] | Iterable[Any],
    target: OrderedMap | None = None,
) -> OrderedMap:
    collector = Collector(target)
    source: Iterable[Any]
    if isinstance(pairs, abc.Mapping):
        source = pairs.items()
    else:
        source = pairs
    try:
        for pair in source:
            collector.push(pair)
    except BaseException:
        collector.halt()
        raise
    return collector.done()
