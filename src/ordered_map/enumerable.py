"""Reduce-based traversal protocol.

``reduce`` folds a step function over the entries of an enumerable while the
step function steers the walk with one of three signals:

* ``Cont(acc)`` keeps going,
* ``Halt(acc)`` stops and reports ``Halted(acc)``,
* ``Suspend(acc)`` stops and reports ``Suspended(acc, continuation)``.

Calling the continuation with a new signal resumes at the next unvisited
entry. Mappings are walked as ``(key, value)`` pairs in iteration order,
anything else as its plain iteration. The helpers at the bottom of the
module are written against ``reduce`` alone.
"""

from __future__ import annotations

import collections.abc as abc
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Union

__all__ = [
    "Cont",
    "Continuation",
    "Done",
    "Halt",
    "Halted",
    "Suspend",
    "Suspended",
    "count",
    "find",
    "iterate",
    "member",
    "reduce",
    "slice",
    "take",
    "to_list",
    "zip",
]


@dataclass(frozen=True)
class Cont:
    acc: Any


@dataclass(frozen=True)
class Halt:
    acc: Any


@dataclass(frozen=True)
class Suspend:
    acc: Any


@dataclass(frozen=True)
class Done:
    acc: Any


@dataclass(frozen=True)
class Halted:
    acc: Any


@dataclass(frozen=True)
class Suspended:
    acc: Any
    continuation: Continuation


Signal = Union[Cont, Halt, Suspend]
Result = Union[Done, Halted, Suspended]
Step = Callable[[Any, Any], Signal]

_MISSING = object()


def _entries(source: Any) -> Iterator[Any]:
    iter_entries = getattr(source, "iter_entries", None)
    if callable(iter_entries):
        return iter_entries()
    if isinstance(source, abc.Mapping):
        return iter(source.items())
    return iter(source)


class Continuation:
    """Resumable position inside a suspended ``reduce``."""

    def __init__(self, cursor: Iterator[Any], step: Step) -> None:
        self._cursor: Iterator[Any] | None = cursor
        self._step = step

    def __call__(self, signal: Signal) -> Result:
        cursor = self._cursor
        if cursor is None:
            raise RuntimeError("continuation already resumed")
        self._cursor = None
        return _run(cursor, signal, self._step)

    def __repr__(self) -> str:
        state = "spent" if self._cursor is None else "pending"
        return f"<Continuation {state}>"


def _run(cursor: Iterator[Any], signal: Signal, step: Step) -> Result:
    while True:
        if isinstance(signal, Halt):
            return Halted(signal.acc)
        if isinstance(signal, Suspend):
            return Suspended(signal.acc, Continuation(cursor, step))
        if not isinstance(signal, Cont):
            raise TypeError(f"expected Cont, Halt or Suspend, got {signal!r}")
        entry = next(cursor, _MISSING)
        if entry is _MISSING:
            return Done(signal.acc)
        signal = step(entry, signal.acc)


def reduce(source: Any, signal: Signal, step: Step) -> Result:
    return _run(_entries(source), signal, step)


def member(source: Any, key: Any) -> bool:
    has_key = getattr(source, "has_key", None)
    if callable(has_key):
        return has_key(key)
    return key in source


def count(source: Any) -> int:
    return len(source)


def slice(source: Any, start: int, length: int) -> list[Any]:
    """Up to ``length`` entries starting at ``start``, clamped to the size.

    A negative ``start`` counts back from the end.
    """
    size = count(source)
    if start < 0:
        start = max(size + start, 0)
    if length <= 0 or start >= size:
        return []
    stop = min(start + length, size)
    out: list[Any] = []

    def step(entry: Any, index: int) -> Signal:
        if index >= start:
            out.append(entry)
        if index + 1 >= stop:
            return Halt(index + 1)
        return Cont(index + 1)

    reduce(source, Cont(0), step)
    return out


def to_list(source: Any) -> list[Any]:
    out: list[Any] = []

    def step(entry: Any, acc: list[Any]) -> Signal:
        acc.append(entry)
        return Cont(acc)

    reduce(source, Cont(out), step)
    return out


def take(source: Any, amount: int) -> list[Any]:
    if amount <= 0:
        return []
    out: list[Any] = []

    def step(entry: Any, remaining: int) -> Signal:
        out.append(entry)
        if remaining <= 1:
            return Halt(0)
        return Cont(remaining - 1)

    reduce(source, Cont(amount), step)
    return out


def find(
    source: Any, predicate: Callable[[Any], bool], default: Any = None
) -> Any:
    def step(entry: Any, acc: Any) -> Signal:
        if predicate(entry):
            return Halt(entry)
        return Cont(acc)

    return reduce(source, Cont(default), step).acc


def _suspend_each(entry: Any, acc: Any) -> Signal:
    return Suspend(entry)


def zip(left: Any, right: Any) -> list[tuple[Any, Any]]:
    """Pair entries of two enumerables, stopping at the shorter one.

    Both sides are driven one entry at a time through suspension, so neither
    is walked past the point where the other runs out.
    """
    out: list[tuple[Any, Any]] = []
    left_result = reduce(left, Suspend(None), _suspend_each)
    right_result = reduce(right, Suspend(None), _suspend_each)
    while isinstance(left_result, Suspended) and isinstance(right_result, Suspended):
        left_result = left_result.continuation(Cont(None))
        if not isinstance(left_result, Suspended):
            break
        right_result = right_result.continuation(Cont(None))
        if not isinstance(right_result, Suspended):
            break
        out.append((left_result.acc, right_result.acc))
    return out


def iterate(source: Iterable[Any]) -> Iterator[Any]:
    """Lazily yield entries by resuming a suspended ``reduce``."""
    result = reduce(source, Suspend(None), _suspend_each)
    while isinstance(result, Suspended):
        result = result.continuation(Cont(None))
        if isinstance(result, Suspended):
            yield result.acc
