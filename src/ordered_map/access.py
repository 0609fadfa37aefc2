"""Presence-aware lookup results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Union


@dataclass(frozen=True)
class Found:
    value: Any


class _NotFound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


class _Pop:
    __slots__ = ()

    def __repr__(self) -> str:
        return "POP"

    def __reduce__(self) -> str:
        return "POP"


NOT_FOUND: Final = _NotFound()
# Returned by a get_and_update callback to remove the key.
POP: Final = _Pop()

FetchResult = Union[Found, _NotFound]
