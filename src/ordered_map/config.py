"""Environment settings for ordered_map."""

from __future__ import annotations

import os
from typing import Literal

InvariantPolicy = Literal["error", "warn"]

DEFAULT_REPR_LIMIT = 32

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _raw_getenv(key: str, default: str = "") -> str:
    try:
        return os.getenv(key, default)
    except Exception:
        return default


def _parse_limit(raw: str) -> int | None:
    try:
        limit = int(raw.strip())
    except ValueError:
        return DEFAULT_REPR_LIMIT
    if limit < 0:
        return None
    if limit == 0:
        return DEFAULT_REPR_LIMIT
    return limit


def _parse_policy(raw: str) -> InvariantPolicy:
    if raw.strip().lower() == "warn":
        return "warn"
    return "error"


_CHECK_CACHE: bool | None = None
_CHECK_RAW: str | None = None
_LIMIT_CACHE: int | None = None
_LIMIT_RAW: str | None = None


def check_invariants() -> bool:
    global _CHECK_CACHE, _CHECK_RAW
    raw = _raw_getenv("ORDERED_MAP_CHECK_INVARIANTS", "")
    if _CHECK_CACHE is None or raw != _CHECK_RAW:
        _CHECK_RAW = raw
        _CHECK_CACHE = raw.strip().lower() in _TRUTHY
    return _CHECK_CACHE


def invariant_policy() -> InvariantPolicy:
    return _parse_policy(_raw_getenv("ORDERED_MAP_INVARIANT_POLICY", "error"))


def repr_limit() -> int | None:
    """Entries rendered by repr before eliding; None means no limit."""
    global _LIMIT_CACHE, _LIMIT_RAW
    raw = _raw_getenv("ORDERED_MAP_REPR_LIMIT", "")
    if _LIMIT_RAW is None or raw != _LIMIT_RAW:
        _LIMIT_RAW = raw
        _LIMIT_CACHE = _parse_limit(raw) if raw else DEFAULT_REPR_LIMIT
    return _LIMIT_CACHE


def warnings_enabled() -> bool:
    raw = _raw_getenv("ORDERED_MAP_WARNINGS", "")
    return raw.strip().lower() not in _FALSY
