"""Consistency checks between an OrderedMap's key list and lookup table."""

from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import TYPE_CHECKING

from ordered_map import _keylist, config
from ordered_map.config import InvariantPolicy
from ordered_map.errors import InvariantError

if TYPE_CHECKING:
    from ordered_map.core import OrderedMap


@dataclass(frozen=True)
class InvariantIssue:
    check: str
    detail: str

    def format_warning(self) -> str:
        return f"[ORDERED_MAP] invariant={self.check} detail: {self.detail}"

    def format_error(self) -> str:
        return "\n".join(
            [
                "ORDERED_MAP_INVARIANT_ERROR: inconsistent map",
                f"  check: {self.check}",
                f"  detail: {self.detail}",
            ]
        )


class InvariantReporter:
    def __init__(self, policy: InvariantPolicy) -> None:
        self.policy = policy

    def warn(self, issue: InvariantIssue) -> None:
        if not config.warnings_enabled():
            return
        print(issue.format_warning(), file=sys.stderr)

    def error(self, issues: list[InvariantIssue]) -> InvariantError:
        return InvariantError("\n".join(issue.format_error() for issue in issues))

    def report(self, issues: list[InvariantIssue]) -> None:
        if not issues:
            return
        if self.policy == "warn":
            for issue in issues:
                self.warn(issue)
            return
        raise self.error(issues)


def check_invariants(omap: OrderedMap) -> list[InvariantIssue]:
    issues: list[InvariantIssue] = []
    size = omap._size
    lookup = omap._lookup
    keys = list(_keylist.iter_keys(omap._keys))
    if size < 0:
        issues.append(InvariantIssue("size", f"negative size {size}"))
    if size != len(lookup):
        issues.append(
            InvariantIssue("size", f"size {size} != lookup entries {len(lookup)}")
        )
    nodes = _keylist.length(omap._keys)
    if size != nodes:
        issues.append(InvariantIssue("size", f"size {size} != key nodes {nodes}"))
    seen: set[object] = set()
    dupes: list[object] = []
    for key in keys:
        if key in seen:
            dupes.append(key)
        seen.add(key)
    if dupes:
        issues.append(InvariantIssue("unique", f"duplicate keys {dupes!r}"))
    missing = [key for key in keys if key not in lookup]
    if missing:
        issues.append(
            InvariantIssue("keyset", f"keys without lookup entry {missing!r}")
        )
    orphaned = [key for key in lookup if key not in seen]
    if orphaned:
        issues.append(
            InvariantIssue("keyset", f"lookup entries without key {orphaned!r}")
        )
    return issues


def verify(omap: OrderedMap) -> None:
    """Check ``omap`` when ORDERED_MAP_CHECK_INVARIANTS is on."""
    if not config.check_invariants():
        return
    InvariantReporter(config.invariant_policy()).report(check_invariants(omap))
