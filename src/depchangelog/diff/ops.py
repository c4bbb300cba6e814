"""Dependency diff - compares before/after snapshots of the same packages.

Versions are compared as text: ``^1.0.0`` and ``1.0.0`` differ. Removed
dependencies are not reported.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from depchangelog.core.errors import ErrorCode
from depchangelog.snapshot.models import PackageSnapshot


@dataclass(frozen=True)
class DependencyChange:
    """An added dependency, or a new version range for an existing one."""

    name: str
    now: Any
    before: Any = None  # version spec before the bump, when not added
    added: bool = False


@dataclass(frozen=True)
class PackagePair:
    """Before/after snapshots of one package."""

    before: PackageSnapshot
    after: PackageSnapshot

    @property
    def key(self) -> str:
        return self.after.key


@dataclass(frozen=True)
class UnmatchedPackage:
    """A package seen in only one of the two snapshot sets."""

    key: str
    side: Literal["before", "after"]

    code: ErrorCode = ErrorCode.PACKAGE_UNMATCHED

    @property
    def message(self) -> str:
        if self.side == "after":
            return f"{self.key} has no baseline snapshot"
        return f"{self.key} was in the baseline but is gone now"


@dataclass
class JoinResult:
    """Result of pairing two snapshot sets by package key."""

    pairs: list[PackagePair] = field(default_factory=list)
    unmatched: list[UnmatchedPackage] = field(default_factory=list)


def diff_dependencies(
    before: Mapping[str, Any],
    after: Mapping[str, Any],
) -> list[DependencyChange]:
    """List dependency changes from ``before`` to ``after``.

    Output follows the iteration order of ``after``.
    """
    changes: list[DependencyChange] = []
    for name, now in after.items():
        if name not in before:
            changes.append(DependencyChange(name=name, now=now, added=True))
        elif before[name] != now:
            changes.append(DependencyChange(name=name, now=now, before=before[name]))
    return changes


def join_snapshots(
    before: Sequence[PackageSnapshot],
    after: Sequence[PackageSnapshot],
) -> JoinResult:
    """Pair snapshots by key rather than by position.

    Pairs come out in ``after`` order. Keys found on one side only are
    reported as unmatched: after-only keys first (in after order), then
    before-only keys (in before order).
    """
    by_key = {snapshot.key: snapshot for snapshot in before}
    result = JoinResult()
    seen: set[str] = set()

    for snapshot in after:
        baseline = by_key.get(snapshot.key)
        if baseline is None:
            result.unmatched.append(UnmatchedPackage(key=snapshot.key, side="after"))
            continue
        seen.add(snapshot.key)
        result.pairs.append(PackagePair(before=baseline, after=snapshot))

    result.unmatched.extend(
        UnmatchedPackage(key=snapshot.key, side="before")
        for snapshot in before
        if snapshot.key not in seen
    )
    return result
