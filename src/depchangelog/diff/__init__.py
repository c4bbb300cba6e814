"""Diff module - dependency changes between two snapshots."""

from depchangelog.diff.ops import (
    DependencyChange,
    JoinResult,
    PackagePair,
    UnmatchedPackage,
    diff_dependencies,
    join_snapshots,
)

__all__ = [
    "DependencyChange",
    "JoinResult",
    "PackagePair",
    "UnmatchedPackage",
    "diff_dependencies",
    "join_snapshots",
]
