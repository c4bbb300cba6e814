"""Snapshot module - package snapshots, discovery, and the baseline store."""

from depchangelog.snapshot.models import (
    ChangelogDocument,
    Manifest,
    PackageSnapshot,
    VersionEntry,
)

__all__ = ["ChangelogDocument", "Manifest", "PackageSnapshot", "VersionEntry"]
