"""Baseline side-channel: persists snapshots between the before and after phases."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from depchangelog.core.errors import MissingBaselineError
from depchangelog.core.logging import get_logger
from depchangelog.snapshot.models import ChangelogDocument, Manifest, PackageSnapshot

log = get_logger("snapshot.store")


def snapshot_to_dict(snapshot: PackageSnapshot) -> dict[str, Any]:
    return {
        "manifestPath": snapshot.manifest_path,
        "changelogPath": snapshot.changelog_path,
        "changelog": snapshot.changelog.to_dict(),
        "manifestJson": snapshot.manifest.to_dict(),
    }


def snapshot_from_dict(data: dict[str, Any]) -> PackageSnapshot:
    """Rebuild a snapshot from its side-channel form.

    Raises:
        AttributeError, KeyError, TypeError: When fields are missing or malformed.
    """
    return PackageSnapshot(
        manifest_path=str(data["manifestPath"]),
        changelog_path=str(data["changelogPath"]),
        manifest=Manifest.from_dict(data["manifestJson"]),
        changelog=ChangelogDocument.from_dict(data.get("changelog") or {}),
    )


class SnapshotStore:
    """JSON file holding the ordered baseline snapshots.

    The array is index-aligned with discovery order. Saving overwrites any
    previous baseline.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def save(self, snapshots: Sequence[PackageSnapshot]) -> None:
        """Persist snapshots, replacing any prior baseline."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = [snapshot_to_dict(s) for s in snapshots]
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        log.info("baseline_saved", path=str(self._path), packages=len(data))

    def load(self) -> list[PackageSnapshot]:
        """Load the persisted baseline.

        Raises:
            MissingBaselineError: No baseline file, or it cannot be decoded.
        """
        if not self.exists():
            raise MissingBaselineError.missing(str(self._path))
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            snapshots = [snapshot_from_dict(item) for item in data]
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            AttributeError,
            KeyError,
            TypeError,
        ) as e:
            raise MissingBaselineError.corrupt(str(self._path), str(e)) from e
        log.info("baseline_loaded", path=str(self._path), packages=len(snapshots))
        return snapshots

    def discard(self) -> None:
        """Delete the baseline. A missing file is not an error."""
        self._path.unlink(missing_ok=True)
        log.info("baseline_discarded", path=str(self._path))
