"""Tests for the baseline snapshot store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depchangelog.core.errors import ErrorCode, MissingBaselineError
from depchangelog.snapshot.models import (
    ChangelogDocument,
    Manifest,
    PackageSnapshot,
    VersionEntry,
)
from depchangelog.snapshot.store import SnapshotStore, snapshot_to_dict


@pytest.fixture
def snapshots() -> list[PackageSnapshot]:
    return [
        PackageSnapshot(
            manifest_path="packages/a/package.json",
            changelog_path="packages/a/CHANGELOG.md",
            manifest=Manifest.from_dict(
                {"name": "a", "version": "1.0.0", "dependencies": {"z": "1", "b": "2"}}
            ),
            changelog=ChangelogDocument(
                title="Changelog",
                description="desc",
                versions=(VersionEntry(title="[1.0.0] - 2024-1-1", body="- a\r\n- b"),),
            ),
        ),
        PackageSnapshot(
            manifest_path="packages/b/package.json",
            changelog_path="packages/b/CHANGELOG.md",
        ),
    ]


class TestSnapshotToDict:
    """Tests for the side-channel record layout."""

    def test_layout(self, snapshots: list[PackageSnapshot]) -> None:
        assert snapshot_to_dict(snapshots[0]) == {
            "manifestPath": "packages/a/package.json",
            "changelogPath": "packages/a/CHANGELOG.md",
            "changelog": {
                "title": "Changelog",
                "description": "desc",
                "versions": [{"title": "[1.0.0] - 2024-1-1", "body": "- a\r\n- b"}],
            },
            "manifestJson": {
                "dependencies": {"z": "1", "b": "2"},
                "name": "a",
                "version": "1.0.0",
            },
        }


class TestSnapshotStore:
    """Tests for SnapshotStore."""

    def test_given_snapshots_when_saved_and_loaded_then_equal_in_order(
        self, tmp_path: Path, snapshots: list[PackageSnapshot]
    ) -> None:
        """Load returns what save stored, order and dependency order included."""
        # Given
        store = SnapshotStore(tmp_path / ".depchangelog" / "baseline.json")

        # When
        store.save(snapshots)
        loaded = store.load()

        # Then
        assert loaded == snapshots
        assert list(loaded[0].dependencies) == ["z", "b"]

    def test_given_prior_baseline_when_saved_then_overwritten(
        self, tmp_path: Path, snapshots: list[PackageSnapshot]
    ) -> None:
        store = SnapshotStore(tmp_path / "baseline.json")
        store.save(snapshots)

        store.save(snapshots[1:])

        assert store.load() == snapshots[1:]

    def test_given_no_file_when_load_then_missing_baseline(self, tmp_path: Path) -> None:
        store = SnapshotStore(tmp_path / "baseline.json")

        with pytest.raises(MissingBaselineError) as exc_info:
            store.load()

        assert exc_info.value.code == ErrorCode.BASELINE_MISSING

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"manifestPath": "x"}',
            '[{"manifestPath": "x"}]',
            "[1, 2]",
            '[{"manifestPath": "m", "changelogPath": "c", "manifestJson": {}, "changelog": "x"}]',
        ],
    )
    def test_given_corrupt_file_when_load_then_missing_baseline(
        self, tmp_path: Path, content: str
    ) -> None:
        """Unparseable baselines count as missing."""
        path = tmp_path / "baseline.json"
        path.write_text(content)

        with pytest.raises(MissingBaselineError) as exc_info:
            SnapshotStore(path).load()

        assert exc_info.value.code == ErrorCode.BASELINE_CORRUPT

    def test_given_saved_file_when_inspected_then_json_array(
        self, tmp_path: Path, snapshots: list[PackageSnapshot]
    ) -> None:
        path = tmp_path / "baseline.json"
        SnapshotStore(path).save(snapshots)

        data = json.loads(path.read_text())

        assert isinstance(data, list)
        assert [d["manifestPath"] for d in data] == [s.manifest_path for s in snapshots]

    def test_discard_removes_file_and_tolerates_missing(
        self, tmp_path: Path, snapshots: list[PackageSnapshot]
    ) -> None:
        store = SnapshotStore(tmp_path / "baseline.json")
        store.save(snapshots)

        store.discard()
        store.discard()

        assert not store.exists()
        with pytest.raises(MissingBaselineError):
            store.load()
