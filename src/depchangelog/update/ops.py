"""Update operations - the before/after phases.

``capture_baseline`` snapshots every package and stores the result.
``apply_updates`` snapshots again, diffs against the baseline, and prepends a
dated entry to each changed package's changelog.

Packages are independent: a changelog that fails to write is reported and the
rest of the batch carries on.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from depchangelog.changelog.entries import prepend_entry, synthesize_entry
from depchangelog.changelog.writer import render_changelog, write_changelog
from depchangelog.config.models import DepChangelogConfig
from depchangelog.core.errors import ChangelogParseError, ChangelogWriteError
from depchangelog.core.logging import get_logger
from depchangelog.diff.ops import PackagePair, UnmatchedPackage, diff_dependencies, join_snapshots
from depchangelog.snapshot.discovery import DiscoveryResult, snapshot_packages
from depchangelog.snapshot.store import SnapshotStore

log = get_logger("update")


@dataclass
class ChangelogUpdate:
    """Delta for a single rewritten changelog."""

    path: str
    title: str
    changes: int
    old_hash: str
    new_hash: str


@dataclass
class CaptureResult:
    """Result of the before phase."""

    baseline_path: str
    packages: int
    parse_failures: list[ChangelogParseError] = field(default_factory=list)


@dataclass
class UpdateSummary:
    """Result of the after phase."""

    updates: list[ChangelogUpdate] = field(default_factory=list)
    failures: list[ChangelogWriteError] = field(default_factory=list)
    unmatched: list[UnmatchedPackage] = field(default_factory=list)
    parse_failures: list[ChangelogParseError] = field(default_factory=list)
    baseline_discarded: bool = False

    @property
    def total_changes(self) -> int:
        return sum(u.changes for u in self.updates)

    @property
    def changelogs_modified(self) -> int:
        return len(self.updates)

    @property
    def message(self) -> str:
        return f"Applied {self.total_changes} changes to {self.changelogs_modified} changelogs"


class UpdateOps:
    """Runs the two phases for every package of a repository."""

    def __init__(
        self,
        repo_root: Path,
        config: DepChangelogConfig,
        *,
        today: date | None = None,
    ) -> None:
        """Initialize update ops.

        Args:
            repo_root: Repository root; relative config paths resolve here.
            config: Resolved configuration.
            today: Date stamped on new entries (default: the local date).
        """
        self._repo_root = repo_root
        self._config = config
        self._today = today
        self._store = SnapshotStore(self._resolve(config.baseline.path))

    @property
    def store(self) -> SnapshotStore:
        return self._store

    @property
    def packages_root(self) -> Path:
        return self._resolve(self._config.packages.packages_dir)

    def _resolve(self, path: str) -> Path:
        candidate = Path(path).expanduser()
        return candidate if candidate.is_absolute() else self._repo_root / candidate

    def _snapshot(self) -> DiscoveryResult:
        return snapshot_packages(
            self.packages_root,
            manifest_name=self._config.packages.manifest_name,
            changelog_name=self._config.packages.changelog_name,
        )

    def capture_baseline(self) -> CaptureResult:
        """Snapshot every package and save it as the baseline."""
        discovered = self._snapshot()
        self._store.save(discovered.snapshots)
        return CaptureResult(
            baseline_path=str(self._store.path),
            packages=len(discovered.snapshots),
            parse_failures=discovered.parse_failures,
        )

    def apply_updates(self) -> UpdateSummary:
        """Write a changelog entry for every package whose dependencies changed.

        The baseline is discarded afterwards unless a changelog failed to
        write, so the run can be repeated.

        Raises:
            MissingBaselineError: No usable baseline. Nothing is written.
        """
        baseline = self._store.load()
        discovered = self._snapshot()
        joined = join_snapshots(baseline, discovered.snapshots)

        summary = UpdateSummary(
            unmatched=joined.unmatched,
            parse_failures=discovered.parse_failures,
        )
        for unmatched in joined.unmatched:
            log.warning("package_unmatched", key=unmatched.key, side=unmatched.side)

        for pair in joined.pairs:
            try:
                update = self._update_package(pair)
            except ChangelogWriteError as e:
                log.error("changelog_write_failed", **e.to_dict())
                summary.failures.append(e)
                continue
            if update is not None:
                summary.updates.append(update)

        if not summary.failures:
            self._store.discard()
            summary.baseline_discarded = True

        log.info(
            "updates_applied",
            changes=summary.total_changes,
            changelogs=summary.changelogs_modified,
            failures=len(summary.failures),
        )
        return summary

    def _update_package(self, pair: PackagePair) -> ChangelogUpdate | None:
        """Diff one package and rewrite its changelog when anything changed.

        Raises:
            ChangelogWriteError: The changelog could not be written.
        """
        changes = diff_dependencies(pair.before.dependencies, pair.after.dependencies)
        version = pair.after.manifest.version or ""
        entry = synthesize_entry(version, changes, self._today)
        if entry is None:
            log.debug("package_unchanged", key=pair.key)
            return None

        old_document = pair.after.changelog
        new_document = prepend_entry(old_document, entry)
        path = Path(pair.after.changelog_path)
        try:
            written = write_changelog(path, new_document)
        except OSError as e:
            raise ChangelogWriteError.failed(str(path), str(e)) from e

        log.info("changelog_updated", path=str(path), title=entry.title, changes=len(changes))
        return ChangelogUpdate(
            path=str(path),
            title=entry.title,
            changes=len(changes),
            old_hash=_hash_content(render_changelog(old_document)),
            new_hash=_hash_content(written),
        )


def _hash_content(content: str) -> str:
    """Hash content for delta tracking."""
    return hashlib.sha256(content.encode()).hexdigest()[:12]
