"""Package discovery - finds packages and reads their manifest and changelog.

Pure filesystem I/O. Reads are issued concurrently but results always come
back in discovery order, which is sorted by directory name.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from depchangelog.changelog.parser import read_changelog
from depchangelog.core.errors import ChangelogParseError, ManifestReadError
from depchangelog.core.logging import get_logger
from depchangelog.snapshot.models import ChangelogDocument, Manifest, PackageSnapshot

log = get_logger("snapshot.discovery")


@dataclass
class PackageRead:
    """Snapshot of one package plus any changelog failure hit while reading it."""

    snapshot: PackageSnapshot
    parse_failure: ChangelogParseError | None = None


@dataclass
class DiscoveryResult:
    """Snapshots of every discovered package, in discovery order."""

    snapshots: list[PackageSnapshot] = field(default_factory=list)
    parse_failures: list[ChangelogParseError] = field(default_factory=list)


def _safe_read_text(path: Path) -> str:
    """Read a file, returning an empty string when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""


def has_manifest(package_dir: Path, manifest_name: str) -> bool:
    """True when the directory holds a non-empty manifest."""
    return len(_safe_read_text(package_dir / manifest_name)) > 0


def discover_package_dirs(packages_root: Path, manifest_name: str) -> list[Path]:
    """List package directories under ``packages_root``, sorted by name.

    Hidden directories and directories without a non-empty manifest are
    skipped. A missing root yields no packages.
    """
    if not packages_root.is_dir():
        log.warning("packages_root_missing", path=str(packages_root))
        return []
    dirs = [
        item
        for item in packages_root.iterdir()
        if item.is_dir() and not item.name.startswith(".") and has_manifest(item, manifest_name)
    ]
    dirs.sort(key=lambda d: d.name)
    return dirs


def read_manifest(path: Path) -> Manifest:
    """Read a JSON manifest.

    A manifest that cannot be read or decoded is treated as empty.
    """
    text = _safe_read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        err = ManifestReadError.unreadable(str(path), str(e))
        log.warning("manifest_unreadable", **err.to_dict())
        return Manifest()
    return Manifest.from_dict(data)


def read_package(package_dir: Path, manifest_name: str, changelog_name: str) -> PackageRead:
    """Build the snapshot of one package.

    A changelog that cannot be parsed is replaced by the empty placeholder
    document; the failure is returned alongside the snapshot.
    """
    manifest_path = package_dir / manifest_name
    changelog_path = package_dir / changelog_name

    manifest = read_manifest(manifest_path)

    parse_failure: ChangelogParseError | None = None
    try:
        changelog = read_changelog(changelog_path)
    except ChangelogParseError as e:
        log.warning("changelog_unparseable", **e.to_dict())
        parse_failure = e
        changelog = ChangelogDocument.empty()

    return PackageRead(
        snapshot=PackageSnapshot(
            manifest_path=str(manifest_path),
            changelog_path=str(changelog_path),
            manifest=manifest,
            changelog=changelog,
        ),
        parse_failure=parse_failure,
    )


async def _read_packages(
    package_dirs: Sequence[Path],
    manifest_name: str,
    changelog_name: str,
) -> list[PackageRead]:
    tasks = [
        asyncio.to_thread(read_package, package_dir, manifest_name, changelog_name)
        for package_dir in package_dirs
    ]
    # gather keeps task order regardless of completion order
    return list(await asyncio.gather(*tasks))


def snapshot_packages(
    packages_root: Path,
    *,
    manifest_name: str,
    changelog_name: str,
) -> DiscoveryResult:
    """Discover packages and snapshot all of them.

    Returns:
        DiscoveryResult with snapshots in discovery order.
    """
    package_dirs = discover_package_dirs(packages_root, manifest_name)
    reads = asyncio.run(_read_packages(package_dirs, manifest_name, changelog_name))
    log.debug("packages_read", root=str(packages_root), count=len(reads))
    return DiscoveryResult(
        snapshots=[r.snapshot for r in reads],
        parse_failures=[r.parse_failure for r in reads if r.parse_failure is not None],
    )
