"""Snapshot models - packages, manifests, and changelog documents.

All entities are immutable. Updating a changelog produces a new
ChangelogDocument rather than editing one in place.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class VersionEntry:
    """One release section of a changelog."""

    title: str  # "[1.2.3] - 2024-3-9"
    body: str


@dataclass(frozen=True)
class ChangelogDocument:
    """Structured changelog: title, description, version entries newest first."""

    title: str
    description: str
    versions: tuple[VersionEntry, ...] = ()

    @classmethod
    def empty(cls) -> ChangelogDocument:
        """Placeholder used when a changelog is missing or unparseable."""
        return cls(title="", description="", versions=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "versions": [{"title": v.title, "body": v.body} for v in self.versions],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChangelogDocument:
        """Rebuild a document from to_dict() output.

        Missing fields default to empty, so an empty mapping gives the
        placeholder document.

        Raises:
            AttributeError, KeyError, TypeError: When entries are malformed.
        """
        versions = tuple(
            VersionEntry(title=str(v["title"]), body=str(v["body"]))
            for v in data.get("versions") or []
        )
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            versions=versions,
        )


def _freeze(data: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class Manifest:
    """Decoded package manifest, kept exactly as read.

    Only ``dependencies`` is interpreted. Values and key order of the whole
    object survive a round trip through the baseline unchanged.
    """

    data: Mapping[str, Any] = field(default_factory=lambda: _freeze({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _freeze(self.data))

    @property
    def dependencies(self) -> Mapping[str, Any]:
        """Dependency name to version spec, in manifest order.

        A ``dependencies`` value that is not an object counts as none.
        """
        deps = self.data.get("dependencies")
        return _freeze(deps if isinstance(deps, Mapping) else {})

    @property
    def name(self) -> str | None:
        value = self.data.get("name")
        return value if isinstance(value, str) else None

    @property
    def version(self) -> str | None:
        value = self.data.get("version")
        return value if isinstance(value, str) else None

    @classmethod
    def from_dict(cls, data: Any) -> Manifest:
        """Wrap a decoded manifest. Anything but a JSON object reads as empty."""
        if not isinstance(data, Mapping):
            return cls()
        return cls(data=copy.deepcopy(dict(data)))

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.data))

@dataclass(frozen=True)
class PackageSnapshot:
    """Point-in-time view of one package's manifest and changelog."""

    manifest_path: str
    changelog_path: str
    manifest: Manifest = field(default_factory=Manifest)
    changelog: ChangelogDocument = field(default_factory=ChangelogDocument.empty)

    @property
    def key(self) -> str:
        """Identity used to pair before/after snapshots of the same package."""
        return self.manifest_path

    @property
    def dependencies(self) -> Mapping[str, str]:
        return self.manifest.dependencies
