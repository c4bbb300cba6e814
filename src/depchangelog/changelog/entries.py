"""Changelog entry synthesis and document mutation."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from depchangelog.config.constants import LINE_BREAK
from depchangelog.diff.ops import DependencyChange
from depchangelog.snapshot.models import ChangelogDocument, VersionEntry


def entry_title(version: str, on: date) -> str:
    """``[<version>] - <year>-<month>-<day>``, month and day not zero-padded."""
    return f"[{version}] - {on.year}-{on.month}-{on.day}"


def change_line(change: DependencyChange) -> str:
    if change.added:
        return f"- Added `{change.name}@{change.now}` in the list of dependencies."
    return f"- Updated `{change.name}` dependency to `{change.now}`."


def synthesize_entry(
    version: str,
    changes: Sequence[DependencyChange],
    on: date | None = None,
) -> VersionEntry | None:
    """Build the changelog entry for ``changes``, or None when there are none.

    Bullet order follows ``changes``.
    """
    if not changes:
        return None
    body = "".join(change_line(change) + LINE_BREAK for change in changes)
    return VersionEntry(
        title=entry_title(version, on or date.today()),
        body=body.removesuffix(LINE_BREAK),
    )


def prepend_entry(document: ChangelogDocument, entry: VersionEntry) -> ChangelogDocument:
    """Return a copy of ``document`` with ``entry`` as its newest version.

    Existing entries are never merged or deduplicated, even on equal titles.
    """
    return ChangelogDocument(
        title=document.title,
        description=document.description,
        versions=(entry, *document.versions),
    )
