"""Changelog markdown parser.

Line based, like the changelog files it reads: a ``# `` title, free-form
description text, then one ``## `` section per release. Line endings inside
the description and version bodies are kept as found so a rendered document
parses back to the same text.
"""

from __future__ import annotations

from pathlib import Path

from depchangelog.config.constants import TITLE_PREFIX, VERSION_PREFIX
from depchangelog.core.errors import ChangelogParseError
from depchangelog.snapshot.models import ChangelogDocument, VersionEntry


def _heading_text(line: str, prefix: str) -> str:
    return line[len(prefix) :].strip()


def parse_changelog_text(text: str) -> ChangelogDocument:
    """Parse changelog markup into a document.

    Text before the title heading is ignored. Any ``# `` line after the title
    is ordinary description/body content.
    """
    title: str | None = None
    description: list[str] = []
    sections: list[tuple[str, list[str]]] = []

    for line in text.splitlines(keepends=True):
        if line.startswith(VERSION_PREFIX):
            sections.append((_heading_text(line, VERSION_PREFIX), []))
        elif sections:
            sections[-1][1].append(line)
        elif title is None and line.startswith(TITLE_PREFIX):
            title = _heading_text(line, TITLE_PREFIX)
        elif title is not None:
            description.append(line)

    return ChangelogDocument(
        title=title or "",
        description="".join(description).strip(),
        versions=tuple(
            VersionEntry(title=heading, body="".join(body).strip()) for heading, body in sections
        ),
    )


def read_changelog(path: Path) -> ChangelogDocument:
    """Read and parse a changelog file.

    Raises:
        ChangelogParseError: File missing, unreadable, or not UTF-8.
    """
    try:
        # newline="" keeps CRLF intact
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ChangelogParseError.unreadable(str(path), str(e)) from e
    return parse_changelog_text(text)
