"""Changelog serializer - renders a document back to changelog markup."""

from __future__ import annotations

from pathlib import Path

from depchangelog.config.constants import LINE_BREAK, TITLE_PREFIX, VERSION_PREFIX
from depchangelog.snapshot.models import ChangelogDocument


def render_changelog(document: ChangelogDocument) -> str:
    """Render a document with CRLF line breaks.

    Layout: title, blank line, description, then for each version a blank
    line, its heading, a blank line, and its body. Text is written verbatim.
    """
    parts = [TITLE_PREFIX, document.title, LINE_BREAK * 2, document.description]
    for version in document.versions:
        parts += [LINE_BREAK * 2, VERSION_PREFIX, version.title, LINE_BREAK * 2, version.body]
    return "".join(parts)


def write_changelog(path: Path, document: ChangelogDocument) -> str:
    """Render ``document`` and overwrite ``path`` with it.

    Returns:
        The text written.

    Raises:
        OSError: The file could not be written.
    """
    text = render_changelog(document)
    # newline="" stops CRLF from being translated on any platform
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    return text
