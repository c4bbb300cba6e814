"""Tests for changelog rendering and writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from depchangelog.changelog.parser import parse_changelog_text
from depchangelog.changelog.writer import render_changelog, write_changelog
from depchangelog.snapshot.models import ChangelogDocument, VersionEntry


@pytest.fixture
def document() -> ChangelogDocument:
    return ChangelogDocument(
        title="Changelog",
        description="All notable changes to this package.",
        versions=(
            VersionEntry(
                title="[1.1.0] - 2024-3-9",
                body="- Updated `bar` dependency to `^2.0.0`.\r\n"
                "- Added `baz@^1.0.0` in the list of dependencies.",
            ),
            VersionEntry(title="[1.0.0] - 2024-1-2", body="- Initial release."),
        ),
    )


class TestRenderChangelog:
    """Tests for render_changelog function."""

    def test_given_versions_when_render_then_exact_layout(
        self, document: ChangelogDocument
    ) -> None:
        """Blocks are separated by exactly one blank line, CRLF throughout."""
        assert render_changelog(document) == (
            "# Changelog\r\n"
            "\r\n"
            "All notable changes to this package.\r\n"
            "\r\n"
            "## [1.1.0] - 2024-3-9\r\n"
            "\r\n"
            "- Updated `bar` dependency to `^2.0.0`.\r\n"
            "- Added `baz@^1.0.0` in the list of dependencies.\r\n"
            "\r\n"
            "## [1.0.0] - 2024-1-2\r\n"
            "\r\n"
            "- Initial release."
        )

    def test_given_no_versions_when_render_then_title_and_description_only(self) -> None:
        document = ChangelogDocument(title="Changelog", description="Nothing yet.")

        assert render_changelog(document) == "# Changelog\r\n\r\nNothing yet."

    def test_given_markup_in_text_when_render_then_written_verbatim(self) -> None:
        """No escaping is applied."""
        document = ChangelogDocument(
            title="A *b* <c>",
            description="`code` & [link](x)",
            versions=(VersionEntry(title="[1] - 2024-1-1", body="- <b>bold</b>"),),
        )

        text = render_changelog(document)

        assert "# A *b* <c>" in text
        assert "`code` & [link](x)" in text
        assert "- <b>bold</b>" in text

    def test_round_trip_is_stable(self, document: ChangelogDocument) -> None:
        """render(parse(render(D))) == render(D)."""
        rendered = render_changelog(document)

        assert render_changelog(parse_changelog_text(rendered)) == rendered

    def test_round_trip_of_empty_placeholder_is_stable(self) -> None:
        rendered = render_changelog(ChangelogDocument.empty())

        assert render_changelog(parse_changelog_text(rendered)) == rendered


class TestWriteChangelog:
    """Tests for write_changelog function."""

    def test_given_existing_file_when_write_then_overwritten(
        self, tmp_path: Path, document: ChangelogDocument
    ) -> None:
        """File content is replaced by the rendered document."""
        # Given
        path = tmp_path / "CHANGELOG.md"
        path.write_text("old content that is much longer than nothing " * 50)

        # When
        written = write_changelog(path, document)

        # Then
        assert path.read_bytes() == render_changelog(document).encode("utf-8")
        assert written == render_changelog(document)

    def test_given_crlf_when_write_then_not_translated(self, tmp_path: Path) -> None:
        """CRLF is written as-is, never doubled."""
        path = tmp_path / "CHANGELOG.md"

        write_changelog(path, ChangelogDocument(title="T", description="D"))

        assert path.read_bytes() == b"# T\r\n\r\nD"

    def test_given_missing_directory_when_write_then_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_changelog(tmp_path / "nope" / "CHANGELOG.md", ChangelogDocument.empty())
