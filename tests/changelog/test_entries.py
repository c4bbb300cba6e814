"""Tests for changelog entry synthesis and prepending."""

from __future__ import annotations

from datetime import date

from depchangelog.changelog.entries import (
    change_line,
    entry_title,
    prepend_entry,
    synthesize_entry,
)
from depchangelog.diff.ops import DependencyChange
from depchangelog.snapshot.models import ChangelogDocument, VersionEntry


class TestEntryTitle:
    """Tests for entry_title function."""

    def test_month_and_day_are_not_zero_padded(self) -> None:
        assert entry_title("1.2.3", date(2024, 3, 9)) == "[1.2.3] - 2024-3-9"

    def test_two_digit_month_and_day(self) -> None:
        assert entry_title("2.0.0", date(2023, 12, 31)) == "[2.0.0] - 2023-12-31"


class TestChangeLine:
    """Tests for change_line function."""

    def test_addition(self) -> None:
        line = change_line(DependencyChange(name="baz", now="^1.0.0", added=True))
        assert line == "- Added `baz@^1.0.0` in the list of dependencies."

    def test_update(self) -> None:
        line = change_line(DependencyChange(name="bar", now="^2.0.0", before="^1.0.0"))
        assert line == "- Updated `bar` dependency to `^2.0.0`."


class TestSynthesizeEntry:
    """Tests for synthesize_entry function."""

    def test_given_no_changes_when_synthesize_then_none(self) -> None:
        """Empty change list produces no entry."""
        assert synthesize_entry("1.0.0", [], date(2024, 1, 1)) is None

    def test_given_changes_when_synthesize_then_one_line_each_in_order(self) -> None:
        """Body has one bullet per change, CRLF-joined, no trailing break."""
        # Given
        changes = [
            DependencyChange(name="bar", now="^2.0.0", before="^1.0.0"),
            DependencyChange(name="baz", now="^1.0.0", added=True),
        ]

        # When
        entry = synthesize_entry("1.1.0", changes, date(2024, 3, 9))

        # Then
        assert entry == VersionEntry(
            title="[1.1.0] - 2024-3-9",
            body="- Updated `bar` dependency to `^2.0.0`.\r\n"
            "- Added `baz@^1.0.0` in the list of dependencies.",
        )

    def test_given_single_change_when_synthesize_then_no_line_break(self) -> None:
        entry = synthesize_entry(
            "1.0.1", [DependencyChange(name="x", now="2", added=True)], date(2024, 1, 1)
        )

        assert entry is not None
        assert "\r\n" not in entry.body
        assert not entry.body.endswith("\n")

    def test_given_no_date_when_synthesize_then_uses_today(self) -> None:
        entry = synthesize_entry("1.0.0", [DependencyChange(name="x", now="1", added=True)])

        today = date.today()
        assert entry is not None
        assert entry.title == f"[1.0.0] - {today.year}-{today.month}-{today.day}"


class TestPrependEntry:
    """Tests for prepend_entry function."""

    def test_given_existing_version_when_prepend_then_newest_first(self) -> None:
        """Prepending V2 to [V1] yields [V2, V1]."""
        # Given
        v1 = VersionEntry(title="[1.0.0] - 2024-1-1", body="- first")
        v2 = VersionEntry(title="[1.1.0] - 2024-2-1", body="- second")
        document = ChangelogDocument(title="Changelog", description="desc", versions=(v1,))

        # When
        result = prepend_entry(document, v2)

        # Then
        assert result.versions == (v2, v1)
        assert result.title == "Changelog"
        assert result.description == "desc"

    def test_given_document_when_prepend_then_input_unchanged(self) -> None:
        """The original document is left as it was."""
        document = ChangelogDocument(title="t", description="d")

        prepend_entry(document, VersionEntry(title="x", body="y"))

        assert document.versions == ()

    def test_given_same_title_when_prepend_twice_then_both_kept(self) -> None:
        """Entries with equal titles are not deduplicated."""
        entry = VersionEntry(title="[1.0.0] - 2024-1-1", body="- a")

        result = prepend_entry(prepend_entry(ChangelogDocument.empty(), entry), entry)

        assert result.versions == (entry, entry)
