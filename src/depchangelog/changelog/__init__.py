"""Changelog module - parse, synthesize, and write changelog documents."""

from depchangelog.changelog.entries import prepend_entry, synthesize_entry
from depchangelog.changelog.parser import parse_changelog_text, read_changelog
from depchangelog.changelog.writer import render_changelog, write_changelog

__all__ = [
    "parse_changelog_text",
    "prepend_entry",
    "read_changelog",
    "render_changelog",
    "synthesize_entry",
    "write_changelog",
]
