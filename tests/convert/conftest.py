"""Shared fixtures for conversion tests."""

import csv

import pytest

from convert.models import HighlightRow

HEADER = [
    "Book Title",
    "Authors",
    "Chapter Title",
    "Date of Highlight",
    "Book URL",
    "Chapter URL",
    "Annotation URL",
    "Highlight",
    "Personal Note",
]


@pytest.fixture
def make_record():
    """Build a nine-field CSV record; URLs derive from title and chapter."""

    def _make(
        title="Go Programming", chapter="Intro", highlight="H1", note="", authors="A. Donovan"
    ):
        slug = title.lower().replace(" ", "-")
        chapter_slug = chapter.lower().replace(" ", "-")
        return [
            title,
            authors,
            chapter,
            "2021-03-01",
            f"https://example.com/{slug}",
            f"https://example.com/{slug}/{chapter_slug}",
            f"https://example.com/{slug}/{chapter_slug}/{highlight.lower()}",
            highlight,
            note,
        ]

    return _make


@pytest.fixture
def make_row(make_record):
    """Build a HighlightRow with the same defaults as make_record."""

    def _make(**kwargs):
        return HighlightRow(*make_record(**kwargs))

    return _make


@pytest.fixture
def write_export(tmp_path):
    """Write a CSV export (header plus the given records) and return its path."""

    def _write(records, name="highlights.csv", header=True):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            if header:
                writer.writerow(HEADER)
            writer.writerows(records)
        return path

    return _write
