"""Tests for Obsidian adaptation."""

from convert.aggregator import aggregate
from convert.format_adapter import adapt_for_obsidian, escape_hashes


def test_escape_hashes():
    """Test that every '#' is escaped."""
    assert escape_hashes("#go and #rust") == "\\#go and \\#rust"
    assert escape_hashes("no tags") == "no tags"


def test_escapes_every_highlight_in_every_chapter(make_row):
    """Test that all highlights across chapters are escaped."""
    book = aggregate(
        [
            make_row(chapter="Intro", highlight="C# vs #Go"),
            make_row(chapter="Intro", highlight="plain"),
            make_row(chapter="Types", highlight="##"),
        ]
    )["Go Programming"]

    adapt_for_obsidian(book)

    highlights = [n.highlight for c in book.chapters.values() for n in c.notes]
    assert highlights == ["C\\# vs \\#Go", "plain", "\\#\\#"]


def test_touches_no_other_field(make_row):
    """Test that personal notes, URLs and titles are left alone."""
    book = aggregate(
        [make_row(title="C# Book", chapter="#1", highlight="#h", note="#mine")]
    )["C# Book"]

    adapt_for_obsidian(book)

    chapter = book.chapters["#1"]
    note = chapter.notes[0]
    assert book.title == "C# Book"
    assert chapter.title == "#1"
    assert note.personal == "#mine"
    assert note.url == "https://example.com/c#-book/#1/#h"
    assert note.highlight == "\\#h"


def test_second_adaptation_is_a_no_op(make_row):
    """Test that an adapted book is not escaped twice."""
    book = aggregate([make_row(highlight="#tag")])["Go Programming"]

    adapt_for_obsidian(book)
    adapt_for_obsidian(book)

    assert book.obsidian_adapted is True
    assert book.chapters["Intro"].notes[0].highlight == "\\#tag"


def test_returns_same_book(make_row):
    """Test that the book is adapted in place."""
    book = aggregate([make_row()])["Go Programming"]
    assert adapt_for_obsidian(book) is book
