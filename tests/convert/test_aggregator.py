"""Tests for grouping rows into books and chapters."""

from convert.aggregator import aggregate, collect_matches
from convert.title_filter import TitleFilter


def test_same_chapter_keeps_note_order(make_row):
    """Test that notes of one chapter keep input order."""
    rows = [make_row(highlight=h) for h in ["A", "B", "C"]]

    matches = aggregate(rows)

    chapter = matches["Go Programming"].chapters["Intro"]
    assert [note.highlight for note in chapter.notes] == ["A", "B", "C"]


def test_same_book_same_chapter_groups_into_one_chapter(make_row):
    """Test that two rows with identical book and chapter share a chapter."""
    matches = aggregate([make_row(highlight="H1"), make_row(highlight="H2")])

    assert list(matches) == ["Go Programming"]
    book = matches["Go Programming"]
    assert list(book.chapters) == ["Intro"]
    assert len(book.chapters["Intro"].notes) == 2


def test_same_book_different_chapters(make_row):
    """Test that different chapter titles create separate chapters."""
    matches = aggregate([make_row(chapter="Intro"), make_row(chapter="Types")])

    book = matches["Go Programming"]
    assert list(book.chapters) == ["Intro", "Types"]
    assert book.chapters["Types"].url == "https://example.com/go-programming/types"


def test_chapters_keep_first_seen_order(make_row):
    """Test that chapters are ordered by first appearance, not sorted."""
    rows = [
        make_row(chapter="Zeta", highlight="1"),
        make_row(chapter="Alpha", highlight="2"),
        make_row(chapter="Zeta", highlight="3"),
    ]

    book = aggregate(rows)["Go Programming"]

    assert list(book.chapters) == ["Zeta", "Alpha"]
    assert [n.highlight for n in book.chapters["Zeta"].notes] == ["1", "3"]


def test_books_keep_first_seen_order(make_row):
    """Test that the match set iterates books in first-seen order."""
    rows = [
        make_row(title="Zen"),
        make_row(title="Algorithms"),
        make_row(title="Zen", chapter="Two"),
    ]

    assert list(aggregate(rows)) == ["Zen", "Algorithms"]


def test_book_fields_come_from_first_row(make_row):
    """Test that later rows only contribute notes, not book metadata."""
    rows = [
        make_row(authors="First Author"),
        make_row(authors="Other Author", highlight="H2"),
    ]

    book = aggregate(rows)["Go Programming"]

    assert book.authors == "First Author"
    assert book.note_count() == 2


def test_every_row_becomes_exactly_one_note(make_row):
    """Test that no note is dropped or duplicated."""
    rows = [
        make_row(title=title, chapter=chapter, highlight=f"{title}-{chapter}-{i}")
        for i, (title, chapter) in enumerate(
            [("A", "1"), ("B", "1"), ("A", "2"), ("A", "1"), ("B", "3"), ("A", "2")]
        )
    ]

    matches = aggregate(rows)

    highlights = [
        note.highlight
        for book in matches.values()
        for chapter in book.chapters.values()
        for note in chapter.notes
    ]
    assert sorted(highlights) == sorted(row.highlight for row in rows)
    assert sum(book.note_count() for book in matches.values()) == len(rows)


def test_note_strips_newlines(make_row):
    """Test that highlight and personal text lose their newlines."""
    row = make_row(highlight="line one\nline two", note="my\nnote")

    note = aggregate([row])["Go Programming"].chapters["Intro"].notes[0]

    assert note.highlight == "line oneline two"
    assert note.personal == "mynote"
    assert note.url == row.highlight_url


def test_empty_input():
    """Test that no rows produce an empty match set."""
    assert aggregate([]) == {}


def test_collect_matches_only_aggregates_matching_rows(make_row):
    """Test that non-matching rows create no notes."""
    rows = [
        make_row(title="Go Programming", highlight="H1"),
        make_row(title="Rust in Action", highlight="H2"),
        make_row(title="Learning Go", highlight="H3"),
    ]

    matches = collect_matches(rows, TitleFilter("go"))

    assert list(matches) == ["Go Programming", "Learning Go"]
    assert sum(book.note_count() for book in matches.values()) == 2
