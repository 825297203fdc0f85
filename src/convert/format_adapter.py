"""Adapt book notes to Obsidian's Markdown conventions."""

from .models import Book


def escape_hashes(text: str) -> str:
    """Escape '#' so Obsidian does not read it as a tag."""
    return text.replace("#", "\\#")


def adapt_for_obsidian(book: Book) -> Book:
    """Escape every highlight of the book in place.

    Escaping is not idempotent, so the book is flagged once adapted and
    further calls leave it untouched. Personal notes, URLs and titles are
    never changed.

    Returns:
        The same book, for chaining
    """
    if book.obsidian_adapted:
        return book

    for chapter in book.chapters.values():
        for note in chapter.notes:
            note.highlight = escape_hashes(note.highlight)

    book.obsidian_adapted = True
    return book
