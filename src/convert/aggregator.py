"""Group highlight rows into books and chapters."""

from collections.abc import Iterable

from common.logger import get_logger

from .models import HighlightRow, MatchSet
from .title_filter import TitleFilter

logger = get_logger(__name__)


def aggregate(rows: Iterable[HighlightRow]) -> MatchSet:
    """Fold rows into a mapping of book title -> Book.

    Rows are processed in order and each one becomes exactly one Note:

    - the first row of a title creates the Book (its authors and URL are
      taken from that row; later rows only contribute notes)
    - the first row of a chapter within a Book creates the Chapter
    - any other row appends its Note to the existing Chapter

    Books, chapters and notes all keep first-seen order.

    Args:
        rows: Highlight rows in export order

    Returns:
        Match set of books keyed by title
    """
    matches: MatchSet = {}

    for row in rows:
        book = matches.get(row.title)
        if book is None:
            matches[row.title] = row.to_book()
            continue

        chapter = book.chapters.get(row.chapter)
        if chapter is None:
            book.chapters[row.chapter] = row.to_chapter()
        else:
            chapter.notes.append(row.to_note())

    for book in matches.values():
        logger.debug(
            f"{book.title!r}: {len(book.chapters)} chapter(s), {book.note_count()} note(s)"
        )

    return matches


def collect_matches(rows: Iterable[HighlightRow], title_filter: TitleFilter) -> MatchSet:
    """Aggregate only the rows whose book title matches the filter."""
    return aggregate(title_filter.filter(rows))
