"""Data models for highlights and the books they are grouped into."""

from dataclasses import dataclass, field


def _strip_newlines(text: str) -> str:
    return text.replace("\n", "")


@dataclass(frozen=True)
class HighlightRow:
    """One record of the highlights export."""

    title: str
    authors: str
    chapter: str
    date: str
    book_url: str
    chapter_url: str
    highlight_url: str
    highlight: str
    note: str

    def to_note(self) -> "Note":
        return Note(
            highlight=_strip_newlines(self.highlight),
            personal=_strip_newlines(self.note),
            url=self.highlight_url,
        )

    def to_chapter(self) -> "Chapter":
        return Chapter(title=self.chapter, url=self.chapter_url, notes=[self.to_note()])

    def to_book(self) -> "Book":
        return Book(
            title=self.title,
            authors=self.authors,
            url=self.book_url,
            chapters={self.chapter: self.to_chapter()},
        )


@dataclass
class Note:
    """A highlight, the reader's own annotation on it and a link back to it."""

    highlight: str
    personal: str
    url: str


@dataclass
class Chapter:
    """Notes sharing a chapter title, in input order."""

    title: str
    url: str
    notes: list[Note] = field(default_factory=list)


@dataclass
class Book:
    """All chapters of one book title.

    Authors and URL come from the first row seen for the title. Chapters keep
    the order in which they were first seen.
    """

    title: str
    authors: str
    url: str
    chapters: dict[str, Chapter] = field(default_factory=dict)
    obsidian_adapted: bool = False  # set once highlights are escaped for Obsidian

    def note_count(self) -> int:
        """Total number of notes across all chapters."""
        return sum(len(chapter.notes) for chapter in self.chapters.values())


# Book title -> Book, in first-seen order
MatchSet = dict[str, Book]
