"""Render a book's notes as a Markdown document.

Templates are plain str.format strings. A document is the book template
followed by, for each chapter, the chapter template and then the note
template once per note. The note template's {personal} field is filled with
the personal template when the note has an annotation, and left empty
otherwise.
"""

import string

from .errors import TemplateError
from .models import Book, Chapter, Note

BOOK_TEMPLATE = "# {title}\n- Authors: {authors}\n- URL: {url}"
CHAPTER_TEMPLATE = "\n\n## {title}\n- URL: {url}\n"
NOTE_TEMPLATE = '\n"{highlight}" ([link]({url}))\n{personal}\n'
PERSONAL_TEMPLATE = "> {personal}"

# Fields each template may reference
_BOOK_FIELDS = frozenset({"title", "authors", "url"})
_CHAPTER_FIELDS = frozenset({"title", "url"})
_NOTE_FIELDS = frozenset({"highlight", "personal", "url"})
_PERSONAL_FIELDS = frozenset({"personal"})


def _check_template(name: str, template: str, allowed: frozenset[str]) -> None:
    """Raise TemplateError unless template parses and only uses allowed fields."""
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as e:
        raise TemplateError(f"Failed to parse {name} template: {e}") from e

    for _literal, field_name, _spec, _conversion in parsed:
        if field_name is None:
            continue
        base = field_name.split(".", 1)[0].split("[", 1)[0]
        if base not in allowed:
            raise TemplateError(
                f"{name} template references unknown field {{{field_name}}}; "
                f"expected one of {', '.join(sorted(allowed))}"
            )


class MarkdownRenderer:
    """Render books through a fixed set of templates.

    Rendering is a pure function of the Book: the same book always renders
    to the same text.
    """

    def __init__(
        self,
        book_template: str = BOOK_TEMPLATE,
        chapter_template: str = CHAPTER_TEMPLATE,
        note_template: str = NOTE_TEMPLATE,
        personal_template: str = PERSONAL_TEMPLATE,
    ):
        """Check and store the templates.

        Raises:
            TemplateError: If a template is malformed or uses an unknown field
        """
        _check_template("book", book_template, _BOOK_FIELDS)
        _check_template("chapter", chapter_template, _CHAPTER_FIELDS)
        _check_template("note", note_template, _NOTE_FIELDS)
        _check_template("personal", personal_template, _PERSONAL_FIELDS)

        self.book_template = book_template
        self.chapter_template = chapter_template
        self.note_template = note_template
        self.personal_template = personal_template

    def render(self, book: Book) -> str:
        """Render a book, its chapters and their notes in stored order.

        Raises:
            TemplateError: If a template fails while being filled in
        """
        parts = [
            self._fill(self.book_template, title=book.title, authors=book.authors, url=book.url)
        ]
        for chapter in book.chapters.values():
            parts.append(self._render_chapter(chapter))
        return "".join(parts)

    def _render_chapter(self, chapter: Chapter) -> str:
        parts = [self._fill(self.chapter_template, title=chapter.title, url=chapter.url)]
        parts.extend(self._render_note(note) for note in chapter.notes)
        return "".join(parts)

    def _render_note(self, note: Note) -> str:
        personal = ""
        if note.personal:
            personal = self._fill(self.personal_template, personal=note.personal)
        return self._fill(
            self.note_template, highlight=note.highlight, personal=personal, url=note.url
        )

    @staticmethod
    def _fill(template: str, **fields: str) -> str:
        try:
            return template.format(**fields)
        except (KeyError, IndexError, AttributeError, ValueError) as e:
            raise TemplateError(f"Failed to execute template: {e}") from e


# Renderer with the default templates
default_renderer = MarkdownRenderer()


def render_book(book: Book) -> str:
    """Render a book with the default templates."""
    return default_renderer.render(book)
