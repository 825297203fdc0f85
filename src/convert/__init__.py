"""Convert highlights exports into Markdown notes."""

from .aggregator import aggregate, collect_matches
from .errors import ConversionError
from .main import convert_highlights
from .models import Book, Chapter, HighlightRow, MatchSet, Note
from .renderer import MarkdownRenderer, render_book
from .title_filter import TitleFilter

__all__ = [
    "Book",
    "Chapter",
    "ConversionError",
    "HighlightRow",
    "MarkdownRenderer",
    "MatchSet",
    "Note",
    "TitleFilter",
    "aggregate",
    "collect_matches",
    "convert_highlights",
    "render_book",
]
