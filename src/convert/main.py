"""
Convert a highlights CSV export into per-book Markdown notes files.

Reads the whole export, keeps the highlights of books whose title matches
the search pattern, groups them by book and chapter, and writes one
"<Title> - notes.md" file per book into the output directory.
"""

import os
from collections.abc import Callable
from pathlib import Path

from rich.markup import escape

from common.constants import NOTES_FILENAME_SUFFIX, OUTPUT_DIR_MODE
from common.logger import get_logger

from .aggregator import collect_matches
from .confirm import should_process
from .errors import OutputDirectoryError, OutputFileError
from .format_adapter import adapt_for_obsidian
from .models import Book
from .renderer import MarkdownRenderer
from .row_parser import read_rows
from .title_filter import TitleFilter

logger = get_logger(__name__)


def prepare_output_dir(output_dir: Path | None) -> Path:
    """
    Resolve the directory notes files are written to.

    Args:
        output_dir: Requested directory, or None for the current directory

    Returns:
        A directory that exists

    Raises:
        OutputDirectoryError: If the path exists but is not a directory,
            or cannot be created
    """
    if output_dir is None:
        return Path.cwd()

    if output_dir.exists():
        if not output_dir.is_dir():
            raise OutputDirectoryError(
                f"Output folder '{output_dir}' exists and is not a directory"
            )
        return output_dir

    try:
        output_dir.mkdir(mode=OUTPUT_DIR_MODE, parents=True)
    except OSError as e:
        raise OutputDirectoryError(f"Failed to create output directory: {e}") from e

    logger.debug(f"Created output directory {output_dir}")
    return output_dir


def notes_filename(title: str) -> str:
    """
    File name of a book's notes.

    Path separators in the title are replaced so the file always lands
    directly inside the output directory.
    e.g., 'Go Programming' -> 'Go Programming - notes.md'
    e.g., 'Input/Output' -> 'Input_Output - notes.md'
    """
    safe_title = title.replace("/", "_")
    if os.altsep:
        safe_title = safe_title.replace(os.altsep, "_")
    return safe_title + NOTES_FILENAME_SUFFIX


def write_book_notes(book: Book, output_dir: Path, renderer: MarkdownRenderer) -> Path:
    """
    Render a book and write it to its notes file, replacing any existing one.

    Raises:
        TemplateError: If rendering fails
        OutputFileError: If the file cannot be written
    """
    content = renderer.render(book)
    output_path = output_dir / notes_filename(book.title)

    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputFileError(f"Failed to create output file: {e}") from e

    return output_path


def convert_highlights(
    input_path: Path,
    pattern: str,
    output_dir: Path | None = None,
    allow_multiple: bool = False,
    obsidian: bool = False,
    read_line: Callable[[str], str] | None = None,
    encoding: str = "utf-8",
) -> list[Path]:
    """
    Run a full conversion.

    1. Compile the title filter
    2. Prepare the output directory
    3. Read and parse the whole CSV export
    4. Group matching rows into books
    5. For each book: confirm (when several matched), adapt for Obsidian
       if requested, render and write

    Every input error is raised before the first file is written. A failure
    while writing stops the run; files already written are left in place.

    Args:
        input_path: CSV export to read
        pattern: Case-insensitive regular expression over book titles
        output_dir: Directory for notes files (None for the current directory)
        allow_multiple: Write every matched book without asking
        obsidian: Escape highlights for Obsidian before rendering
        read_line: Reads the answer to a confirmation prompt (input() when None)
        encoding: Text encoding of the CSV export

    Returns:
        Paths of the notes files written, in match order

    Raises:
        ConversionError: On any unrecoverable error (see convert.errors)
    """
    title_filter = TitleFilter(pattern)
    renderer = MarkdownRenderer()
    output_dir = prepare_output_dir(output_dir)

    rows = read_rows(input_path, encoding=encoding)
    logger.debug(f"Parsed {len(rows)} highlight(s) from {input_path}")

    matches = collect_matches(rows, title_filter)
    if not matches:
        logger.warning(f"No books matched {escape(repr(pattern))}")
        return []

    logger.info(f"Found [bold]{len(matches)}[/bold] matching book(s)")

    written = []
    for book in matches.values():
        if not should_process(book, len(matches), allow_multiple, read_line=read_line):
            logger.info(f"Skipped {escape(repr(book.title))}")
            continue

        if obsidian:
            adapt_for_obsidian(book)

        output_path = write_book_notes(book, output_dir, renderer)
        logger.info(
            f"[green]✓[/green] Wrote [bold]{book.note_count()}[/bold] note(s) "
            f"to {escape(output_path.name)}"
        )
        written.append(output_path)

    return written
