"""Interactive yes/no confirmation before writing a book's notes."""

from collections.abc import Callable

from common.logger import get_logger

from .models import Book

logger = get_logger(__name__)

PROMPT_SUFFIX = "(yes/[no]) "


def ask_confirm(question: str, read_line: Callable[[str], str] | None = None) -> bool:
    """Ask a yes/no question until a recognized answer is given.

    An answer starting with 'y' or 'Y' accepts. An empty answer, or one
    starting with 'n' or 'N', declines. Anything else asks again, with no
    limit on attempts. End of input declines.

    Args:
        question: Question to show, followed by "(yes/[no]) "
        read_line: Reads one line after showing a prompt (input() when None)

    Returns:
        True if the user accepted
    """
    read_line = read_line or input
    prompt = question + PROMPT_SUFFIX
    while True:
        try:
            answer = read_line(prompt)
        except EOFError:
            logger.debug("Input closed while waiting for confirmation")
            return False

        if not answer or answer[0] in "nN":
            return False
        if answer[0] in "yY":
            return True
        prompt = "\n" + question + PROMPT_SUFFIX


def should_process(
    book: Book,
    match_count: int,
    allow_multiple: bool,
    read_line: Callable[[str], str] | None = None,
) -> bool:
    """Decide whether a matched book gets a notes file.

    The user is only asked when several books matched and multiple matches
    were not allowed up front.
    """
    if match_count <= 1 or allow_multiple:
        return True
    return ask_confirm(f'Process book "{book.title}"? ', read_line=read_line)
