"""Case-insensitive book title matching."""

import re
from collections.abc import Iterable, Iterator

from common.logger import get_logger

from .errors import InvalidPatternError
from .models import HighlightRow

logger = get_logger(__name__)


class TitleFilter:
    """Select rows whose book title matches a search pattern.

    The pattern is a regular expression compiled once, case-insensitively,
    and searched anywhere in the title, so a plain word acts as a substring
    match.
    """

    def __init__(self, pattern: str):
        """Compile the search pattern.

        Args:
            pattern: Regular expression to search book titles for

        Raises:
            InvalidPatternError: If the pattern is empty or does not compile
        """
        if not pattern:
            raise InvalidPatternError("Search term is required")
        try:
            self._regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidPatternError(f"Failed to compile search pattern {pattern!r}: {e}") from e
        self.pattern = pattern

    def matches(self, title: str) -> bool:
        return self._regex.search(title) is not None

    def filter(self, rows: Iterable[HighlightRow]) -> Iterator[HighlightRow]:
        """Yield the rows whose title matches, in input order."""
        for row in rows:
            if self.matches(row.title):
                yield row
            else:
                logger.debug(f"Skipping highlight from {row.title!r}")
