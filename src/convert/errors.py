"""Exceptions raised by the conversion pipeline."""

from common.constants import EXIT_EMPTY_INPUT, EXIT_ERROR


class ConversionError(Exception):
    """Base exception for conversion errors.

    Each subclass carries the process exit code the CLI reports for it.
    """

    exit_code = EXIT_ERROR


class InputFileError(ConversionError):
    """Input CSV file is missing or unreadable."""

    pass


class MalformedRecordError(ConversionError):
    """A CSV record does not have the expected number of fields."""

    def __init__(self, message: str, line_number: int | None = None, field_count: int = 0):
        super().__init__(message)
        self.line_number = line_number
        self.field_count = field_count


class EmptyInputError(ConversionError):
    """Input table has no data rows after the header."""

    exit_code = EXIT_EMPTY_INPUT


class InvalidPatternError(ConversionError):
    """Search pattern is not a valid regular expression."""

    pass


class TemplateError(ConversionError):
    """A renderer template is malformed."""

    pass


class OutputDirectoryError(ConversionError):
    """Output directory cannot be used or created."""

    pass


class OutputFileError(ConversionError):
    """A notes file cannot be written."""

    pass
