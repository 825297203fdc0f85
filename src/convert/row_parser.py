"""Read the highlights CSV export and parse its records into rows.

The export is comma-separated, starts with a header record, and every record
(header included) has exactly nine fields:

    title, authors, chapter, date, book URL, chapter URL,
    highlight URL, highlight, note
"""

import csv
from collections.abc import Sequence
from pathlib import Path

from common.constants import CSV_FIELD_SIZE_LIMIT, EXPECTED_FIELD_COUNT
from common.logger import get_logger

from .errors import EmptyInputError, InputFileError, MalformedRecordError
from .models import HighlightRow

logger = get_logger(__name__)


def parse_row(fields: Sequence[str], line_number: int | None = None) -> HighlightRow:
    """Build a HighlightRow from one CSV record.

    Args:
        fields: The record's fields, in export order
        line_number: Line of the record in the input file, used in errors

    Returns:
        The parsed row. Empty fields are kept as empty strings.

    Raises:
        MalformedRecordError: If the record does not have exactly nine fields
    """
    if len(fields) != EXPECTED_FIELD_COUNT:
        raise MalformedRecordError(
            _field_count_message(len(fields), line_number),
            line_number=line_number,
            field_count=len(fields),
        )
    return HighlightRow(*fields)


def _field_count_message(count: int, line_number: int | None) -> str:
    where = f"record on line {line_number}" if line_number is not None else "record"
    return f"{where} has {count} field(s), expected {EXPECTED_FIELD_COUNT}"


def read_records(path: Path, encoding: str = "utf-8") -> list[tuple[int, list[str]]]:
    """Read every record of a CSV file, checking field counts.

    Args:
        path: CSV file to read
        encoding: Text encoding of the file

    Returns:
        List of (line_number, fields) tuples, header included. Blank lines
        are skipped.

    Raises:
        InputFileError: If the file cannot be opened or decoded
        MalformedRecordError: If a record has the wrong number of fields
            or the CSV syntax is invalid
    """
    csv.field_size_limit(CSV_FIELD_SIZE_LIMIT)

    records = []
    try:
        with open(path, encoding=encoding, newline="") as f:
            reader = csv.reader(f)
            try:
                for fields in reader:
                    if not fields:
                        continue
                    if len(fields) != EXPECTED_FIELD_COUNT:
                        raise MalformedRecordError(
                            _field_count_message(len(fields), reader.line_num),
                            line_number=reader.line_num,
                            field_count=len(fields),
                        )
                    records.append((reader.line_num, fields))
            except csv.Error as e:
                raise MalformedRecordError(
                    f"invalid CSV on line {reader.line_num}: {e}", line_number=reader.line_num
                ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(f"Failed to read CSV file {path}: {e}") from e

    logger.debug(f"Read {len(records)} record(s) from {path}")
    return records


def read_rows(path: Path, encoding: str = "utf-8") -> list[HighlightRow]:
    """Read the highlights export and parse every data record.

    The first record is the header and is discarded.

    Raises:
        InputFileError: If the file cannot be read
        MalformedRecordError: If any record is malformed
        EmptyInputError: If there are no records after the header
    """
    records = read_records(path, encoding=encoding)
    if len(records) < 2:
        raise EmptyInputError(f"No highlights found in {path}")

    return [parse_row(fields, line_number) for line_number, fields in records[1:]]
