"""Shared constants for highlights-to-md.

For environment-based configuration (output directory, Obsidian mode, etc.),
use the env module:
    from common.env import env
    output_dir = env.output_dir()
"""

PROGRAM_NAME = "highlights2md"

# Every CSV record (header included) carries these columns, in this order
CSV_COLUMNS: tuple[str, ...] = (
    "title",
    "authors",
    "chapter",
    "date",
    "book_url",
    "chapter_url",
    "highlight_url",
    "highlight",
    "note",
)
EXPECTED_FIELD_COUNT = len(CSV_COLUMNS)

# Output files are named "<Title> - notes.md"
NOTES_FILENAME_SUFFIX = " - notes.md"

# Mode for output directories created on demand
OUTPUT_DIR_MODE = 0o770

# Process exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_EMPTY_INPUT = 3  # argparse uses 2 for usage errors

# Strings accepted as "true" for boolean environment variables
TRUTHY_VALUES: set[str] = {"1", "true", "yes", "on"}

# Largest CSV field accepted; the csv module's default cap is 128 KiB
CSV_FIELD_SIZE_LIMIT = 2**31 - 1
