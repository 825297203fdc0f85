"""Logging utilities with rich console output.

Every module logs through a named logger backed by rich's RichHandler, so
CLI messages and tracebacks share one console.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Reading highlights...")
    logger.warning("No books matched")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from common.env import env

# Global console instance for consistent output
console = Console()
error_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Wrote 2 notes files")
        Wrote 2 notes files
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Propagate so pytest's caplog sees the records
    logger.propagate = True

    return logger


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Apply one logging level to every module logger, at the CLI entry point.

    Module loggers own their console handler (see get_logger), so the root
    logger only gets a file handler when log_file is given.

    Args:
        level: Logging level; LOG_LEVEL is used when omitted
        log_file: Optional file path to also log to a file
    """
    level = (level or env.log_level()).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    for logger in logging.Logger.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and logger.handlers:
            logger.setLevel(level)


def success(message: str) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("Wrote Go Programming - notes.md")
        ✓ Wrote Go Programming - notes.md
    """
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    """Print an error message with a red X icon to stderr.

    Example:
        >>> error("Failed to read CSV file")
        ✗ Failed to read CSV file
    """
    error_console.print(f"[red]✗[/red] {escape(message)}", highlight=False)
