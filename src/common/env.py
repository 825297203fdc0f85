"""Environment configuration interface for highlights-to-md.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import TRUTHY_VALUES

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Log level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def output_dir() -> Path | None:
        """Get the directory notes files are written to.

        Returns:
            Output directory, or None to use the current working directory
        """
        value = os.getenv("HIGHLIGHTS_OUTPUT_DIR", "")
        return Path(value) if value else None

    @staticmethod
    def obsidian_mode() -> bool:
        """Check whether Obsidian mode is enabled by default.

        Returns:
            True if HIGHLIGHTS_OBSIDIAN holds a truthy value, defaults to False
        """
        return os.getenv("HIGHLIGHTS_OBSIDIAN", "").strip().lower() in TRUTHY_VALUES

    @staticmethod
    def input_encoding() -> str:
        """Get the text encoding of the input CSV file.

        Returns:
            Encoding name, defaults to 'utf-8'
        """
        return os.getenv("HIGHLIGHTS_ENCODING", "utf-8")


# Singleton instance for convenient access
env = Environment()
