"""Environment configuration interface for snippet-separator.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import DEFAULT_EXCLUDE, DEFAULT_EXTENSION, DEFAULT_OUTPUT_DIR

# Load environment variables from .env file if it exists
load_dotenv()


def with_leading_dot(extension: str) -> str:
    """Normalize an extension such as 'ts' to '.ts'."""
    return extension if extension.startswith(".") else f".{extension}"


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def source_root() -> Path:
        """Get the directory scanned for source files.

        Returns:
            Source root, defaults to the current directory
        """
        return Path(os.getenv("SNIPPETS_ROOT", "."))

    @staticmethod
    def output_dir() -> Path:
        """Get the output root for generated snippet files.

        A relative value is resolved against the source root by the caller.

        Returns:
            Output directory, defaults to 'snippets'
        """
        return Path(os.getenv("SNIPPETS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR))

    @staticmethod
    def extension() -> str:
        """Get the source file extension to scan.

        Returns:
            Extension including the leading dot, defaults to '.js'
        """
        return with_leading_dot(os.getenv("SNIPPETS_EXTENSION", DEFAULT_EXTENSION))

    @staticmethod
    def exclude() -> str:
        """Get the path segment excluded from discovery.

        Returns:
            Excluded segment, defaults to 'node_modules'
        """
        return os.getenv("SNIPPETS_EXCLUDE", DEFAULT_EXCLUDE)

    @staticmethod
    def duplicates() -> str:
        """Get the policy for repeated snippet names within one file.

        Returns:
            'error' or 'overwrite', defaults to 'error'
        """
        return os.getenv("SNIPPETS_DUPLICATES", "error").lower()

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
