"""Logging utilities with rich console output.

Every module gets its logger from here so that CLI runs and tests share the
same handler setup.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Processing file...")
    logger.warning("Snippet never closed")
    logger.error("Failed to write snippet", exc_info=True)
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instances for consistent output
console = Console()
err_console = Console(stderr=True)


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.

    Returns:
        Configured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing: ./app.js --> snippets/app")
        Processing: ./app.js --> snippets/app
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler())

    # pytest caplog captures through propagation
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Setup logging configuration for a whole CLI run.

    Call once from the entry point, before any work is done. Module loggers
    from get_logger() print to the console themselves, so the root logger
    only receives the optional file handler.

    Args:
        level: Default logging level; LOG_LEVEL overrides it
        log_file: Optional file path to also log to a file
    """
    import os

    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Wrote 3 snippets")
        ✓ Wrote 3 snippets
    """
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error message with red X icon to stderr.

    Example:
        >>> error("Snippet greet in app.js has unmatched START/END tags")
        ✗ Snippet greet in app.js has unmatched START/END tags
    """
    err_console.print(f"[red]✗[/red] {message}")
