"""Logging configuration helpers."""

import logging

from rich.logging import RichHandler


def configure_logging(debug: bool = False) -> logging.Logger:
    """Route package logging through rich and return the package logger."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
    return logging.getLogger("leetcode_py")
