"""Utility functions."""

from .logging_config import configure_logging
from .terminal import (
    create_table,
    format_level_color,
    format_percent,
    format_status,
    html_to_text,
)

__all__ = [
    "configure_logging",
    "create_table",
    "format_level_color",
    "format_percent",
    "format_status",
    "html_to_text",
]
