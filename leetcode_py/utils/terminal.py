"""Utility functions for terminal output."""

import math
from typing import Optional

from bs4 import BeautifulSoup
from rich.table import Table


def create_table(title: Optional[str], headers: list, styles: Optional[dict] = None) -> Table:
    """Create a formatted table; ``styles`` maps a header to its column style."""
    styles = styles or {}
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header, style=styles.get(header))
    return table


def format_level_color(level: int) -> str:
    """Format a difficulty level with appropriate color."""
    if level == 1:
        return "[green]Easy[/green]"
    elif level == 2:
        return "[yellow]Medium[/yellow]"
    elif level == 3:
        return "[red]Hard[/red]"
    else:
        return "Unknown"


def format_status(status: str) -> str:
    """Format a problem status as a short marker."""
    if status == "ac":
        return "[green]✔[/green]"
    elif status == "notac":
        return "[yellow]✘[/yellow]"
    else:
        return ""


def format_percent(percent: float) -> str:
    """Acceptance percent, '-' when there is no data."""
    if math.isnan(percent):
        return "-"
    return f"{percent:.1f}%"


def html_to_text(html: str) -> str:
    """Render question HTML as plain text."""
    soup = BeautifulSoup(html, "html.parser")
    for sup in soup.find_all("sup"):
        sup.replace_with(f"^{sup.get_text()}")
    text = soup.get_text()
    lines = [line.rstrip() for line in text.splitlines()]
    # collapse runs of blank lines
    result = []
    for line in lines:
        if line or (result and result[-1]):
            result.append(line)
    return "\n".join(result).strip()
