"""Console output for the pathmodel command line.

Wraps a Rich console with named color themes, status lines and a
key/value table for rendering structured paths.
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


class StatusType(Enum):
    """Standard status types with associated symbols."""
    ERROR = ("[x]", "error")
    WARNING = ("[!]", "warning")


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    warning: str
    error: str
    highlight: str
    path: str
    field: str


THEMES: Dict[str, ThemeColors] = {
    'manhattan': ThemeColors(
        warning='yellow',
        error='bright_red',
        highlight='bright_white',
        path='cyan',
        field='bright_blue',
    ),
    'green': ThemeColors(
        warning='yellow',
        error='red',
        highlight='bright_green',
        path='green',
        field='green4',
    ),
    'matrix': ThemeColors(
        warning='bright_yellow',
        error='bright_red',
        highlight='white',
        path='bright_green',
        field='green',
    ),
    'sunset': ThemeColors(
        warning='yellow',
        error='red3',
        highlight='light_goldenrod1',
        path='dark_orange3',
        field='orange3',
    ),
}


class ConsoleBase:
    """Themed console used by the CLI commands."""

    def __init__(self, theme: str = "manhattan", file: Optional[Any] = None):
        """Initialize console.

        Args:
            theme: Theme name from THEMES
            file: Output file (defaults to sys.stdout)
        """
        self.theme_name = theme
        self.theme_colors = THEMES.get(theme, THEMES['manhattan'])
        self.file = file or sys.stdout

        try:
            console_width = max(80, os.get_terminal_size().columns)
        except (OSError, AttributeError):
            console_width = 80

        self.console = Console(
            theme=self._create_rich_theme(),
            file=self.file,
            width=console_width,
            highlight=False,
        )

    def _create_rich_theme(self) -> Theme:
        """Map theme colors onto Rich style names."""
        colors = self.theme_colors
        return Theme({
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "highlight": f"bold {colors.highlight}",
            "path": colors.path,
            "field": colors.field,
        })

    def print_status(self, status: StatusType, message: str):
        """Print a status line with icon."""
        icon, style = status.value

        status_text = Text()
        status_text.append(f"{icon} ", style=style)
        status_text.append(message)
        self.console.print(status_text, soft_wrap=True)

    def print_error(self, message: str):
        """Print an error message."""
        self.print_status(StatusType.ERROR, message)

    def print_warning(self, message: str):
        """Print a warning message."""
        self.print_status(StatusType.WARNING, message)

    def print_path(self, label: str, value: str):
        """Print a labelled path string on one line."""
        text = Text()
        text.append(f"{label}: ", style="field")
        text.append(value, style="path")
        self.console.print(text, soft_wrap=True)

    def print_table(self, title: str, rows: List[Tuple[str, str]]):
        """Print a two-column field/value table."""
        table = Table(title=title, show_header=True, header_style="highlight")
        table.add_column("Field", style="field", no_wrap=True)
        table.add_column("Value", style="path", overflow="fold")
        for name, value in rows:
            # Text keeps "[" in paths from being read as markup
            table.add_row(name, Text(value))
        self.console.print(table)

    def print_exception(self):
        """Print the current exception traceback."""
        self.console.print_exception()
