"""Shared utility functions for packgen.

Provides Rich-based console reporting, the idempotent prepend used on the
server bundle entry file and small formatting helpers.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def prepend_to_file_if_text_not_present(
    file: str | Path,
    text_to_prepend: str,
    regex: str | re.Pattern[str],
) -> bool:
    """Prepend *text_to_prepend* to *file* unless *regex* already matches.

    Args:
        file: The file to modify in place.
        text_to_prepend: Text inserted at the very start of the file.
        regex: Pattern searched in the current content.  A match means the
            text is already there and nothing is written.

    Returns:
        ``True`` if the file was rewritten, ``False`` otherwise (including
        when the file does not exist).
    """
    file_path = Path(file)
    if not file_path.is_file():
        print_warning(f"File {file_path} does not exist")
        return False

    content = file_path.read_text(encoding="utf-8")
    if re.search(regex, content):
        return False

    file_path.write_text(text_to_prepend + content, encoding="utf-8")
    console.print(escape(f"Prepended\n{text_to_prepend}to {file_path}."), highlight=False)
    return True


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.0421) -> "42ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_generated(label: str, path: str | Path, color: str = "yellow") -> None:
    """Print a ``<label>: <path>`` notice for a freshly written file."""
    console.print(f"[{color}]{label}: {escape(str(path))}[/{color}]", highlight=False)
