"""Rich Console factory and theme for albumctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ALBUM_THEME = Theme(
    {
        "album.ok": "bold green",
        "album.error": "bold red",
        "album.warning": "bold yellow",
        "album.op": "bold cyan",
        "album.key": "dim",
        "album.value": "bold",
        "album.valid": "green",
        "album.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ALBUM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_validity(valid: bool) -> str:
    """Return the Rich style name for a valid/invalid verdict."""
    return "album.valid" if valid else "album.invalid"
