"""Shared Rich consoles.

Comparison output goes to ``console`` (stdout) and problems go to
``err_console`` (stderr). File content is printed without markup or
highlighting so brackets and numbers in compared files come out
verbatim.
"""

import sys

from rich.console import Console
from rich.markup import escape

from pyfc.core.theme import get_theme


def _color_system() -> str:
    """Full hex colors on a terminal, Rich's own detection elsewhere."""
    return "truecolor" if sys.stdout.isatty() else "auto"


console = Console(theme=get_theme(), color_system=_color_system(), highlight=False)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_color_system(), highlight=False
)


def print_plain(text: str, style: str | None = None) -> None:
    """Print text verbatim, without markup, highlighting or wrapping."""
    console.print(text, style=style, markup=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message on stderr; the message is not markup."""
    err_console.print(f"[error]Error:[/] {escape(message)}", soft_wrap=True)
