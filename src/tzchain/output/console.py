"""Rich Console factory and theme for tzchain output.

Consoles render into a StringIO buffer so renderers return plain strings.
Outside a terminal (tests, pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZ_THEME = Theme(
    {
        "tz.ok": "bold green",
        "tz.error": "bold red",
        "tz.op": "bold cyan",
        "tz.key": "dim",
        "tz.zone": "bold blue",
        "tz.ahead": "green",
        "tz.behind": "yellow",
        "tz.even": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_offset(value: int) -> str:
    """Style name for a signed diff: ahead, behind, or even."""
    if value > 0:
        return "tz.ahead"
    if value < 0:
        return "tz.behind"
    return "tz.even"
