"""Rich Console factory and theme for graphedit output.

Consoles render into a StringIO buffer so renderers keep a
``str``-returning contract. Without a terminal (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPH_THEME = Theme(
    {
        "ge.ok": "bold green",
        "ge.error": "bold red",
        "ge.warning": "bold yellow",
        "ge.op": "bold cyan",
        "ge.key": "dim",
        "ge.id": "bold blue",
        "ge.label": "bold",
        "ge.weight": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
