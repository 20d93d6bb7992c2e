"""Rich console used to render command results.

Output is drawn into a StringIO and returned as text so ``AppContext.emit``
can choose stdout or stderr afterwards. Color swatches are painted with a
dynamic ``on #rrggbb`` background next to the ``kit.hex`` label.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 100

KIT_THEME = Theme(
    {
        "kit.ok": "bold green",
        "kit.error": "bold red",
        "kit.op": "bold cyan",
        "kit.key": "dim",
        "kit.value": "bold",
        "kit.hex": "bold magenta",
        "kit.timing": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing into a fresh buffer with the snippetkit theme."""
    return Console(
        file=StringIO(),
        theme=KIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text rendered so far into a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
