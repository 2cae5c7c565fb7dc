"""Rich Console factory and theme for wirecoerce output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  Outside a terminal (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WIRE_THEME = Theme(
    {
        "wire.ok": "bold green",
        "wire.error": "bold red",
        "wire.warning": "bold yellow",
        "wire.op": "bold cyan",
        "wire.key": "dim",
        "wire.model": "bold blue",
        "wire.kind.primitive": "green",
        "wire.kind.container": "magenta",
        "wire.kind.object": "bold blue",
    }
)

_KIND_STYLES: dict[str, str] = {
    "List": "wire.kind.container",
    "Mapping": "wire.kind.container",
    "Object": "wire.kind.object",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=WIRE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style for a descriptor kind name."""
    return _KIND_STYLES.get(kind, "wire.kind.primitive")
