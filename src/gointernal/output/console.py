"""Rich Console factory and theme for gointernal output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (pipes, CliRunner) Rich drops
the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GI_THEME = Theme(
    {
        "gi.ok": "bold green",
        "gi.error": "bold red",
        "gi.warning": "bold yellow",
        "gi.op": "bold cyan",
        "gi.key": "dim",
        "gi.path": "bold",
        "gi.position": "dim",
        "gi.specifier": "magenta",
        "gi.reason": "cyan",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "error": "gi.error",
    "warning": "gi.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=GI_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    """Return the Rich style name for an issue severity."""
    return _SEVERITY_STYLES.get(severity, "")
