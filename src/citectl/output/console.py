"""Rich Console factory and theme for citectl output.

Consoles render to a StringIO buffer so renderers keep a
``-> str`` contract. In non-TTY environments (tests, pipes) Rich
drops color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CITE_THEME = Theme(
    {
        "cite.ok": "bold green",
        "cite.error": "bold red",
        "cite.warning": "bold yellow",
        "cite.op": "bold cyan",
        "cite.key": "dim",
        "cite.name": "bold",
        "cite.severity.small": "yellow",
        "cite.severity.medium": "dark_orange",
        "cite.severity.large": "bold red",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "Small": "cite.severity.small",
    "Medium": "cite.severity.medium",
    "Large": "cite.severity.large",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=CITE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(label: str) -> str:
    return _SEVERITY_STYLES.get(label, "")
