"""Terminal styling for the text report."""

from typing import Dict, Optional, Protocol, TextIO

from rich.console import Console
from rich.text import Text

ROLE_STYLES: Dict[str, str] = {
    "title": "bold cyan",
    "header": "bold green",
    "info": "white",
    "alert": "bright_red",
    "ok": "bright_green",
}


class Styler(Protocol):
    def style(self, text: str, role: str) -> str:
        ...


class PlainStyler:
    """Styler that leaves text untouched."""

    def style(self, text: str, role: str) -> str:
        return text


class RichStyler:
    """Styler that renders roles through a rich console."""

    def __init__(self, console: Console):
        self.console = console

    def style(self, text: str, role: str) -> str:
        with self.console.capture() as capture:
            self.console.print(Text(text, style=ROLE_STYLES.get(role, "")), end="", soft_wrap=True)
        return capture.get()


def get_styler(stream: Optional[TextIO] = None) -> Styler:
    """
    Pick a styler for the given output stream.

    Colors are only used when rich detects an interactive terminal.
    """
    console = Console(file=stream, highlight=False)
    if console.is_terminal:
        return RichStyler(console)
    return PlainStyler()
