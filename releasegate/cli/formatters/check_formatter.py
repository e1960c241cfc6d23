from rich.console import Console
from rich.text import Text

from releasegate.cli.theme import theme

HEADER_WIDTH = 80


def format_header(name: str) -> str:
    """'== <name> ' padded with '=' to HEADER_WIDTH; longer names are not cut."""
    return f"== {name} ".ljust(HEADER_WIDTH, "=")


def format_complete_line(name: str, message: str | None = None) -> str:
    return f"OK ... {name}{': ' + message if message else ''}"


def format_start(console: Console, name: str) -> None:
    console.print(Text(format_header(name)), soft_wrap=True)


def format_complete(console: Console, name: str, message: str | None = None) -> None:
    console.print(Text(format_complete_line(name, message), style=theme.SUCCESS), soft_wrap=True)


def format_error(console: Console, message: str) -> None:
    console.print(Text(f"[Error] {message}", style=theme.ERROR), soft_wrap=True)
