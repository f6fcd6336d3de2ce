"""Rich consoles and message helpers shared by CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from skillscout import __version__

VERSION = __version__

THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "skill.name": "bold cyan",
        "score": "magenta",
        "dim": "dim",
    }
)

console = Console(theme=THEME)
# Progress spinners and errors go to stderr to keep stdout clean for --json.
stderr_console = Console(theme=THEME, stderr=True)


def print_success(message: str) -> None:
    console.print(f"[success]✓ {escape(message)}[/success]")


def print_warning(message: str) -> None:
    stderr_console.print(f"[warning]! {escape(message)}[/warning]")


def print_error(message: str) -> None:
    stderr_console.print(f"[error]✗ {escape(message)}[/error]")


__all__ = [
    "VERSION",
    "console",
    "stderr_console",
    "print_success",
    "print_warning",
    "print_error",
]
