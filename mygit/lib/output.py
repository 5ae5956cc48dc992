"""Colored terminal output for the menu."""

import logging

from rich.console import Console

from mygit.git.runner import GitResult

logger = logging.getLogger(__name__)

console = Console()


def configure(color: str) -> None:
    """Rebuild the console for a color mode: auto, always or never."""
    global console
    if color == "always":
        console = Console(force_terminal=True)
    elif color == "never":
        console = Console(no_color=True)
    else:
        console = Console()


def _line(text: str, style: str | None = None) -> None:
    # Git output and branch names may contain [brackets]; print verbatim
    console.print(text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)


def plain(text: str = "") -> None:
    _line(text)


def info(text: str) -> None:
    _line(text, "blue")


def success(text: str) -> None:
    _line(f"✔ {text}", "green")


def warn(text: str) -> None:
    _line(f"! {text}", "yellow")


def error(text: str) -> None:
    _line(f"✖ {text}", "red")


def detail(text: str) -> None:
    _line(text, "dim")


def file_list(title: str, files: list[str], style: str) -> None:
    """Print a heading and an indented list of paths."""
    _line(f"{title} ({len(files)}):", style)
    for path in files:
        _line(f"  {path}", style)


def report_failure(operation: str, result: GitResult) -> None:
    """Show why a git operation failed and log it."""
    logger.warning(
        f"{operation} failed (exit {result.returncode}): {result.message}"
    )
    error(f"{operation} failed: {result.message}")
    if result.detail:
        detail(result.detail)
