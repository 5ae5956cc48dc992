"""
Line-oriented prompts for the interactive menu.

Every prompt requires stdin to be a terminal. EOF and Ctrl-C abort the
current question.
"""

import sys
from typing import Callable

Validator = Callable[[str], str | None]


class NonInteractiveError(Exception):
    """Prompting was attempted without an interactive terminal."""

    def __init__(self):
        super().__init__("mygit needs an interactive terminal (stdin is not a TTY)")


class PromptAborted(Exception):
    """User aborted a prompt with EOF or Ctrl-C."""


def _ask(display: str) -> str:
    if not sys.stdin.isatty():
        raise NonInteractiveError()
    try:
        return input(display)
    except (EOFError, KeyboardInterrupt):
        print()
        raise PromptAborted() from None


def non_blank(field: str) -> Validator:
    """Build a validator rejecting empty or whitespace-only answers."""
    def check(value: str) -> str | None:
        if not value.strip():
            return f"{field} cannot be empty"
        return None
    return check


def prompt_text(message: str, default: str = "", validate: Validator | None = None) -> str:
    """Prompt for a line of text with optional default and validation.

    Invalid answers print the validator's message and ask again.
    """
    if default:
        display = f"{message} [{default}]: "
    else:
        display = f"{message}: "

    while True:
        value = _ask(display).strip() or default
        problem = validate(value) if validate else None
        if problem is None:
            return value
        print(f"  {problem}")


def prompt_choice(message: str, choices: list[tuple], default=None):
    """Prompt user to select from numbered choices.

    Args:
        message: Prompt message
        choices: List of (value, label) tuples
        default: Value selected when the user just presses Enter

    Returns:
        Selected value
    """
    values = [value for value, _ in choices]
    default_idx = values.index(default) + 1 if default in values else None

    print(f"\n{message}")
    for i, (value, label) in enumerate(choices, 1):
        marker = "*" if i == default_idx else " "
        print(f"  {marker}{i}. {label}")

    hint = f"1-{len(choices)}"
    if default_idx:
        hint += f", default={default_idx}"

    while True:
        selection = _ask(f"Select [{hint}]: ").strip()
        if not selection and default_idx:
            return values[default_idx - 1]
        try:
            idx = int(selection)
        except ValueError:
            print("Please enter a valid number")
            continue
        if 1 <= idx <= len(choices):
            return values[idx - 1]
        print(f"Please enter a number between 1 and {len(choices)}")


def prompt_bool(message: str, default: bool = False) -> bool:
    """Prompt user for yes/no answer."""
    default_str = "Y/n" if default else "y/N"
    value = _ask(f"{message} [{default_str}]: ").strip().lower()
    if not value:
        return default
    return value in ("y", "yes")


def pause(message: str = "Press Enter to continue") -> None:
    """Wait for the user to acknowledge the last result."""
    _ask(f"\n{message}...")
