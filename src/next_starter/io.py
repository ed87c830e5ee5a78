"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NoReturn

import questionary


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def warn(message: str) -> None:
    """Print a warning message to stderr."""
    print(f"warning: {message}", file=sys.stderr)


def die(
    message: str,
    code: int = 1,
    *,
    hint: str | None = None,
    internal: bool = False,
) -> NoReturn:
    """Print an error message (and optional hint) and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.
        hint: Optional recovery hint printed on its own line.
        internal: Prefix the message as an internal error rather than a
            user error.
    """
    prefix = "internal error" if internal else "error"
    print(f"{prefix}: {message}", file=sys.stderr)
    if hint:
        print(f"hint: {hint}", file=sys.stderr)
    sys.exit(code)


def select(
    text: str,
    choices: Sequence[tuple[str, str]],
    default: str | None = None,
) -> str:
    """Prompt the user to pick one of ``choices``.

    Args:
        text: Prompt label shown to the user.
        choices: ``(value, label)`` pairs in display order.
        default: Value preselected (and used on an empty answer).

    Returns:
        The selected value.

    Raises:
        KeyboardInterrupt: The prompt was cancelled.

    Example:
        Which UI library do you want?
          1) Tailwind only
          2) ShadCN UI
        Select [1]:
    """
    if not choices:
        raise ValueError("select requires at least one choice")
    values = [value for value, _label in choices]
    if default is not None and default not in values:
        raise ValueError(f"default {default!r} is not one of {values}")

    if _use_questionary():
        answer = questionary.select(
            text,
            choices=[questionary.Choice(title=label, value=value) for value, label in choices],
            default=default,
        ).ask()
        if answer is None:
            # questionary swallows Ctrl-C and answers None
            raise KeyboardInterrupt
        return str(answer)

    default_index = values.index(default) + 1 if default is not None else None
    print(text)
    for index, (_value, label) in enumerate(choices, start=1):
        print(f"  {index}) {label}")
    suffix = f" [{default_index}]" if default_index is not None else ""
    while True:
        response = input(f"Select{suffix}: ").strip()
        if response == "" and default is not None:
            return default
        if response.isdigit() and 1 <= int(response) <= len(choices):
            return values[int(response) - 1]
        if response in values:
            return response
        warn(f"enter a number between 1 and {len(choices)}")
