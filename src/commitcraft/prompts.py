"""Interactive prompts for commit type, scope, and message."""

from __future__ import annotations

from typing import Optional, Sequence

import questionary

from commitcraft.config.schema import OptionEntry


class PromptAborted(Exception):
    """Raised when the user cancels a prompt (Ctrl-C / Esc)."""


def _choices(options: Sequence[OptionEntry]) -> list[questionary.Choice]:
    return [questionary.Choice(title=f"{o.value}: {o.label}", value=o.value) for o in options]


def _select(message: str, options: Sequence[OptionEntry]) -> str:
    answer = questionary.select(
        message,
        choices=_choices(options),
        use_indicator=True,
        use_arrow_keys=True,
    ).ask()
    if answer is None:
        raise PromptAborted(message)
    return answer


def select_type(options: Sequence[OptionEntry]) -> str:
    return _select("Select the type of change", options)


def select_scope(options: Sequence[OptionEntry]) -> str:
    return _select("Select the scope", options)


def validate_message(value: str):
    """questionary validator: True when valid, else the error text."""
    if not value or not value.strip():
        return "Please enter a commit message"
    return True


def ask_message(default: Optional[str] = None) -> str:
    """Ask for the free-text commit message, pre-filled with *default*."""
    answer = questionary.text(
        "Enter your commit message",
        default=default or "",
        validate=validate_message,
    ).ask()
    if answer is None:
        raise PromptAborted("commit message")
    return answer.strip()
