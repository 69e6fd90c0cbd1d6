# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for raw command-line arguments.

Every raw argument becomes exactly one token before matching starts:

- `OptionFlag`: the string begins with a dash.
- `CommandSelector`: the first non-dash string, but only when no explicit
  default command was configured.
- `PositionalValue`: everything else.

Classification never fails. A string that looks malformed is still
classified; rejecting it is the matcher's job.

Example:
    classify(["add", "--round", "3"], DefaultCommandState.UNSET)
    # [CommandSelector("add"), OptionFlag("--round"), PositionalValue("3")]
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


class DefaultCommandState(Enum):
    """Whether an explicit default command was configured."""

    UNSET = "unset"
    SET = "set"


@dataclass(frozen=True)
class CommandSelector:
    """A raw string that may name a command."""

    text: str


@dataclass(frozen=True)
class OptionFlag:
    """A raw string beginning with a dash."""

    text: str


@dataclass(frozen=True)
class PositionalValue:
    """A raw string carrying data."""

    text: str


Token = Union[CommandSelector, OptionFlag, PositionalValue]


def classify(
    raw_args: Sequence[str], default_state: DefaultCommandState
) -> list[Token]:
    """Convert raw arguments into typed tokens, one per argument."""
    tokens: list[Token] = []
    for index, arg in enumerate(raw_args):
        if arg.startswith("-"):
            tokens.append(OptionFlag(arg))
        elif index == 0 and default_state is DefaultCommandState.UNSET:
            tokens.append(CommandSelector(arg))
        else:
            tokens.append(PositionalValue(arg))
    return tokens


def strip_dashes(text: str) -> str:
    """Remove up to two leading dashes from an option token."""
    for _ in range(2):
        if text.startswith("-"):
            text = text[1:]
    return text
