# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocol for command handlers.

The dispatcher depends only on "something invokable with (positional values,
flags, option values) returning a result". Plain functions, bound methods and
callable objects all satisfy it.
"""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandHandler(Protocol):
    def __call__(
        self,
        positional_values: Sequence[str],
        flags_triggered: frozenset[str],
        value_options_supplied: Mapping[str, str],
    ) -> Any: ...
