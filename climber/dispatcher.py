# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""dispatcher.py

Invokes the handler bound to a matched command.

The dispatcher only ever sees successful matches; a failed match raises
before dispatch. Whatever the handler returns is passed back unchanged, and
whatever it raises propagates to the caller untouched.
"""
from __future__ import annotations

from typing import Any

from climber.logger import logger
from climber.matcher import MatchResult


class Dispatcher:
    """Calls `handler(positional_values, flags_triggered, value_options_supplied)`."""

    def dispatch(self, match: MatchResult) -> Any:
        command = match.command
        logger.info(
            "Dispatching '%s' with %d argument(s), flags=%s, options=%s",
            command.primary_alias,
            len(match.positional_values),
            sorted(match.flags_triggered),
            match.value_options_supplied,
        )
        result = command.handler(
            list(match.positional_values),
            match.flags_triggered,
            dict(match.value_options_supplied),
        )
        logger.debug("[%s] Result: %r", command.primary_alias, result)
        return result
