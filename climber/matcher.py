# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentMatcher`, the two-state machine that turns a
classified token sequence into a dispatch-ready `MatchResult`.

The matcher keeps an *active command* (initially the configured default
command) and a set of accumulators sized to that command: collected
positional values, one boolean per flag and one slot per value option.

States:
- `START`: the next token may select a command, trigger a flag, name a value
  option, or supply positional data.
- `AWAITING_OPTION_VALUE`: the previous token named a value option; the next
  token is its value, whatever it looks like.

Rules:
- A `CommandSelector` switches the active command and resets accumulators.
- An `OptionFlag` is stripped of its dashes and looked up among the active
  command's flags, then its value options. Anything else is rejected.
- A `PositionalValue` is appended while fewer values than the arity have
  been collected.
- A value option consumes the next raw token verbatim, so `--name -x` stores
  `-x` as the value of `name`.

End of input:
- A pending value option fails with `MissingOptionValueError`.
- A positional count different from the arity fails with `ArityMismatchError`.

The first violation aborts the match. There is no recovery.

Example Usage:
    matcher = ArgumentMatcher(registry)
    result = matcher.match(classify(["div", "--round", "10", "3"], state))
    # result.positional_values == ("10", "3")
    # result.flags_triggered == frozenset({"round"})
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from climber.command_spec import DEFAULT_COMMAND, CommandSpec
from climber.exceptions import (
    ArityMismatchError,
    MissingOptionValueError,
    TooManyArgumentsError,
    UnknownCommandError,
    UnknownOptionError,
)
from climber.logger import logger
from climber.registry import CommandRegistry
from climber.tokens import (
    CommandSelector,
    OptionFlag,
    PositionalValue,
    Token,
    strip_dashes,
)


class MatchState(Enum):
    """States of the argument matcher."""

    START = "start"
    AWAITING_OPTION_VALUE = "awaiting_option_value"


@dataclass(frozen=True)
class PendingOption:
    """A value option waiting for the next token."""

    alias: str
    option_index: int


@dataclass(frozen=True)
class MatchResult:
    """
    A successful match, ready for dispatch.

    Attributes:
        command (CommandSpec): The active command when input ended.
        positional_values (tuple[str, ...]): Exactly `command.arity` values.
        flags_triggered (frozenset[str]): Primary aliases of triggered flags.
        value_options_supplied (dict[str, str]): Primary alias to value.
    """

    command: CommandSpec
    positional_values: tuple[str, ...] = ()
    flags_triggered: frozenset[str] = frozenset()
    value_options_supplied: dict[str, str] = field(default_factory=dict)


@dataclass
class _Accumulator:
    command: CommandSpec
    positional_values: list[str]
    flags: list[bool]
    option_values: list[str | None]

    @classmethod
    def for_command(cls, command: CommandSpec) -> _Accumulator:
        return cls(
            command=command,
            positional_values=[],
            flags=[False] * len(command.flags),
            option_values=[None] * len(command.value_options),
        )

    def to_result(self) -> MatchResult:
        command = self.command
        return MatchResult(
            command=command,
            positional_values=tuple(self.positional_values),
            flags_triggered=frozenset(
                flag.primary_alias
                for flag, triggered in zip(command.flags, self.flags)
                if triggered
            ),
            value_options_supplied={
                option.primary_alias: value
                for option, value in zip(command.value_options, self.option_values)
                if value is not None
            },
        )


class ArgumentMatcher:
    """
    Matches classified tokens against the commands of a registry.

    The matcher holds no state between calls; every call to `match()` starts
    from the default command with empty accumulators.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        default_command: CommandSpec = DEFAULT_COMMAND,
    ) -> None:
        self.registry: CommandRegistry = registry
        self.default_command: CommandSpec = default_command

    def _select_command(self, alias: str) -> _Accumulator:
        command = self.registry.resolve(alias)
        if command is None:
            logger.warning("Unknown command '%s'.", alias)
            raise UnknownCommandError(alias)
        logger.debug("Active command -> '%s'", command.primary_alias)
        return _Accumulator.for_command(command)

    def _handle_option(
        self, token: str, accumulator: _Accumulator
    ) -> PendingOption | None:
        command = accumulator.command
        alias = strip_dashes(token)

        flag_index = command.find_flag(alias)
        if flag_index is not None:
            accumulator.flags[flag_index] = True
            return None

        option_index = command.find_value_option(alias)
        if option_index is not None:
            return PendingOption(alias, option_index)

        logger.warning(
            "Unknown option '%s' for command '%s'.", token, command.primary_alias
        )
        raise UnknownOptionError(alias, token, command)

    def _handle_positional(self, value: str, accumulator: _Accumulator) -> None:
        command = accumulator.command
        collected = len(accumulator.positional_values)
        if collected >= command.arity:
            raise TooManyArgumentsError(command.arity, collected + 1, command)
        accumulator.positional_values.append(value)

    def match(self, tokens: Sequence[Token]) -> MatchResult:
        """
        Consume `tokens` in order and return the resulting match.

        Raises:
            UnknownCommandError: A command selector does not resolve.
            UnknownOptionError: An option matches no flag or value option.
            MissingOptionValueError: Input ended while a value was pending.
            TooManyArgumentsError: More positional values than the arity.
            ArityMismatchError: Fewer positional values than the arity.
        """
        state = MatchState.START
        pending: PendingOption | None = None
        accumulator = _Accumulator.for_command(self.default_command)

        for token in tokens:
            match state:
                case MatchState.START:
                    match token:
                        case CommandSelector(text=alias):
                            accumulator = self._select_command(alias)
                        case OptionFlag(text=text):
                            pending = self._handle_option(text, accumulator)
                            if pending is not None:
                                state = MatchState.AWAITING_OPTION_VALUE
                        case PositionalValue(text=value):
                            self._handle_positional(value, accumulator)
                case MatchState.AWAITING_OPTION_VALUE:
                    assert pending is not None, "pending option should be set"
                    accumulator.option_values[pending.option_index] = token.text
                    pending = None
                    state = MatchState.START

        command = accumulator.command
        if state is MatchState.AWAITING_OPTION_VALUE:
            assert pending is not None, "pending option should be set"
            option = command.value_options[pending.option_index]
            raise MissingOptionValueError(
                option.primary_alias, option.value_name, command
            )

        collected = len(accumulator.positional_values)
        if collected != command.arity:
            raise ArityMismatchError(command.arity, collected, command)

        return accumulator.to_result()
