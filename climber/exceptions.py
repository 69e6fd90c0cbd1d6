# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Climber invocation engine.

Registration errors are raised while an application is being configured and
are fatal to that configuration step: the offending command is never
registered. Parse errors are raised while matching a raw argument sequence
and are terminal for that invocation: matching stops on the first violation.

Every parse error carries the active command (when one is known) so that the
caller can render a command-specific help screen next to the message.

Exception Hierarchy:
- ClimberError
    ├── RegistrationError
    │   ├── DuplicateAliasError
    │   ├── MalformedAliasError
    │   └── RegistryFrozenError
    ├── ParseError
    │   ├── UnknownCommandError
    │   ├── UnknownOptionError
    │   ├── MissingOptionValueError
    │   ├── TooManyArgumentsError
    │   └── ArityMismatchError
    └── ConfigError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from climber.command_spec import CommandSpec


class ClimberError(Exception):
    """Base exception for the Climber engine."""


class RegistrationError(ClimberError):
    """Exception raised when a command specification fails validation."""


class DuplicateAliasError(RegistrationError):
    """Exception raised when an alias is already used by a command or option."""

    def __init__(self, alias: str, owner: str):
        self.alias = alias
        self.owner = owner
        super().__init__(f"Alias '{alias}' is already used by {owner}.")


class MalformedAliasError(RegistrationError):
    """Exception raised when an alias has the wrong length or characters."""

    def __init__(self, alias: str, reason: str):
        self.alias = alias
        self.reason = reason
        super().__init__(f"Malformed alias '{alias}': {reason}.")


class RegistryFrozenError(RegistrationError):
    """Exception raised when configuration is changed after the first parse."""


class ParseError(ClimberError):
    """Base exception for failures while matching raw arguments."""

    def __init__(self, message: str, command: CommandSpec | None = None):
        super().__init__(message)
        self.message = message
        self.command = command


class UnknownCommandError(ParseError):
    """Exception raised when a command selector does not resolve."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"The given command does not exist: `{alias}`")


class UnknownOptionError(ParseError):
    """Exception raised when an option matches no flag or value option."""

    def __init__(self, alias: str, token: str, command: CommandSpec | None = None):
        self.alias = alias
        self.token = token
        super().__init__(f"Invalid option provided: `{token}`", command)


class MissingOptionValueError(ParseError):
    """Exception raised when a value option reaches the end of input."""

    def __init__(
        self, alias: str, value_name: str, command: CommandSpec | None = None
    ):
        self.alias = alias
        self.value_name = value_name
        super().__init__(
            f"{value_name} not provided for option: `--{alias}`", command
        )


class TooManyArgumentsError(ParseError):
    """Exception raised when more positional values arrive than declared."""

    def __init__(self, expected: int, actual: int, command: CommandSpec | None = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Too many arguments provided: expected {expected}, got {actual}", command
        )


class ArityMismatchError(ParseError):
    """Exception raised when the positional count disagrees with the arity."""

    def __init__(self, expected: int, actual: int, command: CommandSpec | None = None):
        self.expected = expected
        self.actual = actual
        qualifier = "Not enough" if actual < expected else "Too many"
        super().__init__(
            f"{qualifier} arguments provided: expected {expected}, got {actual}",
            command,
        )


class ConfigError(ClimberError):
    """Exception raised when a configuration file cannot be loaded."""
