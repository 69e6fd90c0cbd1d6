# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Holds validated `CommandSpec` values indexed by primary and short alias.

The registry has a write-once lifecycle. Commands are registered while the
application is configured; after `freeze()` (called by the application on
its first parse) the registry is read-only and any further registration is
rejected with `RegistryFrozenError`.

Validation happens here, at registration time:
- Aliases must be alphabetic; primary aliases longer than one character,
  short aliases exactly one character.
- Options within a command must not share a primary or short alias, and may
  not reuse the built-in `help` flag.
- Commands must not share aliases with each other or with the reserved
  `help` / `version` pseudo-options.
- Positional descriptions, when given, must match the positional names.

A built-in `help` flag is appended to every command once validation passes.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from climber.command_spec import HELP_FLAG, VERSION_FLAG, CommandSpec
from climber.exceptions import (
    DuplicateAliasError,
    MalformedAliasError,
    RegistrationError,
    RegistryFrozenError,
)
from climber.logger import logger
from climber.protocols import CommandHandler

RESERVED_ALIASES = frozenset(HELP_FLAG.aliases + VERSION_FLAG.aliases)


def validate_alias(alias: str | None, short: bool = False) -> None:
    """Validate the length and charset of a primary or short alias."""
    if alias is None and short:
        return
    if not isinstance(alias, str):
        raise MalformedAliasError(str(alias), "alias must be a string")
    if not alias.isalpha():
        raise MalformedAliasError(alias, "alias must be alphabetic")
    if short and len(alias) != 1:
        raise MalformedAliasError(alias, "short alias must be a single character")
    if not short and len(alias) < 2:
        raise MalformedAliasError(
            alias, "primary alias must be longer than one character"
        )


class CommandRegistry:
    """
    Keyed index of registered commands.

    Lookup is by exact alias match against either the primary or the short
    alias of a command. Registration order is kept for help rendering only.
    """

    def __init__(self) -> None:
        self._commands: list[CommandSpec] = []
        self._index: dict[str, CommandSpec] = {}
        self._frozen: bool = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """End the configuration phase. Further registration is rejected."""
        if not self._frozen:
            logger.debug("Registry frozen with %d command(s).", len(self._commands))
        self._frozen = True

    def _validate_options(self, spec: CommandSpec) -> None:
        seen: dict[str, str] = {
            alias: "built-in option 'help'" for alias in HELP_FLAG.aliases
        }
        for option in (*spec.flags, *spec.value_options):
            validate_alias(option.primary_alias)
            validate_alias(option.short_alias, short=True)
            for alias in option.aliases:
                if alias in seen:
                    raise DuplicateAliasError(alias, seen[alias])
                seen[alias] = f"option '{option.primary_alias}'"
        for option in spec.value_options:
            if not option.value_name:
                raise RegistrationError(
                    f"Value option '{option.primary_alias}' requires a value name."
                )

    def _validate_command(self, spec: CommandSpec) -> None:
        validate_alias(spec.primary_alias)
        validate_alias(spec.short_alias, short=True)
        for alias in spec.aliases:
            if alias in RESERVED_ALIASES:
                raise DuplicateAliasError(alias, "reserved help/version option")
            existing = self._index.get(alias)
            if existing is not None:
                raise DuplicateAliasError(alias, f"command '{existing.primary_alias}'")
        if spec.positional_descriptions and len(spec.positional_descriptions) != len(
            spec.positional_names
        ):
            raise RegistrationError(
                f"Command '{spec.primary_alias}' declares "
                f"{len(spec.positional_names)} argument(s) but "
                f"{len(spec.positional_descriptions)} description(s)."
            )
        if not isinstance(spec.handler, CommandHandler):
            raise RegistrationError(
                f"Handler for command '{spec.primary_alias}' must be callable."
            )

    def register(self, spec: CommandSpec) -> CommandSpec:
        """
        Validate and register a command.

        Args:
            spec (CommandSpec): The command to register.

        Returns:
            CommandSpec: The registered command, with the built-in help flag.

        Raises:
            RegistryFrozenError: If the registry has already been frozen.
            RegistrationError: If the specification is invalid.
        """
        if not isinstance(spec, CommandSpec):
            raise RegistrationError("spec must be an instance of CommandSpec.")
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{spec.primary_alias}': configuration is complete."
            )
        self._validate_command(spec)
        self._validate_options(spec)

        registered = replace(spec, flags=spec.flags + (HELP_FLAG,))
        self._commands.append(registered)
        for alias in registered.aliases:
            self._index[alias] = registered
        logger.debug("Registered command: %s", registered)
        return registered

    def resolve(self, alias: str) -> CommandSpec | None:
        """Return the command whose primary or short alias is `alias`."""
        return self._index.get(alias)

    def __contains__(self, alias: object) -> bool:
        return alias in self._index

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        aliases = ", ".join(command.primary_alias for command in self._commands)
        return f"CommandRegistry(commands=[{aliases}], frozen={self._frozen})"

    def __repr__(self) -> str:
        return str(self)
