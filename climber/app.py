# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for configuring and running a Climber command-line application.

`App` owns one `CommandRegistry` and wires the engine together:

    raw arguments -> classify() -> ArgumentMatcher -> Dispatcher

Configuration is a write-once phase. Commands and the optional default
command are configured first; the first call to `parse_and_dispatch()`
freezes the registry, after which every configuration call raises
`RegistryFrozenError`. A frozen app can be reused for any number of
invocations, which is what the interactive shell does.

Two entry points are provided:
- `parse_and_dispatch(raw_args)`: the engine itself. Raises `ParseError`
  subclasses and flow signals; never prints.
- `run(argv=None)`: process entry-point glue. Reads `sys.argv`, renders help,
  version and errors, and exits with status 1 on a parse error.

Example:
    app = App("calc", "A tiny calculator", "1.0.0")
    app.add_command(
        "add",
        "Add two numbers",
        lambda args, flags, options: str(int(args[0]) + int(args[1])),
        short_alias="a",
        arguments=["x", "y"],
    )
    app.parse_and_dispatch(["add", "9", "10"])  # "19"
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from rich.console import Console

from climber.command_spec import (
    DEFAULT_COMMAND,
    CommandSpec,
    FlagSpec,
    ValueOptionSpec,
)
from climber.console import console
from climber.dispatcher import Dispatcher
from climber.exceptions import ParseError, RegistrationError, RegistryFrozenError
from climber.help import render_app_help, render_help_for, render_version
from climber.logger import logger
from climber.matcher import ArgumentMatcher
from climber.registry import CommandRegistry
from climber.signals import HelpSignal, VersionSignal
from climber.tokens import DefaultCommandState, classify

APP_DEFAULT_NAME = "unnamed_app"
APP_DEFAULT_DESCRIPTION = "default_description"
APP_DEFAULT_VERSION = "0.1.0"


def _to_flag(flag: FlagSpec | dict[str, Any]) -> FlagSpec:
    if isinstance(flag, FlagSpec):
        return flag
    if isinstance(flag, dict):
        try:
            return FlagSpec(**flag)
        except TypeError as error:
            raise RegistrationError(
                f"Invalid flag definition {flag!r}: {error}"
            ) from error
    raise RegistrationError("flags must be FlagSpec instances or dictionaries.")


def _to_value_option(option: ValueOptionSpec | dict[str, Any]) -> ValueOptionSpec:
    if isinstance(option, ValueOptionSpec):
        return option
    if isinstance(option, dict):
        try:
            return ValueOptionSpec(**option)
        except TypeError as error:
            raise RegistrationError(
                f"Invalid option definition {option!r}: {error}"
            ) from error
    raise RegistrationError(
        "options must be ValueOptionSpec instances or dictionaries."
    )


class App:
    """
    Command-line application built on the Climber engine.

    Args:
        name (str): Program name shown in usage lines and `--version`.
        description (str): Shown at the top of the application help.
        version (str): Printed by `--version`.
        console (Console | None): Rich console used by `run()`.
        help_usage (str | None): Usage line of the application help.
            Defaults to `<name> [OPTIONS] [COMMAND]`.
        help_commands (str | None): Heading of the command list.
        help_footer (str | None): Hint printed below the command list.

    Methods:
        register(): Register a fully built `CommandSpec`.
        add_command(): Build and register a command from plain values.
        add_commands(): Register several commands at once.
        set_default_command(): Make a command receive the first token as data.
        parse_and_dispatch(): Match raw arguments and invoke the handler.
        run(): Entry point that renders help, version and errors.
    """

    def __init__(
        self,
        name: str = APP_DEFAULT_NAME,
        description: str = APP_DEFAULT_DESCRIPTION,
        version: str = APP_DEFAULT_VERSION,
        console: Console = console,
        help_usage: str | None = None,
        help_commands: str | None = None,
        help_footer: str | None = None,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self.version: str = version
        self.console: Console = console
        self.help_usage: str = help_usage or f"{name} [OPTIONS] [COMMAND]"
        self.help_commands: str = help_commands or "COMMANDS:"
        self.help_footer: str = help_footer or (
            f"Run `{name} [COMMAND] --help` to see help information "
            "for a specific command"
        )
        self.registry: CommandRegistry = CommandRegistry()
        self.dispatcher: Dispatcher = Dispatcher()
        self.default_command: CommandSpec = DEFAULT_COMMAND
        self.default_state: DefaultCommandState = DefaultCommandState.UNSET

    @property
    def has_default_command(self) -> bool:
        return self.default_state is DefaultCommandState.SET

    def is_default(self, command: CommandSpec) -> bool:
        return command is self.default_command

    def register(self, spec: CommandSpec) -> CommandSpec:
        """Validate and register a command, returning the registered spec."""
        return self.registry.register(spec)

    def add_command(
        self,
        alias: str,
        description: str,
        handler: Callable[..., Any],
        *,
        short_alias: str | None = None,
        arguments: Sequence[str] | None = None,
        argument_descriptions: Sequence[str] | None = None,
        flags: Sequence[FlagSpec | dict[str, Any]] | None = None,
        options: Sequence[ValueOptionSpec | dict[str, Any]] | None = None,
    ) -> CommandSpec:
        """
        Build a `CommandSpec` from plain values and register it.

        Args:
            alias (str): Primary alias of the command.
            description (str): Short description for help rendering.
            handler (Callable): Invoked with (positional values, flags, options).
            short_alias (str | None): Optional single-character alias.
            arguments (Sequence[str] | None): Positional names; sets the arity.
            argument_descriptions (Sequence[str] | None): Help per positional.
            flags (Sequence[FlagSpec | dict] | None): Boolean options.
            options (Sequence[ValueOptionSpec | dict] | None): Value options.

        Returns:
            CommandSpec: The registered command.
        """
        spec = CommandSpec(
            primary_alias=alias,
            handler=handler,
            short_alias=short_alias,
            description=description,
            positional_names=tuple(arguments or ()),
            positional_descriptions=tuple(argument_descriptions or ()),
            flags=tuple(_to_flag(flag) for flag in flags or ()),
            value_options=tuple(_to_value_option(option) for option in options or ()),
        )
        return self.register(spec)

    def add_commands(self, commands: Sequence[CommandSpec | dict[str, Any]]) -> None:
        """Register a list of `CommandSpec` instances or `add_command` dicts."""
        for command in commands:
            if isinstance(command, CommandSpec):
                self.register(command)
            elif isinstance(command, dict):
                self.add_command(**command)
            else:
                raise RegistrationError(
                    "Command must be a dictionary or an instance of CommandSpec."
                )

    def set_default_command(self, command: CommandSpec | str) -> CommandSpec:
        """
        Configure the command that receives input when no command is selected.

        Once set, the first raw argument is treated as data for this command
        rather than as a command selector.

        Args:
            command (CommandSpec | str): A new spec to register, or the alias
                of an already registered command.
        """
        if self.registry.frozen:
            raise RegistryFrozenError(
                "Cannot change the default command: configuration is complete."
            )
        if isinstance(command, str):
            resolved = self.registry.resolve(command)
            if resolved is None:
                raise RegistrationError(
                    f"Default command '{command}' is not registered."
                )
        elif isinstance(command, CommandSpec):
            resolved = self.register(command)
        else:
            raise RegistrationError(
                "Default command must be an alias or an instance of CommandSpec."
            )
        self.default_command = resolved
        self.default_state = DefaultCommandState.SET
        logger.debug("Default command set to '%s'.", resolved.primary_alias)
        return resolved

    def parse_and_dispatch(self, raw_args: Sequence[str]) -> Any:
        """
        Match `raw_args` (without the program name) and invoke the handler.

        The registry is frozen on the first call.

        Returns:
            Any: The handler's result, unchanged.

        Raises:
            ParseError: The arguments do not match; no handler was invoked.
            HelpSignal: The help flag was triggered; no handler was invoked.
            VersionSignal: `--version` was given to the built-in default command.
        """
        self.registry.freeze()
        tokens = classify(raw_args, self.default_state)
        logger.debug("Tokens: %s", tokens)
        match = ArgumentMatcher(self.registry, self.default_command).match(tokens)

        if "help" in match.flags_triggered:
            raise HelpSignal(match.command)
        if match.command is DEFAULT_COMMAND and "version" in match.flags_triggered:
            raise VersionSignal()
        return self.dispatcher.dispatch(match)

    def run(self, argv: Sequence[str] | None = None) -> Any:
        """
        Entry point for executing the application from process arguments.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            Any: The handler's result, or None when help or version was shown.

        Raises:
            SystemExit: With status 1 when the arguments do not match.
        """
        args = list(sys.argv[1:] if argv is None else argv)
        if not args and not self.has_default_command:
            render_app_help(self, console=self.console)
            return None
        try:
            return self.parse_and_dispatch(args)
        except HelpSignal as signal:
            render_help_for(self, signal.command, console=self.console)
        except VersionSignal:
            render_version(self, console=self.console)
        except ParseError as error:
            logger.debug("Parse failed: %s", error)
            render_help_for(self, error.command, error.message, console=self.console)
            sys.exit(1)
        return None

    def __str__(self) -> str:
        return (
            f"App(name={self.name!r}, version={self.version!r}, "
            f"commands={len(self.registry)}, "
            f"default={self.default_command.primary_alias!r})"
        )

    def __repr__(self) -> str:
        return str(self)
