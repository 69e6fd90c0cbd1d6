# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Climber applications.

An application can be described in a YAML or TOML file instead of code:

    name: calc
    description: A tiny calculator
    version: 1.0.0
    help_footer: Try `calc add --help`
    commands:
      - alias: add
        short_alias: a
        description: Add two numbers
        handler: calc.handlers.add
        arguments: [x, y]
      - alias: div
        description: Divide two numbers
        handler: calc.handlers:div
        arguments: [x, y]
        flags:
          - alias: round
            short_alias: r
            description: Round the result
        options:
          - alias: precision
            value_name: DIGITS

Handlers are dotted import paths (`module.function` or `module:function`).
The file is validated with pydantic before any command is registered, and
the commands then go through the same registration checks as code-built ones.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from climber.app import (
    APP_DEFAULT_DESCRIPTION,
    APP_DEFAULT_NAME,
    APP_DEFAULT_VERSION,
    App,
)
from climber.command_spec import FlagSpec, ValueOptionSpec
from climber.exceptions import ConfigError
from climber.importer import resolve_handler
from climber.logger import logger


class RawFlag(BaseModel):
    """Flag entry of a command in a config file."""

    alias: str
    short_alias: str | None = None
    description: str = ""

    def to_spec(self) -> FlagSpec:
        return FlagSpec(self.alias, self.short_alias, self.description)


class RawValueOption(BaseModel):
    """Value option entry of a command in a config file."""

    alias: str
    short_alias: str | None = None
    description: str = ""
    value_name: str = "VALUE"

    def to_spec(self) -> ValueOptionSpec:
        return ValueOptionSpec(
            self.alias, self.short_alias, self.description, self.value_name
        )


class RawCommand(BaseModel):
    """Raw command model for Climber configuration."""

    alias: str
    handler: str
    description: str = ""
    short_alias: str | None = None
    arguments: list[str] = Field(default_factory=list)
    argument_descriptions: list[str] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)
    options: list[RawValueOption] = Field(default_factory=list)


class ClimberConfig(BaseModel):
    """Climber application configuration model."""

    name: str = APP_DEFAULT_NAME
    description: str = APP_DEFAULT_DESCRIPTION
    version: str = APP_DEFAULT_VERSION
    default_command: str | None = None
    help_usage: str | None = None
    help_commands: str | None = None
    help_footer: str | None = None
    commands: list[RawCommand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_default_command(self) -> ClimberConfig:
        if self.default_command is None:
            return self
        for command in self.commands:
            if self.default_command in (command.alias, command.short_alias):
                return self
        raise ValueError(
            f"default_command '{self.default_command}' does not name a command"
        )

    def to_app(self) -> App:
        app = App(
            name=self.name,
            description=self.description,
            version=self.version,
            help_usage=self.help_usage,
            help_commands=self.help_commands,
            help_footer=self.help_footer,
        )
        for raw_command in self.commands:
            try:
                handler = resolve_handler(raw_command.handler)
            except (ImportError, ValueError) as error:
                logger.error(
                    "Failed to resolve handler '%s': %s", raw_command.handler, error
                )
                raise ConfigError(
                    f"Could not import handler '{raw_command.handler}' for command "
                    f"'{raw_command.alias}': {error}"
                ) from error
            app.add_command(
                raw_command.alias,
                raw_command.description,
                handler,
                short_alias=raw_command.short_alias,
                arguments=raw_command.arguments,
                argument_descriptions=raw_command.argument_descriptions,
                flags=[flag.to_spec() for flag in raw_command.flags],
                options=[option.to_spec() for option in raw_command.options],
            )
        if self.default_command:
            app.set_default_command(self.default_command)
        return app


def _read_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
    raise ConfigError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str) -> App:
    """
    Load a Climber application from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        App: A configured, not yet frozen, application.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be parsed, validated or its handlers
            cannot be imported.
        RegistrationError: If a command fails registration checks.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    try:
        raw_config = _read_config(path)
    except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "name: 'calc'\n"
            "commands:\n"
            "  - alias: 'add'\n"
            "    description: 'Add two numbers'\n"
            "    handler: 'my_module.add'"
        )

    try:
        config = ClimberConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error

    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config.to_app()
