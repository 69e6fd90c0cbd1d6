# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help, usage and version rendering for Climber applications.

Rendering is pure formatting of already-validated specifications. The engine
never prints on its own; `App.run()` and the interactive shell call these
functions when a help flag, a version flag or a parse error is observed.

Layout:
- Application help: description, usage, options of the default command,
  registered commands, and a footer hint.
- Command help: description, usage line, positional arguments and options.
- An optional error message is printed last, in red, so that it stays
  visible below a long help screen.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from climber.command_spec import CommandSpec, FlagSpec, ValueOptionSpec
from climber.console import console as default_console

if TYPE_CHECKING:
    from climber.app import App

OPTION_COLUMN = 30
COMMAND_COLUMN = 16


def format_option(option: FlagSpec | ValueOptionSpec) -> str:
    """Return `-s, --long <VALUE>` padded to the description column."""
    text = f"-{option.short_alias}, " if option.short_alias else "    "
    text += f"--{option.primary_alias}"
    if isinstance(option, ValueOptionSpec):
        text += f" <{option.value_name}>"
    return f"    {text:<{OPTION_COLUMN}}{option.description}"


def format_command(command: CommandSpec) -> str:
    text = command.primary_alias
    if command.short_alias:
        text += f", {command.short_alias}"
    return f"    {text:<{COMMAND_COLUMN}}{command.description}"


def get_command_usage(app: App, command: CommandSpec) -> str:
    """Return the usage line for `command`."""
    parts = [app.name]
    if not app.is_default(command):
        parts.append(command.primary_alias)
    if command.flags or command.value_options:
        parts.append("[OPTIONS]")
    parts.extend(f"<{name}>" for name in command.positional_names)
    return " ".join(parts)


def _render_error(console: Console, error: str | None) -> None:
    if error:
        console.print(f"\n[bold red]{escape(error)}[/bold red]")


def render_app_help(
    app: App, error: str | None = None, console: Console | None = None
) -> None:
    """Print the application help screen."""
    console = console or default_console
    if app.description:
        console.print(f"{escape(app.description)}\n")

    console.print("[bold]USAGE:[/bold]")
    console.print(escape(f"    {app.help_usage}"))

    options = (*app.default_command.flags, *app.default_command.value_options)
    if options:
        console.print("\n[bold]OPTIONS:[/bold]")
        for option in options:
            console.print(escape(format_option(option)))

    commands = list(app.registry)
    if commands:
        console.print(f"\n[bold]{escape(app.help_commands)}[/bold]")
        for command in commands:
            console.print(escape(format_command(command)))
        console.print(f"\n{escape(app.help_footer)}", style="dim")
    _render_error(console, error)


def render_command_help(
    app: App,
    command: CommandSpec,
    error: str | None = None,
    console: Console | None = None,
) -> None:
    """Print the help screen for a single command."""
    console = console or default_console
    if command.description:
        console.print(f"{escape(command.description)}\n")

    console.print("[bold]USAGE:[/bold]")
    console.print(f"    {escape(get_command_usage(app, command))}")

    if command.positional_names:
        console.print("\n[bold]ARGS:[/bold]")
        descriptions = command.positional_descriptions or ("",) * command.arity
        for name, description in zip(command.positional_names, descriptions):
            label = f"<{name}>"
            console.print(escape(f"    {label:<{OPTION_COLUMN}}{description}"))

    options = (*command.flags, *command.value_options)
    if options:
        console.print("\n[bold]OPTIONS:[/bold]")
        for option in options:
            console.print(escape(format_option(option)))
    _render_error(console, error)


def render_help_for(
    app: App,
    command: CommandSpec | None,
    error: str | None = None,
    console: Console | None = None,
) -> None:
    """Render command help when a registered command is known, else app help."""
    if command is None or (
        command is app.default_command and not app.has_default_command
    ):
        render_app_help(app, error, console)
    else:
        render_command_help(app, command, error, console)


def render_version(app: App, console: Console | None = None) -> None:
    console = console or default_console
    console.print(escape(f"{app.name} {app.version}"))
