# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive shell that runs many invocations against one application.

Each input line is split with `shlex` and handed to
`App.parse_and_dispatch()`. The application's registry is frozen before the
first prompt, so every line sees the same, shared, read-only configuration.

Parse errors, help and version output are rendered and the session
continues. `exit` / `quit`, Ctrl-D or Ctrl-C end the session.
"""
from __future__ import annotations

import shlex
from functools import cached_property
from typing import Any

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.markup import escape

from climber.app import App
from climber.exceptions import ClimberError, ParseError
from climber.help import render_help_for, render_version
from climber.logger import logger
from climber.signals import HelpSignal, QuitSignal, VersionSignal

EXIT_WORDS = frozenset({"exit", "quit"})


class Shell:
    """
    Read-eval-print loop for a Climber `App`.

    Args:
        app (App): The application to run lines against.
        prompt (str): Prompt message.
        prompt_session (PromptSession | None): Session to read lines from.
        console (Console | None): Console for output; defaults to the app's.
    """

    def __init__(
        self,
        app: App,
        prompt: str = "> ",
        prompt_session: PromptSession | None = None,
        console: Console | None = None,
    ) -> None:
        self.app: App = app
        self.prompt: str = prompt
        self.console: Console = console or app.console
        self._prompt_session: PromptSession | None = prompt_session

    @cached_property
    def prompt_session(self) -> PromptSession:
        """Returns the prompt session for the shell."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                message=self.prompt,
                multiline=False,
                interrupt_exception=QuitSignal,
                eof_exception=QuitSignal,
            )
        return self._prompt_session

    def process_line(self, line: str) -> Any:
        """Run one line of input and print its result, if any."""
        line = line.strip()
        if not line:
            return None
        if line in EXIT_WORDS:
            raise QuitSignal()

        try:
            args = shlex.split(line)
        except ValueError as error:
            self.console.print(f"[bold red]{escape(str(error))}[/bold red]")
            return None

        try:
            result = self.app.parse_and_dispatch(args)
        except HelpSignal as signal:
            render_help_for(self.app, signal.command, console=self.console)
            return None
        except VersionSignal:
            render_version(self.app, console=self.console)
            return None
        except ParseError as error:
            logger.info("Invalid input '%s': %s", line, error)
            render_help_for(
                self.app, error.command, error.message, console=self.console
            )
            return None
        except ClimberError as error:
            self.console.print(f"[bold red]Error: {escape(str(error))}[/bold red]")
            return None

        if result is not None:
            self.console.print(escape(str(result)))
        return result

    def run(self) -> None:
        """Prompt for lines until the user leaves the shell."""
        self.app.registry.freeze()
        logger.info("Starting shell: %s", self.app.name)
        try:
            while True:
                try:
                    line = self.prompt_session.prompt()
                    self.process_line(line)
                except (EOFError, KeyboardInterrupt):
                    logger.info("EOF or KeyboardInterrupt. Exiting shell.")
                    break
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting shell.")
                    break
        finally:
            logger.info("Exiting shell: %s", self.app.name)
