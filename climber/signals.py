# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Climber entry points.

These signals interrupt an invocation to show help, print the version, or
leave the interactive shell without being treated as traditional exceptions.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: The help flag was triggered; carries the command to describe.
- VersionSignal: The version flag was triggered on the default command.
- QuitSignal: Leave the interactive shell.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from climber.command_spec import CommandSpec


class FlowSignal(BaseException):
    """Base class for all flow control signals in Climber."""


class HelpSignal(FlowSignal):
    """Raised to display help information instead of dispatching."""

    def __init__(
        self,
        command: CommandSpec | None = None,
        message: str = "Help signal received.",
    ):
        super().__init__(message)
        self.command = command


class VersionSignal(FlowSignal):
    """Raised to display the application version instead of dispatching."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)


class QuitSignal(FlowSignal):
    """Raised to signal an immediate exit from the interactive shell."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
