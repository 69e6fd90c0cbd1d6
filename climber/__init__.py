"""
Climber CLI Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import App
from .command_spec import CommandSpec, FlagSpec, ValueOptionSpec
from .matcher import ArgumentMatcher, MatchResult
from .registry import CommandRegistry
from .tokens import DefaultCommandState, classify
from .version import __version__

logger = logging.getLogger("climber")


__all__ = [
    "App",
    "ArgumentMatcher",
    "CommandRegistry",
    "CommandSpec",
    "DefaultCommandState",
    "FlagSpec",
    "MatchResult",
    "ValueOptionSpec",
    "classify",
    "__version__",
]
