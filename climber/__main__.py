"""
Climber CLI Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape

from climber.config import loader
from climber.console import console
from climber.exceptions import ConfigError, RegistrationError
from climber.shell import Shell
from climber.utils import get_program_invocation, setup_logging


def find_climber_config() -> Path | None:
    candidates = [
        Path.cwd() / "climber.yaml",
        Path.cwd() / "climber.toml",
        Path.cwd() / ".climber.yaml",
        Path.cwd() / ".climber.toml",
        Path(os.environ.get("CLIMBER_CONFIG", "climber.yaml")),
        Path.home() / ".config" / "climber" / "climber.yaml",
        Path.home() / ".config" / "climber" / "climber.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def split_launcher_args(args: Sequence[str]) -> tuple[bool, list[str]]:
    """
    Separate the launcher's own `--shell` switch from application arguments.

    Launcher options are only read at index 0. A leading `--` ends them, so
    `climber -- --shell` passes `--shell` through to the application.
    """
    match list(args[:1]):
        case ["--shell"]:
            return True, list(args[1:])
        case ["--"]:
            return False, list(args[1:])
    return False, list(args)


def bootstrap() -> Path | None:
    config_path = find_climber_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: Sequence[str] | None = None) -> Any:
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging(log_filename=os.environ.get("CLIMBER_LOG_FILE"))

    config_path = bootstrap()
    if config_path is None:
        console.print(
            "[bold red]No climber.yaml or climber.toml found.[/bold red]\n"
            f"Create one, or point CLIMBER_CONFIG at it, then run "
            f"`{escape(get_program_invocation())}` again."
        )
        sys.exit(1)

    try:
        app = loader(config_path)
    except (ConfigError, RegistrationError) as error:
        console.print(f"[bold red]{escape(str(error))}[/bold red]")
        sys.exit(1)

    start_shell, app_args = split_launcher_args(args)
    if start_shell:
        if app_args:
            console.print("[bold red]--shell takes no further arguments.[/bold red]")
            sys.exit(1)
        Shell(app, prompt=f"{app.name} > ").run()
        return None

    result = app.run(app_args)
    if result is not None:
        console.print(escape(str(result)))
    return result


if __name__ == "__main__":
    main()
