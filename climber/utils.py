# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Returns how the user should re-run this program, e.g. `climber`."""
    script = sys.argv[0]
    if shutil.which(script):
        return Path(script).name
    return "python -m climber" if script.endswith("__main__.py") else script


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


def setup_logging(mode: str | None = None, log_filename: str | None = None) -> None:
    """
    Configure the root logger for the `climber` console script.

    `mode` is "cli" (Rich console output) or "json" (structured output). It
    defaults to `CLIMBER_LOG_MODE`, then to "json" inside a container. The
    console only shows warnings; `log_filename` adds a DEBUG file handler
    using the same format.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("CLIMBER_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False, markup=False, log_time_format="[%Y-%m-%d %H:%M:%S]"
        )
        file_formatter = logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
        file_formatter = pythonjsonlogger.json.JsonFormatter(LOG_FORMAT)
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.WARNING)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setFormatter(file_formatter)
        root.addHandler(file_handler)

    logging.getLogger("climber").debug("Logging initialized in '%s' mode.", mode)
