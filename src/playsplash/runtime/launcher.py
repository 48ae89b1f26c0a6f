"""
External process launching.

Builds the player and target application command lines and starts them
detached from the launcher's stdio. Starting a process returns its handle
straight away; nothing here waits on, reads from or monitors the child.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from structlog.typing import FilteringBoundLogger

from ..config import defaults
from ..infra.exceptions import ProcessLaunchError

# Type alias for subprocess.Process
ProcessHandle = subprocess.Popen[bytes]

Popen = Callable[..., Any]


@dataclass(frozen=True)
class CommandSpec:
    """One process to start: a display label and its argument vector."""

    label: str
    argv: tuple[str, ...]


def build_player_command(player: str | Path, video_path: str | Path) -> CommandSpec:
    """Command line playing ``video_path`` fullscreen, on top and without UI, then exiting."""
    return CommandSpec(
        label="VLC",
        argv=(os.fspath(player), *defaults.player_args(os.fspath(video_path))),
    )


def target_app_path(home_dir: str | Path, relpath: str = defaults.TARGET_APP_RELPATH) -> Path:
    """Install location of the target application under ``home_dir``."""
    return Path(home_dir).joinpath(*relpath.replace("\\", "/").split("/"))


def build_target_command(
    home_dir: str | Path,
    relpath: str = defaults.TARGET_APP_RELPATH,
) -> CommandSpec:
    """Command line starting the target application with its own splash suppressed."""
    exe = target_app_path(home_dir, relpath)
    return CommandSpec(label="Playnite", argv=(os.fspath(exe), *defaults.TARGET_APP_ARGS))


def start_process(
    command: CommandSpec,
    *,
    popen: Popen | None = None,
    logger: FilteringBoundLogger | None = None,
) -> ProcessHandle:
    """
    Start ``command`` without waiting for it.

    stdin, stdout and stderr are attached to the null device. The caller may
    keep the returned handle or drop it.

    Raises:
        ProcessLaunchError: If the process could not be started
    """
    try:
        proc = (popen or subprocess.Popen)(
            list(command.argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, ValueError) as e:
        raise ProcessLaunchError(f"failed to start {command.label}: {e}") from e

    if logger is not None:
        logger.info("Process started", label=command.label, pid=proc.pid)
    return proc
