"""
Media player lookup on the executable search path.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from ..config import defaults
from ..infra.exceptions import DependencyNotFoundError


def find_player(
    binary: str = defaults.PLAYER_BINARY,
    *,
    search_path: str | None = None,
    logger: FilteringBoundLogger | None = None,
) -> Path:
    """
    Resolve the media player binary to a full path.

    Args:
        binary: Executable name to look up (e.g. "vlc")
        search_path: os.pathsep-separated directories; defaults to PATH
        logger: Optional run logger

    Returns:
        Absolute path of the player executable

    Raises:
        DependencyNotFoundError: If the binary is not on the search path
    """
    found = shutil.which(binary, path=search_path)
    if found is None:
        raise DependencyNotFoundError(
            f"{binary} not found in PATH. Ensure VLC is installed and accessible"
        )
    player = Path(found).absolute()
    if logger is not None:
        logger.info("Player found", player=os.fspath(player))
    return player
