"""
Splash video extraction.

The splash video ships as package data. Each run copies it into a freshly
created temporary directory so the player gets a plain file path. The copy is
left in place for the OS to clean up with the rest of its temp directory.
"""

from __future__ import annotations

import os
import tempfile
from importlib import resources
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from ..config import defaults
from ..infra.exceptions import AssetExtractionError


def embedded_splash() -> bytes:
    """
    Return the bytes of the bundled splash video.

    Raises:
        AssetExtractionError: If the packaged video cannot be read
    """
    try:
        return resources.files("playsplash.assets").joinpath(defaults.SPLASH_FILE_NAME).read_bytes()
    except OSError as e:
        raise AssetExtractionError(f"failed to read bundled splash video: {e}") from e


def extract_splash_video(
    content: bytes,
    *,
    logger: FilteringBoundLogger | None = None,
) -> Path:
    """
    Write ``content`` to ``splash.mp4`` inside a new temporary directory.

    Args:
        content: Video bytes to write
        logger: Optional run logger

    Returns:
        Path to the written file

    Raises:
        AssetExtractionError: If the directory or the file cannot be created
    """
    try:
        temp_dir = tempfile.mkdtemp(prefix=defaults.TEMP_DIR_PREFIX)
    except OSError as e:
        raise AssetExtractionError(f"failed to create temporary directory: {e}") from e

    splash_path = Path(temp_dir) / defaults.SPLASH_FILE_NAME
    try:
        splash_path.write_bytes(content)
    except OSError as e:
        raise AssetExtractionError(f"failed to write splash video to temporary file: {e}") from e

    if logger is not None:
        logger.info(
            f"Temporary splash video created at: {splash_path}",
            video_path=os.fspath(splash_path),
        )
    return splash_path
