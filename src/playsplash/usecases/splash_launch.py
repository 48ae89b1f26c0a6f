"""
Splash launch sequence.

Runs the setup steps strictly in order (player lookup, user lookup, video
extraction), then starts the player and the target application without
waiting for either. Any step failing raises a PlaySplashError and nothing
after it runs; deciding to exit is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from ..infra.settings import Settings
from ..runtime.launcher import (
    Popen,
    ProcessHandle,
    build_player_command,
    build_target_command,
    start_process,
)
from .asset_extract import embedded_splash, extract_splash_video
from .dependency_check import find_player
from .user_context import current_user


@dataclass
class SplashLaunch:
    """Outcome of a launch. The handles are returned, never waited on."""

    video_path: Path
    player: ProcessHandle
    target: ProcessHandle


def launch_splash(
    settings: Settings,
    logger: FilteringBoundLogger,
    *,
    search_path: str | None = None,
    video_content: bytes | None = None,
    popen: Popen | None = None,
) -> SplashLaunch:
    """
    Play the splash video and start the target application.

    Args:
        settings: Launcher settings
        logger: Run logger bound to the log file
        search_path: Directories searched for the player; defaults to PATH
        video_content: Video bytes; defaults to the bundled splash
        popen: Process factory; subprocess.Popen when omitted

    Returns:
        SplashLaunch with the extracted video path and both process handles

    Raises:
        PlaySplashError: On the first step that fails
    """
    player = find_player(settings.player_binary, search_path=search_path, logger=logger)

    user = current_user()
    logger.info("Current user resolved", user=user.username, home=str(user.home_dir))

    content = embedded_splash() if video_content is None else video_content
    video_path = extract_splash_video(content, logger=logger)

    player_cmd = build_player_command(player, video_path)
    target_cmd = build_target_command(user.home_dir, settings.target_app)

    logger.info("Starting VLC to play splash video...")
    player_proc = start_process(player_cmd, popen=popen, logger=logger)

    logger.info("Launching Playnite...")
    target_proc = start_process(target_cmd, popen=popen, logger=logger)

    return SplashLaunch(video_path=video_path, player=player_proc, target=target_proc)
