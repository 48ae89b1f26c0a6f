"""Default values for the splash launch sequence."""

# Log file, relative to the working directory
LOG_FILE_NAME = "logFile.log"

# Media player looked up on the executable search path
PLAYER_BINARY = "vlc"

# VLC playback flags; the video path is appended after these
PLAYER_FLAGS = (
    "--fullscreen",
    "--video-on-top",  # keep the video window on top
    "--play-and-exit",  # close VLC after playback
    "--intf",
    "dummy",  # no GUI
    "--dummy-quiet",  # no VLC console output
    "--no-osd",
)

# Target application, relative to the user's home directory
TARGET_APP_RELPATH = "AppData/Local/Playnite/Playnite.fullscreenapp.exe"
TARGET_APP_ARGS = ("--hidesplashscreen",)

# Bundled splash video
SPLASH_FILE_NAME = "splash.mp4"
TEMP_DIR_PREFIX = "splash"


def player_args(video_path: str) -> list[str]:
    """
    Build the player argument list for a video.

    Args:
        video_path: Path to the extracted splash video

    Returns:
        The fixed playback flags followed by the video path
    """
    return [*PLAYER_FLAGS, video_path]
