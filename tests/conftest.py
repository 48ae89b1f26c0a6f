"""
Global test configuration for playsplash.

Provides a stub VLC on a private search path, a fake home directory, an
isolated temp directory and a Popen stand-in that records process starts.
"""

from __future__ import annotations

import io
import json
import os
import stat
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from playsplash.infra.logging import build_logger  # noqa: E402


class RecordingPopen:
    """Callable standing in for subprocess.Popen; records argv and kwargs."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple[list[str], dict]] = []
        self._fail_on = fail_on

    def __call__(self, argv, **kwargs):
        self.calls.append((list(argv), kwargs))
        if self._fail_on is not None and self._fail_on in argv[0]:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        proc = MagicMock()
        proc.pid = 4000 + len(self.calls)
        return proc

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture(autouse=True)
def _clean_playsplash_env(monkeypatch):
    """Keep PLAYSPLASH_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("PLAYSPLASH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def stub_player_dir(tmp_path):
    """Directory holding an executable named ``vlc``."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    player = bin_dir / "vlc"
    player.write_text("#!/bin/sh\nexit 0\n")
    player.chmod(player.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    if os.name == "nt":
        (bin_dir / "vlc.bat").write_text("@exit /b 0\r\n")
    return bin_dir


@pytest.fixture
def empty_path_dir(tmp_path):
    """Search path directory with no player in it."""
    bin_dir = tmp_path / "empty-bin"
    bin_dir.mkdir()
    return bin_dir


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point the current user's home directory and name at test values."""
    home = tmp_path / "home" / "splashtester"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOGNAME", "splashtester")
    monkeypatch.setenv("USERNAME", "splashtester")
    return home


@pytest.fixture
def temp_root(tmp_path, monkeypatch):
    """Redirect tempfile to a private directory so extractions can be inspected."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def recording_popen():
    return RecordingPopen()


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def stream_logger(log_stream):
    """Logger writing JSON lines to an in-memory stream."""
    return build_logger(log_stream, level="DEBUG", env="test")


def _read_log_records(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.fixture
def read_log():
    """Parse JSON log lines from a string."""
    return _read_log_records


@pytest.fixture
def make_popen():
    """Factory for RecordingPopen instances, optionally failing on a matching argv[0]."""
    return RecordingPopen
