"""Current OS user lookup."""

from __future__ import annotations

import getpass
from dataclasses import dataclass
from pathlib import Path

from ..infra.exceptions import UserContextError


@dataclass(frozen=True)
class UserContext:
    """Identity and home directory of the user running the launcher."""

    username: str
    home_dir: Path


def current_user() -> UserContext:
    """
    Resolve the current user's name and home directory.

    Raises:
        UserContextError: If the OS cannot resolve either
    """
    try:
        username = getpass.getuser()
        home_dir = Path.home()
    except (OSError, KeyError, RuntimeError) as e:
        raise UserContextError(f"failed to retrieve current user: {e}") from e
    return UserContext(username=username, home_dir=home_dir)
