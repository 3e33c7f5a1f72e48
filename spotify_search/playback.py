# spotify_search/playback.py
"""Hand Spotify URIs to the desktop player on the host platform."""

import functools
import logging
import os
import subprocess
import sys
from typing import Callable, Dict, List, Optional

import httpx

from . import client as sc
from .constants import MPRIS_DEST, MPRIS_OBJECT_PATH, MPRIS_PLAYER_IFACE, SPOTIFY_APP_NAME
from .errors import UnsupportedPlatformError
from .models import Track

logger = logging.getLogger(__name__)

Player = Callable[[str], None]

# Global configuration - overridden by config.configure()
DBUS_DEST: str = MPRIS_DEST


def initialize_player(mpris_dest: Optional[str] = None) -> None:
    """Set the D-Bus name used to reach the player on Linux."""
    global DBUS_DEST
    if mpris_dest:
        DBUS_DEST = mpris_dest


def _escape_for_applescript(s: str) -> str:
    """Backslashes first, then quotes."""
    return s.replace("\\", "\\\\").replace('"', '\\"')


def mac_commands(href: str) -> List[List[str]]:
    script = f'tell application "{SPOTIFY_APP_NAME}" to play track "{_escape_for_applescript(href)}"'
    return [["osascript", "-e", script]]


def linux_commands(href: str, dest: Optional[str] = None) -> List[List[str]]:
    """Pause first, then OpenUri, over the session bus."""
    base = [
        "dbus-send",
        "--session",
        "--type=method_call",
        f"--dest={dest or DBUS_DEST}",
        MPRIS_OBJECT_PATH,
    ]
    return [
        base + [f"{MPRIS_PLAYER_IFACE}.Pause"],
        base + [f"{MPRIS_PLAYER_IFACE}.OpenUri", f"string:{href}"],
    ]


def _run(commands: List[List[str]]) -> None:
    # Exit status is not inspected; only a failure to launch propagates.
    for argv in commands:
        logger.debug("running %s", argv)
        subprocess.run(argv, check=False, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def _play_mac(href: str) -> None:
    _run(mac_commands(href))


def _play_linux(href: str) -> None:
    _run(linux_commands(href))


def _play_windows(href: str) -> None:
    # Shell "open" verb; spotify: URIs are routed to the registered handler.
    os.startfile(href)


def _unsupported(platform: str, href: str) -> None:
    err = UnsupportedPlatformError(platform)
    logger.info("%s", err)
    raise err


PLAYERS: Dict[str, Player] = {
    "darwin": _play_mac,
    "linux": _play_linux,
    "win32": _play_windows,
}


def platform_key(platform: str) -> str:
    """Normalize a ``sys.platform`` value to a PLAYERS key."""
    if platform.startswith("linux"):
        return "linux"
    return platform


def resolve_player(platform: str) -> Player:
    """Look up the player for ``platform``; unknown platforms get one that raises UnsupportedPlatformError."""
    player = PLAYERS.get(platform_key(platform))
    if player is None:
        return functools.partial(_unsupported, platform)
    return player


# The host platform does not change while the process runs.
_player: Player = resolve_player(sys.platform)


def play_href(href: str) -> None:
    """
    Ask the local Spotify player to play ``href`` (a spotify: URI).

    Raises UnsupportedPlatformError when the host has no player integration.
    """
    _player(href)
    logger.info("playing %s", href)


def play_track(track: Track) -> None:
    play_href(track.uri)


def play_album_href(album_href: str, *, client: httpx.Client | None = None) -> Track:
    """Play the first track of the album at ``album_href`` and return that track."""
    first = sc.fetch_album_first_track(album_href, client=client)
    play_href(first.uri)
    return first


def play_album(track: Track, *, client: httpx.Client | None = None) -> Track:
    """Play the album ``track`` belongs to, starting from its first track."""
    return play_album_href(track.album.href, client=client)
