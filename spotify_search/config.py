# spotify_search/config.py
"""Environment-driven settings."""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from . import client as sc
from . import playback
from .constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MIN_QUERY_LENGTH,
    DEFAULT_TIMEOUT,
    MPRIS_DEST,
    SPOTIFY_API,
)


class Settings(NamedTuple):
    api_base: str
    timeout: float
    connect_timeout: float
    min_query_length: int
    mpris_dest: str
    log_level: str


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_env(dotenv: bool = True) -> Settings:
    """Read settings from the environment, after loading a ``.env`` file if present."""
    if dotenv:
        load_dotenv()

    return Settings(
        api_base=os.getenv("SPOTIFY_API_BASE", SPOTIFY_API),
        timeout=_get_float("SPOTIFY_SEARCH_TIMEOUT", DEFAULT_TIMEOUT),
        connect_timeout=_get_float("SPOTIFY_SEARCH_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        min_query_length=_get_int("SPOTIFY_SEARCH_MIN_LENGTH", DEFAULT_MIN_QUERY_LENGTH),
        mpris_dest=os.getenv("SPOTIFY_MPRIS_DEST", MPRIS_DEST),
        log_level=os.getenv("SPOTIFY_SEARCH_LOG_LEVEL", "INFO").upper(),
    )


def configure(settings: Settings) -> None:
    """Push settings into the client and player modules."""
    sc.initialize_client(settings.api_base, settings.timeout, settings.connect_timeout)
    playback.initialize_player(settings.mpris_dest)
