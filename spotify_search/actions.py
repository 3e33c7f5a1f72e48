# spotify_search/actions.py
"""Candidate and action hooks for interactive selection front ends."""

import json
import logging
from typing import Any, Callable, List, NamedTuple, Union

import httpx

from .constants import DEFAULT_MIN_QUERY_LENGTH
from .errors import SpotifySearchError, UnsupportedPlatformError
from .models import DisplayEntry, Track
from .pipeline import search_tracks_formatted
from .playback import play_album, play_track

logger = logging.getLogger(__name__)


class Action(NamedTuple):
    """A labelled handler offered for a selected track."""
    label: str
    handler: Callable[[Track], Any]


def show_metadata(track: Track) -> str:
    """Pretty-printed raw record behind ``track``."""
    return json.dumps(track.raw if track.raw is not None else track._asdict(), indent=2, default=str)


ACTIONS: List[Action] = [
    Action("Play Track", play_track),
    Action("Play Album", play_album),
    Action("Show Track Metadata", show_metadata),
]


def actions_for(selection: Union[DisplayEntry, Track]) -> List[Action]:
    """
    Actions available for a selected entry, in menu order.

    Every track offers the same menu; ``selection`` is accepted so front ends
    can call this per entry without special-casing.
    """
    return list(ACTIONS)


def candidates(
    term: str,
    min_length: int = DEFAULT_MIN_QUERY_LENGTH,
    *,
    client: httpx.Client | None = None,
) -> List[DisplayEntry]:
    """
    Entries to show for the current input.

    Input shorter than ``min_length`` yields nothing. A failed search is
    logged and rendered as an empty list so the front end keeps running.
    """
    if len((term or "").strip()) < min_length:
        return []
    try:
        return search_tracks_formatted(term, client=client)
    except (SpotifySearchError, LookupError) as e:
        logger.warning("search for %r failed: %s", term, e)
        return []


def run_action(action: Action, selection: Union[DisplayEntry, Track]) -> str:
    """Invoke ``action`` and describe the outcome instead of raising."""
    track = selection.track if isinstance(selection, DisplayEntry) else selection
    try:
        result = action.handler(track)
    except UnsupportedPlatformError as e:
        return str(e)
    except (SpotifySearchError, LookupError, OSError) as e:
        logger.warning("%s failed for %s: %s", action.label, track.uri, e)
        return f"{action.label} failed: {e}"
    if isinstance(result, str):
        return result
    if isinstance(result, Track):
        return f"{action.label}: {result.name} ({result.uri})"
    return f"{action.label}: {track.name} ({track.uri})"
