# spotify_search/pipeline.py
"""Search-then-format helpers feeding the selection front end."""

from typing import List

import httpx

from . import client as sc
from .errors import NoResultError
from .formatting import format_track
from .models import Album, DisplayEntry, Track
from .nested import get_in
from .playback import play_album_href


def search_tracks_formatted(term: str, *, client: httpx.Client | None = None) -> List[DisplayEntry]:
    """
    Search tracks and pair each result with its display label.

    A blank term returns an empty list without touching the network.
    Results keep the order the API returned them in.
    """
    if not term or not term.strip():
        return []
    result = sc.search(term, sc.ResultType.TRACK, client=client)
    entries = []
    for item in get_in(["tracks", "items"], result):
        track = Track.from_item(item)
        entries.append(DisplayEntry(format_track(track), track))
    return entries


def search_album_formatted(term: str, *, client: httpx.Client | None = None) -> Album:
    """Return the best-matching album for ``term``; raises NoResultError if none match."""
    items = []
    if term and term.strip():
        result = sc.search(term, sc.ResultType.ALBUM, client=client)
        items = get_in(["albums", "items"], result)
    if not items:
        raise NoResultError(f"no album found for {term!r}")
    return Album.from_item(items[0])


def play_best_album(term: str, *, client: httpx.Client | None = None) -> Track:
    album = search_album_formatted(term, client=client)
    return play_album_href(album.href, client=client)
