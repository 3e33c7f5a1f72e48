# spotify_search/formatting.py
"""Human-readable labels for search results."""

from typing import Any, Mapping, Union

from .models import Track


def format_duration(duration_ms: int) -> str:
    # Truncated to whole seconds, so the fraction always renders as .00
    total = duration_ms // 1000
    minutes, seconds = divmod(total, 60)
    return f"{minutes}m{float(seconds):0.2f}s"


def format_track(track: Union[Track, Mapping[str, Any]]) -> str:
    """
    Two-line label for a track:

        <name> (<m>m<s>.00s)
        <artist>/<artist> - <album>

    Raw API items are parsed first, so missing fields raise FieldLookupError.
    """
    if not isinstance(track, Track):
        track = Track.from_item(track)
    artists = "/".join(a.name for a in track.artists)
    return f"{track.name} ({format_duration(track.duration_ms)})\n{artists} - {track.album.name}"
