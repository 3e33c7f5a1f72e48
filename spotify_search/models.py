# spotify_search/models.py
"""Typed views over Spotify search records."""

from typing import Any, List, Mapping, NamedTuple, Optional, Tuple

from .errors import FieldLookupError
from .nested import get_in


class Artist(NamedTuple):
    """A credited artist on a track."""
    name: str


class Album(NamedTuple):
    """An album reference; ``href`` points at the album detail endpoint."""
    name: str
    href: str
    uri: Optional[str] = None
    raw: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> "Album":
        return cls(
            name=get_in(["name"], item),
            href=get_in(["href"], item),
            uri=item.get("uri"),
            raw=item,
        )


def _duration_ms(item: Mapping[str, Any]) -> int:
    value = get_in(["duration_ms"], item)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise FieldLookupError(("duration_ms",), f"field 'duration_ms' is not a number: {value!r}") from e


def _artists(item: Mapping[str, Any]) -> List[Artist]:
    value = get_in(["artists"], item)
    if not isinstance(value, (list, tuple)):
        raise FieldLookupError(("artists",), f"field 'artists' is not a list: {value!r}")
    return [Artist(name=get_in(["name"], a)) for a in value]


class Track(NamedTuple):
    """A playable track parsed from one search result item."""
    uri: str
    name: str
    duration_ms: int
    album: Album
    artists: Tuple[Artist, ...]
    raw: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_item(cls, item: Mapping[str, Any], album: Optional[Album] = None) -> "Track":
        """
        Build a Track from a raw API item.

        Every field is required. Pass ``album`` for items that do not embed
        one, e.g. the track list of an album detail document.
        """
        if album is None:
            album = Album(
                name=get_in(["album", "name"], item),
                href=get_in(["album", "href"], item),
                uri=(item.get("album") or {}).get("uri"),
            )
        artists = _artists(item)
        return cls(
            uri=get_in(["uri"], item),
            name=get_in(["name"], item),
            duration_ms=_duration_ms(item),
            album=album,
            artists=tuple(artists),
            raw=item,
        )


class DisplayEntry(NamedTuple):
    """A formatted label paired with the track it describes."""
    label: str
    track: Track
