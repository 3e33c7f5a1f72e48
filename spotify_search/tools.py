# spotify_search/tools.py
"""MCP tools for searching Spotify and playing results on the local player."""

import json

from mcp.server.fastmcp import FastMCP

from .actions import candidates, show_metadata
from .constants import DEFAULT_MIN_QUERY_LENGTH
from .errors import NoResultError, SpotifySearchError, UnsupportedPlatformError
from .pipeline import play_best_album, search_album_formatted
from .playback import play_album_href, play_href


def register_tools(mcp: FastMCP, min_query_length: int = DEFAULT_MIN_QUERY_LENGTH) -> None:
    """Register all Spotify search tools."""

    @mcp.tool()
    def spotify_search_tracks(q: str) -> str:
        """
        Search tracks by text; returns a JSON list with 'label', 'uri', 'album_href'.
        Play a result with spotify_play_track(uri=...) or spotify_play_album(album_href=...).
        """
        entries = candidates(q, min_query_length)
        out = [
            {
                "position": i,
                "label": e.label,
                "uri": e.track.uri,
                "album_href": e.track.album.href,
            }
            for i, e in enumerate(entries)
        ]
        return json.dumps(out, indent=2)

    @mcp.tool()
    def spotify_search_album(q: str) -> str:
        """Best-matching album for the query: name, href, uri."""
        try:
            album = search_album_formatted(q)
        except NoResultError:
            return f"No album found for {q!r}."
        except (SpotifySearchError, LookupError) as e:
            return f"Search failed: {e}"
        return json.dumps({"name": album.name, "href": album.href, "uri": album.uri}, indent=2)

    @mcp.tool()
    def spotify_play_track(uri: str) -> str:
        """Play a track URI (spotify:track:...) on the local Spotify app."""
        try:
            play_href(uri)
        except UnsupportedPlatformError as e:
            return str(e)
        except OSError as e:
            return f"Play failed: {e}"
        return f"Playing {uri}."

    @mcp.tool()
    def spotify_play_album(album_href: str) -> str:
        """Play an album from its first track, given the album's API href."""
        try:
            first = play_album_href(album_href)
        except UnsupportedPlatformError as e:
            return str(e)
        except (SpotifySearchError, LookupError, OSError) as e:
            return f"Play failed: {e}"
        return f"Playing {first.name} ({first.uri}) from {first.album.name}."

    @mcp.tool()
    def spotify_play_best_album(q: str) -> str:
        """Search albums and play the best match from its first track."""
        try:
            first = play_best_album(q)
        except NoResultError:
            return f"No album found for {q!r}."
        except UnsupportedPlatformError as e:
            return str(e)
        except (SpotifySearchError, LookupError, OSError) as e:
            return f"Play failed: {e}"
        return f"Playing {first.name} ({first.uri}) from {first.album.name}."

    @mcp.tool()
    def spotify_track_metadata(q: str, position: int = 0) -> str:
        """Raw API record for the track at 'position' in the results for 'q'."""
        entries = candidates(q, min_query_length)
        if not 0 <= position < len(entries):
            return f"No result at position {position} for {q!r}."
        return show_metadata(entries[position].track)

    @mcp.tool()
    def ping() -> str:
        """Quick ping tool for sanity checks."""
        return "pong"
