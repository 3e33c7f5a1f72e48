# spotify_search/client.py
"""Blocking HTTP client for the Spotify search and album endpoints."""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

import httpx

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT, SEARCH_PATH, SPOTIFY_API
from .errors import NetworkError, NoResultError, ParseError
from .models import Album, Track
from .nested import get_in

logger = logging.getLogger(__name__)


class ResultType(str, Enum):
    """Item types accepted by the search endpoint."""
    TRACK = "track"
    ALBUM = "album"


# Global configuration - overridden by config.configure()
API_BASE: str = SPOTIFY_API
TIMEOUT: httpx.Timeout = httpx.Timeout(DEFAULT_TIMEOUT, connect=DEFAULT_CONNECT_TIMEOUT)


def initialize_client(
    api_base: Optional[str] = None,
    timeout: Optional[float] = None,
    connect_timeout: Optional[float] = None,
) -> None:
    """Set the API base URL and request timeouts used by every call."""
    global API_BASE, TIMEOUT
    if api_base:
        API_BASE = api_base.rstrip("/")
    if timeout is not None or connect_timeout is not None:
        TIMEOUT = httpx.Timeout(
            timeout if timeout is not None else DEFAULT_TIMEOUT,
            connect=connect_timeout if connect_timeout is not None else DEFAULT_CONNECT_TIMEOUT,
        )


def search_url() -> str:
    return f"{API_BASE}{SEARCH_PATH}"


def spotify_request(
    method: str,
    url: str,
    *,
    params: dict | None = None,
    client: httpx.Client | None = None,
) -> httpx.Response:
    """
    Make an unauthenticated request to the Spotify API.

    Uses ``client`` when given, otherwise a short-lived client with the
    configured timeout. Transport failures are raised as NetworkError.
    """
    try:
        if client is not None:
            return client.request(method, url, params=params)
        with httpx.Client(timeout=TIMEOUT) as c:
            return c.request(method, url, params=params)
    except httpx.HTTPError as e:
        raise NetworkError(f"{method} {url} failed: {e}") from e


def _parse_json(r: httpx.Response, what: str) -> Any:
    if not r.is_success:
        raise NetworkError(f"{what} failed: {r.status_code} {r.text}", status_code=r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise ParseError(f"{what} returned malformed JSON: {e}") from e


def search(
    term: str,
    result_type: Union[ResultType, str] = ResultType.TRACK,
    *,
    client: httpx.Client | None = None,
) -> Dict[str, Any]:
    """
    Search Spotify for ``term``.

    Returns the parsed response body, shaped ``{"tracks": {"items": [...]}}``
    or ``{"albums": {"items": [...]}}`` depending on ``result_type``.
    """
    kind = ResultType(result_type)
    logger.debug("searching %s for %r", kind.value, term)
    r = spotify_request("GET", search_url(), params={"q": term, "type": kind.value}, client=client)
    return _parse_json(r, "search")


def fetch_album_first_track(album_href: str, *, client: httpx.Client | None = None) -> Track:
    """
    Fetch an album detail document and return its first track.

    Album track listings do not embed the album, so the returned Track
    carries an Album built from the detail document itself.
    """
    r = spotify_request("GET", album_href, client=client)
    detail = _parse_json(r, "album lookup")
    items = get_in(["tracks", "items"], detail)
    if not items:
        raise NoResultError(f"album has no tracks: {album_href}")
    album = Album(
        name=get_in(["name"], detail),
        href=detail.get("href") or album_href,
        uri=detail.get("uri"),
    )
    return Track.from_item(items[0], album=album)
