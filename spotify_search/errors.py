# spotify_search/errors.py
"""Exception types raised by the search and playback helpers."""

from typing import Optional


class SpotifySearchError(Exception):
    """Base class for every error raised by this package."""
    pass


class NetworkError(SpotifySearchError):
    """Transport failure or non-success HTTP status from the API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(SpotifySearchError):
    """Response body was not valid JSON."""
    pass


class NoResultError(SpotifySearchError):
    """A single item was expected but the result list was empty."""
    pass


class FieldLookupError(SpotifySearchError, LookupError):
    """A required field is missing from a nested API record."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = tuple(path)


class UnsupportedPlatformError(SpotifySearchError):
    """No player integration exists for the host platform; nothing was run."""

    def __init__(self, platform: str):
        super().__init__(f"Sorry, playing tracks is not supported on {platform}.")
        self.platform = platform
