# spotify_search/constants.py
"""Fixed endpoints and names used across the package."""

SPOTIFY_API = "https://api.spotify.com/v1"
SEARCH_PATH = "/search"

# Seconds; applied to every request unless overridden by config.
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONNECT_TIMEOUT = 5.0

# Shortest query the adapter will send to the search endpoint.
DEFAULT_MIN_QUERY_LENGTH = 2

# Desktop player integration
SPOTIFY_APP_NAME = "Spotify"
MPRIS_DEST = "org.mpris.MediaPlayer2.spotify"
MPRIS_OBJECT_PATH = "/org/mpris/MediaPlayer2"
MPRIS_PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"
