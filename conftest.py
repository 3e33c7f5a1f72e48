import httpx
import pytest


def track_item(name, duration_ms, album, artists, uri=None, album_href=None):
    return {
        "name": name,
        "duration_ms": duration_ms,
        "uri": uri or f"spotify:track:{name.lower().replace(' ', '')}",
        "album": {
            "name": album,
            "href": album_href or f"https://api.spotify.com/v1/albums/{album.lower().replace(' ', '')}",
        },
        "artists": [{"name": a} for a in artists],
    }


@pytest.fixture
def mock_client():
    """
    Build an httpx.Client whose responses come from ``handler``.
    Every request is appended to the returned list for inspection.
    """
    clients = []

    def make(handler):
        seen = []

        def record(request):
            seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(record))
        clients.append(client)
        return client, seen

    yield make
    for c in clients:
        c.close()
