import httpx
import pytest

from conftest import track_item
import spotify_search.playback as pb
from spotify_search.errors import NetworkError, NoResultError
from spotify_search.formatting import format_track
from spotify_search.models import Album, DisplayEntry
from spotify_search.pipeline import play_best_album, search_album_formatted, search_tracks_formatted


def test_search_tracks_end_to_end(mock_client):
    items = [
        track_item("Around the World", 429000, "Homework", ["Daft Punk"]),
        track_item("Get Lucky", 369000, "Random Access Memories", ["Daft Punk", "Pharrell Williams"]),
    ]
    client, seen = mock_client(lambda req: httpx.Response(200, json={"tracks": {"items": items}}))

    entries = search_tracks_formatted("Daft Punk", client=client)

    assert seen[0].url.params["type"] == "track"
    assert len(entries) == 2
    assert all(isinstance(e, DisplayEntry) for e in entries)
    assert [e.track.name for e in entries] == ["Around the World", "Get Lucky"]
    assert [e.label for e in entries] == [format_track(e.track) for e in entries]
    assert entries[1].label == "Get Lucky (6m9.00s)\nDaft Punk/Pharrell Williams - Random Access Memories"


def test_empty_term_skips_network(mock_client):
    client, seen = mock_client(lambda req: httpx.Response(500))
    assert search_tracks_formatted("", client=client) == []
    assert search_tracks_formatted("   ", client=client) == []
    assert seen == []


def test_zero_results_is_empty(mock_client):
    client, _ = mock_client(lambda req: httpx.Response(200, json={"tracks": {"items": []}}))
    assert search_tracks_formatted("zzzzzz", client=client) == []


def test_search_errors_propagate(mock_client):
    client, _ = mock_client(lambda req: httpx.Response(401, text="no token"))
    with pytest.raises(NetworkError):
        search_tracks_formatted("Daft Punk", client=client)


def test_search_album_returns_first_match(mock_client):
    albums = [
        {"name": "Discovery", "href": "https://api.spotify.com/v1/albums/1", "uri": "spotify:album:1"},
        {"name": "Discovery (Live)", "href": "https://api.spotify.com/v1/albums/2"},
    ]
    client, seen = mock_client(lambda req: httpx.Response(200, json={"albums": {"items": albums}}))

    album = search_album_formatted("Discovery", client=client)

    assert seen[0].url.params["type"] == "album"
    assert isinstance(album, Album)
    assert album.name == "Discovery"
    assert album.href == "https://api.spotify.com/v1/albums/1"
    assert album.raw == albums[0]


def test_search_album_without_match(mock_client):
    client, _ = mock_client(lambda req: httpx.Response(200, json={"albums": {"items": []}}))
    with pytest.raises(NoResultError):
        search_album_formatted("nothing like this", client=client)


def test_play_best_album(monkeypatch, mock_client):
    album_href = "https://api.spotify.com/v1/albums/1"

    def handler(request):
        if request.url.path.endswith("/search"):
            return httpx.Response(200, json={"albums": {"items": [{"name": "Discovery", "href": album_href}]}})
        return httpx.Response(200, json={
            "name": "Discovery",
            "href": album_href,
            "tracks": {"items": [
                {"name": "One More Time", "duration_ms": 320000, "uri": "spotify:track:omt",
                 "artists": [{"name": "Daft Punk"}]},
            ]},
        })

    played = []
    monkeypatch.setattr(pb, "play_href", played.append)
    client, seen = mock_client(handler)

    first = play_best_album("Discovery", client=client)

    assert [str(r.url) for r in seen][1] == album_href
    assert played == ["spotify:track:omt"]
    assert first.name == "One More Time"
