from app.ingest.lastfm import LastFmClient, _parse_recent_tracks


def test_from_env_requires_api_key(monkeypatch):
    assert LastFmClient.from_env() is None
    monkeypatch.setenv("LASTFM_API_KEY", "key")
    monkeypatch.setenv("LASTFM_USERNAME", "someone")
    client = LastFmClient.from_env()
    assert client.api_key == "key"
    assert client.username == "someone"


def test_recent_track_not_playing_falls_back_to_medium_art():
    data = {
        "recenttracks": {
            "track": {
                "name": "Idioteque",
                "artist": {"#text": "Radiohead"},
                "album": {"#text": "Kid A"},
                "image": [
                    {"size": "medium", "#text": "https://img.example/64s.png"},
                    {"size": "large", "#text": ""},
                ],
                "url": "https://www.last.fm/music/Radiohead/_/Idioteque",
            }
        }
    }
    result = _parse_recent_tracks(data)
    assert result.is_playing is False
    assert result.track.name == "Idioteque"
    assert result.track.album_art == "https://img.example/64s.png"


def test_recent_track_without_art():
    result = _parse_recent_tracks({"recenttracks": {"track": [{"name": "Untitled", "image": []}]}})
    assert result.track.album_art == ""
    assert result.track.artist == ""
