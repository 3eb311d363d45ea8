"""Last.fm now-playing lookup."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from app.ingest.exceptions import IngestError
from app.ingest.models import NowPlaying, Track

logger = logging.getLogger(__name__)

LASTFM_ENDPOINT = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_USERNAME = "n8thantran"


class LastFmError(IngestError):
    pass


class LastFmClient:
    def __init__(self, api_key: str, username: str = DEFAULT_USERNAME) -> None:
        self.api_key = api_key
        self.username = username

    @classmethod
    def from_env(cls) -> LastFmClient | None:
        api_key = os.environ.get("LASTFM_API_KEY")
        if not api_key:
            return None
        return cls(api_key, os.environ.get("LASTFM_USERNAME", DEFAULT_USERNAME))

    async def now_playing(self) -> NowPlaying:
        params = {
            "method": "user.getrecenttracks",
            "user": self.username,
            "api_key": self.api_key,
            "format": "json",
            "limit": 1,
        }
        logger.info("Fetching recent tracks for %s", self.username)
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(LASTFM_ENDPOINT, params=params)
        except httpx.HTTPError as exc:
            raise LastFmError("Failed to fetch Last.fm data") from exc
        if response.is_error:
            logger.warning("Last.fm API error %s: %s", response.status_code, response.text)
            raise LastFmError(f"Last.fm API error: {response.reason_phrase}")
        try:
            return _parse_recent_tracks(response.json())
        except (ValueError, AttributeError, TypeError, KeyError) as exc:
            logger.warning("Unexpected Last.fm payload: %s", exc)
            raise LastFmError("Failed to fetch Last.fm data") from exc


def _parse_recent_tracks(data: dict[str, Any]) -> NowPlaying:
    tracks = (data.get("recenttracks") or {}).get("track") or []
    if isinstance(tracks, dict):
        tracks = [tracks]
    if not tracks:
        return NowPlaying(is_playing=False)
    item = tracks[0]
    is_playing = (item.get("@attr") or {}).get("nowplaying") == "true"
    track = Track(
        name=item.get("name", ""),
        artist=(item.get("artist") or {}).get("#text", ""),
        album=(item.get("album") or {}).get("#text", ""),
        album_art=_album_art(item.get("image") or []),
        url=item.get("url", ""),
    )
    return NowPlaying(is_playing=is_playing, track=track)


def _album_art(images: list[dict[str, str]]) -> str:
    for size in ("large", "medium"):
        url = next((image.get("#text") for image in images if image.get("size") == size), None)
        if url:
            return url
    return ""
