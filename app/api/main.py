"""FastAPI application for the site's data endpoints."""

from __future__ import annotations

import functools
import logging

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from app.ingest import load_catalog
from app.ingest.contributions import ContributionsError, fetch_contributions
from app.ingest.exceptions import GarageIngestError
from app.ingest.garages import load_garage_snapshot
from app.ingest.lastfm import LastFmClient, LastFmError
from app.ingest.models import GarageCatalog, NowPlaying
from app.ingest.resume import RESUME_FILENAME, ResumeError, fetch_resume

logger = logging.getLogger(__name__)

load_dotenv()

app = FastAPI(title="Personal Site API")

NO_STORE = {"Cache-Control": "no-store"}
HOURLY = {"Cache-Control": "public, max-age=3600"}

PARKING_ERROR = "Could not retrieve parking data."


class GarageStatus(BaseModel):
    total: int
    open: int | None


class ContributionDayModel(BaseModel):
    date: str
    count: int
    level: int


class ContributionsResponse(BaseModel):
    contributions: list[ContributionDayModel]
    totalContributions: int


@functools.lru_cache(maxsize=1)
def get_catalog() -> GarageCatalog:
    return load_catalog()


@app.get("/api/parking", response_model=dict[str, GarageStatus])
async def parking(response: Response, catalog: GarageCatalog = Depends(get_catalog)):
    try:
        snapshot = await load_garage_snapshot(catalog)
    except GarageIngestError as exc:
        logger.warning("Error fetching or parsing parking data: %s", exc)
        return JSONResponse({"error": PARKING_ERROR}, status_code=500, headers=NO_STORE)
    response.headers.update(NO_STORE)
    return {
        name: GarageStatus(total=garage.total, open=garage.open)
        for name, garage in snapshot.items()
    }


@app.get("/api/now-playing")
async def now_playing() -> JSONResponse:
    client = LastFmClient.from_env()
    if client is None:
        return JSONResponse(
            {"error": "Last.fm API key not configured", "isPlaying": False, "track": None},
            headers=NO_STORE,
        )
    try:
        result = await client.now_playing()
    except LastFmError as exc:
        logger.warning("Error fetching Last.fm data: %s", exc)
        return JSONResponse({"error": str(exc), "isPlaying": False, "track": None}, headers=NO_STORE)
    return JSONResponse(_now_playing_payload(result), headers=NO_STORE)


def _now_playing_payload(result: NowPlaying) -> dict[str, object]:
    if result.track is None:
        return {"isPlaying": False, "track": None}
    track = result.track
    return {
        "isPlaying": result.is_playing,
        "track": {
            "name": track.name,
            "artist": track.artist,
            "album": track.album,
            "albumArt": track.album_art,
            "url": track.url,
        },
    }


@app.get("/api/contributions", response_model=ContributionsResponse)
async def contributions(response: Response) -> ContributionsResponse:
    response.headers.update(HOURLY)
    try:
        days, total = await fetch_contributions()
    except ContributionsError as exc:
        logger.warning("Failed to fetch GitHub contributions: %s", exc)
        return ContributionsResponse(contributions=[], totalContributions=0)
    return ContributionsResponse(
        contributions=[ContributionDayModel(date=d.date, count=d.count, level=d.level) for d in days],
        totalContributions=total,
    )


@app.get("/api/resume")
async def resume() -> Response:
    try:
        pdf = await fetch_resume()
    except ResumeError as exc:
        logger.warning("Error fetching resume: %s", exc)
        return PlainTextResponse(f"Error fetching resume: {exc}", status_code=500)
    headers = {"Content-Disposition": f'inline; filename="{RESUME_FILENAME}"', **HOURLY}
    return Response(content=pdf, media_type="application/pdf", headers=headers)
