"""GitHub contribution calendar lookup."""

from __future__ import annotations

import logging
import os

import httpx

from app.ingest.exceptions import IngestError
from app.ingest.models import ContributionDay
from app.utils.dates import current_year

logger = logging.getLogger(__name__)

CONTRIBUTIONS_ENDPOINT = "https://github-contributions-api.jogruber.de/v4/{username}"
DEFAULT_USERNAME = "n8thantran"
USER_AGENT = "Portfolio/1.0"


class ContributionsError(IngestError):
    pass


async def fetch_contributions(
    username: str | None = None, *, year: int | None = None
) -> tuple[list[ContributionDay], int]:
    """Return the day-by-day calendar and the yearly total."""
    username = username or os.environ.get("GITHUB_USERNAME", DEFAULT_USERNAME)
    year = year or current_year()
    url = CONTRIBUTIONS_ENDPOINT.format(username=username)
    try:
        async with httpx.AsyncClient(headers={"User-Agent": USER_AGENT}) as client:
            response = await client.get(url, params={"y": year})
            response.raise_for_status()
        data = response.json()
        days = [
            ContributionDay(date=day["date"], count=int(day["count"]), level=int(day["level"]))
            for day in data["contributions"]
        ]
        total = int((data.get("total") or {}).get(str(year)) or 0)
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        raise ContributionsError(f"Could not load contributions for {username}: {exc}") from exc
    return days, total
