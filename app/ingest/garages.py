"""Garage occupancy ingestion from the campus parking status page."""

from __future__ import annotations

import logging
import os
import re

import httpx
from bs4 import BeautifulSoup, Tag

from app.ingest.exceptions import GarageFetchError, GarageParseError
from app.ingest.models import GarageCatalog, GarageOccupancy, OccupancySnapshot

logger = logging.getLogger(__name__)

DEFAULT_STATUS_URL = "https://sjsuparkingstatus.sjsu.edu/"

NAME_SELECTOR = ".garage .garage__name"
STATUS_CLASS = "garage__text"
FULLNESS_SELECTOR = "span.garage__fullness"
FULL_MARKER = "full"

LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def status_url() -> str:
    return os.environ.get("GARAGE_STATUS_URL", DEFAULT_STATUS_URL)


async def fetch_status_page(url: str) -> str:
    """Fetch the raw status page.

    The upstream host serves a certificate that does not validate, so
    verification is turned off for this client only.
    """
    try:
        async with httpx.AsyncClient(verify=False, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise GarageFetchError(
            f"Status page answered {exc.response.status_code}",
            status_code=exc.response.status_code,
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise GarageFetchError(f"Status page unreachable: {exc}") from exc
    return response.text


def parse_garage_page(html: str, catalog: GarageCatalog) -> OccupancySnapshot:
    """Turn status page markup into a snapshot of the catalogued garages.

    Names missing from ``catalog`` are skipped. A garage whose open count
    cannot be determined is kept with ``open=None``. Any failure while
    walking the document raises :class:`GarageParseError`.
    """
    try:
        return _extract(html, catalog)
    except Exception as exc:
        raise GarageParseError(f"Could not parse status page: {exc}") from exc


def _extract(html: str, catalog: GarageCatalog) -> OccupancySnapshot:
    soup = BeautifulSoup(html, "html.parser")
    snapshot: OccupancySnapshot = {}
    for name_el in soup.select(NAME_SELECTOR):
        name = name_el.get_text().strip()
        total = catalog.get(name)
        if total is None:
            logger.debug("Ignoring uncatalogued garage %r", name)
            continue
        snapshot[name] = GarageOccupancy(total=total, open=_open_spots(name_el, total))
    if not snapshot:
        logger.warning("No catalogued garages found on status page")
    return snapshot


def _open_spots(name_el: Tag, total: int) -> int | None:
    status = name_el.find_next_sibling()
    if status is None or status.name != "p" or STATUS_CLASS not in (status.get("class") or []):
        return None
    # "full" takes precedence over any percentage on the same line.
    if FULL_MARKER in status.get_text().strip().lower():
        return 0
    fullness = status.select_one(FULLNESS_SELECTOR)
    if fullness is None:
        return None
    percent = parse_percentage(fullness.get_text())
    if percent is None:
        return None
    return open_from_percentage(total, percent)


def parse_percentage(text: str) -> int | None:
    """Read the leading integer of a fill label such as ``" 82 %"``."""
    match = LEADING_INT_RE.match(text.strip().replace("%", "").strip())
    if not match:
        return None
    return int(match.group(0))


def open_from_percentage(total: int, percent: int) -> int:
    """Open spots for a fill percentage, rounded half-up and kept within ``[0, total]``."""
    # total * (100 - percent) / 100, rounded half-up in integer arithmetic
    open_spots = (2 * total * (100 - percent) + 100) // 200
    return max(0, min(total, open_spots))


async def load_garage_snapshot(catalog: GarageCatalog, *, url: str | None = None) -> OccupancySnapshot:
    """Run one fetch-then-parse cycle."""
    url = url or status_url()
    logger.info("Fetching garage status from %s", url)
    html = await fetch_status_page(url)
    snapshot = parse_garage_page(html, catalog)
    logger.info("Parsed %s garages", len(snapshot))
    return snapshot
