"""Print the current garage occupancy snapshot."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

from app.ingest import load_catalog
from app.ingest.exceptions import GarageIngestError
from app.ingest.garages import load_garage_snapshot
from app.utils.dates import now_in_tz


async def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        snapshot = await load_garage_snapshot(load_catalog())
    except GarageIngestError as exc:
        raise SystemExit(f"Could not retrieve parking data: {exc}") from exc
    print("Garage status at", now_in_tz().format("HH:mm:ss"))
    for name, garage in sorted(snapshot.items()):
        shown = "n/a" if garage.open is None else f"{garage.open}/{garage.total} open"
        print(f"  {name}: {shown}")


if __name__ == "__main__":
    asyncio.run(main())
