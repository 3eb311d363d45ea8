"""Errors raised by the upstream ingestion clients."""

from __future__ import annotations


class IngestError(RuntimeError):
    """An upstream source could not be turned into a result."""


class GarageIngestError(IngestError):
    """A garage occupancy cycle failed; no snapshot was produced."""


class GarageFetchError(GarageIngestError):
    """The status page was unreachable or answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GarageParseError(GarageIngestError):
    """The status page markup could not be traversed."""
