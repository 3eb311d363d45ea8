"""Ingestion data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

# Garage name -> total capacity.
GarageCatalog = Mapping[str, int]


@dataclass(slots=True, frozen=True)
class Garage:
    name: str
    total: int


@dataclass(slots=True)
class GarageOccupancy:
    total: int
    open: int | None = None


OccupancySnapshot = dict[str, GarageOccupancy]


@dataclass(slots=True)
class Track:
    name: str
    artist: str
    album: str
    album_art: str
    url: str


@dataclass(slots=True)
class NowPlaying:
    is_playing: bool
    track: Track | None = None


@dataclass(slots=True)
class ContributionDay:
    date: str
    count: int
    level: int
