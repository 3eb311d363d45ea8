"""Ingestion helpers."""

from __future__ import annotations

import pathlib
from types import MappingProxyType

import yaml

from app.ingest.models import Garage, GarageCatalog

GARAGES_PATH = pathlib.Path(__file__).with_name("garages.yml")


def load_garages(path: pathlib.Path = GARAGES_PATH) -> list[Garage]:
    data = yaml.safe_load(path.read_text())
    return [Garage(name=item["name"], total=int(item["total"])) for item in data]


def load_catalog(path: pathlib.Path = GARAGES_PATH) -> GarageCatalog:
    """Return the read-only name -> total capacity mapping."""
    return MappingProxyType({garage.name: garage.total for garage in load_garages(path)})
