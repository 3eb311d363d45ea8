from types import MappingProxyType

import httpx
import pytest

from app.api.main import app, get_catalog

ENV_VARS = (
    "GARAGE_STATUS_URL",
    "LASTFM_API_KEY",
    "LASTFM_USERNAME",
    "GITHUB_USERNAME",
    "RESUME_URL",
    "TIMEZONE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def catalog():
    return MappingProxyType(
        {
            "South Garage": 1505,
            "West Garage": 1144,
            "North Garage": 1445,
            "South Campus Garage": 1480,
        }
    )


@pytest.fixture()
def api_app(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def api_client(api_app):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=api_app), base_url="http://testserver")
