import pytest

from app.ingest import load_catalog, load_garages
from app.ingest.models import Garage


def test_reference_catalog():
    assert dict(load_catalog()) == {
        "South Garage": 1505,
        "West Garage": 1144,
        "North Garage": 1445,
        "South Campus Garage": 1480,
    }


def test_catalog_is_read_only():
    catalog = load_catalog()
    with pytest.raises(TypeError):
        catalog["Overflow Lot"] = 10


def test_load_garages_from_custom_file(tmp_path):
    path = tmp_path / "garages.yml"
    path.write_text("- name: Lot A\n  total: '40'\n- name: Lot B\n  total: 12\n")
    assert load_garages(path) == [Garage(name="Lot A", total=40), Garage(name="Lot B", total=12)]
    assert load_catalog(path)["Lot A"] == 40
