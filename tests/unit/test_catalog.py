"""Unit tests for the vehicle catalog and record parsing"""

import pytest
from autofinance.domain.exceptions import InvalidVehicleError
from autofinance.infrastructure.catalog import (
    get_vehicle,
    load_catalog,
    parse_catalog,
    parse_vehicle,
    with_price_override,
)


def _record(**overrides):
    record = {"id": "camry", "name": "Camry", "model": "LE", "year": 2024, "basePrice": 26220, "category": "Sedan"}
    record.update(overrides)
    return record


def test_load_catalog():
    """Test built-in lineup parses with unique ids"""
    catalog = load_catalog()

    assert len(catalog) == 20
    assert len({v.id for v in catalog}) == 20
    assert catalog[0].id == "corolla-2023"
    assert all(v.base_price > 0 for v in catalog)


def test_get_vehicle():
    vehicle = get_vehicle("camry-2023")

    assert vehicle.name == "Camry"
    assert vehicle.base_price == 26220
    assert vehicle.price_source == "Ira Toyota of Danvers"


def test_get_vehicle_unknown():
    with pytest.raises(InvalidVehicleError):
        get_vehicle("delorean-1981")


def test_parse_vehicle_accepts_snake_case():
    record = _record()
    del record["basePrice"]
    record["base_price"] = 30000

    assert parse_vehicle(record).base_price == 30000


@pytest.mark.parametrize(
    "overrides",
    [
        {"basePrice": "26220"},
        {"basePrice": None},
        {"basePrice": 0},
        {"basePrice": -1},
        {"year": "twenty"},
        {"id": ""},
    ],
)
def test_parse_vehicle_rejects_malformed(overrides):
    with pytest.raises(InvalidVehicleError):
        parse_vehicle(_record(**overrides))


def test_parse_vehicle_missing_field():
    record = _record()
    del record["category"]

    with pytest.raises(InvalidVehicleError):
        parse_vehicle(record)


def test_parse_catalog_rejects_duplicates():
    with pytest.raises(InvalidVehicleError):
        parse_catalog([_record(), _record()])


def test_with_price_override():
    """Test a listing price replaces the base price"""
    vehicle = get_vehicle("rav4-2024")

    priced = with_price_override(vehicle, 27100, "Local dealer listing")

    assert priced.base_price == 27100
    assert priced.price_source == "Local dealer listing"
    assert vehicle.base_price == 28675  # Source vehicle untouched


def test_with_price_override_rejects_bad_price():
    with pytest.raises(InvalidVehicleError):
        with_price_override(get_vehicle("rav4-2024"), 0)
