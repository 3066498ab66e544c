"""Built-in vehicle catalog and parsing of raw vehicle records"""

from dataclasses import replace
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Tuple

from autofinance.domain.exceptions import InvalidVehicleError
from autofinance.domain.models import Vehicle

# MSRP snapshots; priceSource names the dealer the price was taken from
TOYOTA_LINEUP: List[Dict[str, Any]] = [
    {"id": "corolla-2023", "name": "Corolla", "model": "LE", "year": 2023, "basePrice": 21550, "category": "Sedan", "priceSource": "World Toyota"},
    {"id": "camry-2023", "name": "Camry", "model": "LE", "year": 2023, "basePrice": 26220, "category": "Sedan", "priceSource": "Ira Toyota of Danvers"},
    {"id": "rav4-2023", "name": "RAV4", "model": "LE", "year": 2023, "basePrice": 27575, "category": "SUV", "priceSource": "toyotaofcedarpark.com"},
    {"id": "4runner-2023", "name": "4Runner", "model": "SR5", "year": 2023, "basePrice": 40155, "category": "SUV", "priceSource": "toyotaofcedarpark.com"},
    {"id": "sienna-2023", "name": "Sienna", "model": "LE", "year": 2023, "basePrice": 35385, "category": "Minivan", "priceSource": "DCH Wappingers Toyota"},
    {"id": "corolla-cross-2024", "name": "Corolla Cross", "model": "Base", "year": 2024, "basePrice": 23860, "category": "SUV", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "rav4-2024", "name": "RAV4", "model": "Base", "year": 2024, "basePrice": 28675, "category": "SUV", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "highlander-2024", "name": "Highlander", "model": "Base", "year": 2024, "basePrice": 39270, "category": "SUV", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "corolla-hybrid-2024", "name": "Corolla Hybrid", "model": "Base", "year": 2024, "basePrice": 23500, "category": "Sedan", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "tundra-2024", "name": "Tundra", "model": "Base", "year": 2024, "basePrice": 39965, "category": "Truck", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "tacoma-2024", "name": "Tacoma", "model": "SR", "year": 2024, "basePrice": 31700, "category": "Truck", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "sequoia-2024", "name": "Sequoia", "model": "SR5", "year": 2024, "basePrice": 60875, "category": "SUV", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "prius-2024", "name": "Prius", "model": "LE", "year": 2024, "basePrice": 28645, "category": "Hybrid", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "prius-prime-2024", "name": "Prius Prime", "model": "SE", "year": 2024, "basePrice": 32975, "category": "Plug-in Hybrid", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "venza-2024", "name": "Venza", "model": "LE", "year": 2024, "basePrice": 34350, "category": "SUV", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "crown-2024", "name": "Crown", "model": "XLE", "year": 2024, "basePrice": 40150, "category": "Sedan", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "gr86-2024", "name": "GR86", "model": "Base", "year": 2024, "basePrice": 29500, "category": "Sports", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "supra-2024", "name": "GR Supra", "model": "2.0", "year": 2024, "basePrice": 46540, "category": "Sports", "priceSource": "Fletcher Jones Toyota of Carson"},
    {"id": "avalon-2022", "name": "Avalon", "model": "XLE", "year": 2022, "basePrice": 36825, "category": "Sedan", "priceSource": "World Toyota"},
    {"id": "mirai-2024", "name": "Mirai", "model": "XLE", "year": 2024, "basePrice": 50220, "category": "Fuel Cell", "priceSource": "Fletcher Jones Toyota of Carson"},
]


def _field(record: Dict[str, Any], camel: str, snake: str) -> Any:
    """Read a field that may arrive in either camelCase or snake_case"""
    if camel in record:
        return record[camel]
    return record[snake]


def parse_vehicle(record: Dict[str, Any]) -> Vehicle:
    """
    Build a Vehicle from a loosely-typed record (JSON, listing feed, fixture).

    Raises:
        InvalidVehicleError: missing fields, non-numeric price or year, or a
            price that is not positive
    """
    try:
        price = _field(record, "basePrice", "base_price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise TypeError(f"basePrice must be a number, got {type(price).__name__}")

        return Vehicle(
            id=str(record["id"]),
            name=str(record["name"]),
            model=str(record["model"]),
            year=int(record["year"]),
            base_price=float(price),
            category=str(record["category"]),
            price_source=record.get("priceSource", record.get("price_source")),
        )
    except KeyError as e:
        raise InvalidVehicleError(f"Vehicle record missing field {e}") from e
    except (ValueError, TypeError) as e:
        raise InvalidVehicleError(f"Invalid vehicle record {record.get('id', '?')}: {e}") from e


def parse_catalog(records: Iterable[Dict[str, Any]]) -> Tuple[Vehicle, ...]:
    """Parse records in order, rejecting duplicate ids"""
    vehicles = []
    seen = set()

    for record in records:
        vehicle = parse_vehicle(record)
        if vehicle.id in seen:
            raise InvalidVehicleError(f"Duplicate vehicle id {vehicle.id}")
        seen.add(vehicle.id)
        vehicles.append(vehicle)

    return tuple(vehicles)


@lru_cache
def load_catalog() -> Tuple[Vehicle, ...]:
    """The built-in lineup, parsed once"""
    return parse_catalog(TOYOTA_LINEUP)


def get_vehicle(vehicle_id: str, catalog: Optional[Iterable[Vehicle]] = None) -> Vehicle:
    """Look up a vehicle by id in the given catalog (built-in by default)"""
    for vehicle in catalog if catalog is not None else load_catalog():
        if vehicle.id == vehicle_id:
            return vehicle
    raise InvalidVehicleError(f"Unknown vehicle id {vehicle_id}")


def with_price_override(vehicle: Vehicle, price: float, source: Optional[str] = None) -> Vehicle:
    """
    Swap in a price from an external listing.

    The listing is an opaque pricing source; only its price and a label
    travel with the vehicle.
    """
    return replace(vehicle, base_price=price, price_source=source or vehicle.price_source)
