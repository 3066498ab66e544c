"""GET /v1/vehicles - built-in vehicle catalog"""

from dataclasses import asdict
from typing import List, Tuple

from fastapi import APIRouter, Depends

from autofinance.api.dependencies import get_catalog
from autofinance.api.v1.schemas import VehicleSchema
from autofinance.domain.models import Vehicle

router = APIRouter()


@router.get("/vehicles", response_model=List[VehicleSchema], name="list_vehicles")
def list_vehicles(catalog: Tuple[Vehicle, ...] = Depends(get_catalog)):
    """Vehicles available for comparison, in catalog order"""
    return [VehicleSchema(**asdict(v)) for v in catalog]
