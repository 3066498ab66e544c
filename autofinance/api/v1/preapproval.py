"""POST /v1/preapproval - loan pre-approval likelihood"""

import logging
import time
from dataclasses import asdict
from typing import Tuple

from fastapi import APIRouter, Depends, HTTPException, Request

from autofinance.api.dependencies import get_catalog, get_request_id
from autofinance.api.v1.schemas import PreApprovalRequest, PreApprovalResponse
from autofinance.domain.exceptions import InvalidVehicleError
from autofinance.domain.models import Vehicle
from autofinance.domain.preapproval import predict_approval
from autofinance.infrastructure.catalog import get_vehicle
from autofinance.infrastructure.observability.logging import log_preapproval
from autofinance.infrastructure.observability.metrics import record_calculation, record_preapproval

router = APIRouter()


@router.post("/preapproval", response_model=PreApprovalResponse, name="predict_approval")
def check_preapproval(
    request_body: PreApprovalRequest,
    request: Request,
    catalog: Tuple[Vehicle, ...] = Depends(get_catalog),
):
    """
    Estimate approval odds for a buyer, optionally for a specific vehicle.

    An inline vehicle wins over vehicle_id; with neither, the price is
    estimated from the target monthly payment.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    vehicle = None
    if request_body.vehicle is not None:
        vehicle = request_body.vehicle.to_domain()
    elif request_body.vehicle_id is not None:
        try:
            vehicle = get_vehicle(request_body.vehicle_id, catalog)
        except InvalidVehicleError as e:
            logging.warning(f"Unknown vehicle: {e}", extra={"request_id": request_id})
            raise HTTPException(status_code=404, detail=str(e))

    result = predict_approval(request_body.profile.to_domain(), vehicle)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("predict_approval")
    record_preapproval(result.likelihood_status)
    log_preapproval(
        request_id,
        vehicle.id if vehicle else None,
        result.likelihood_status,
        result.approval_percentage,
        duration_ms,
    )

    return PreApprovalResponse(**asdict(result))
