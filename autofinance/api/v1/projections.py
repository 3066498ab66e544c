"""Projection endpoints - equity timeline and depreciation curve"""

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Query

from autofinance.api.v1.schemas import DepreciationPointSchema, EquityPointSchema, EquityRequest
from autofinance.domain.projections import depreciation_curve, equity_timeline
from autofinance.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/projections/equity", response_model=List[EquityPointSchema], name="equity_timeline")
def get_equity_timeline(request_body: EquityRequest):
    """Month-by-month equity for a financed vehicle"""
    timeline = equity_timeline(
        request_body.base_price,
        request_body.down_payment,
        request_body.monthly_payment,
        request_body.annual_interest_rate_percent,
        request_body.term_months,
    )
    record_calculation("equity_timeline")
    return [EquityPointSchema(**asdict(point)) for point in timeline]


@router.get("/projections/depreciation", response_model=List[DepreciationPointSchema], name="depreciation_curve")
def get_depreciation_curve(
    base_price: float = Query(..., gt=0, description="Purchase price"),
    years: int = Query(5, ge=0, le=30, description="Years to project"),
):
    """Projected resale value by year"""
    curve = depreciation_curve(base_price, years)
    record_calculation("depreciation_curve")
    return [DepreciationPointSchema(**asdict(point)) for point in curve]
