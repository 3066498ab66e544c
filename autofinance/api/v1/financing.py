"""Financing endpoints - amortized payments and lease/finance comparison"""

from dataclasses import asdict

from fastapi import APIRouter

from autofinance.api.v1.schemas import (
    ComparisonRequest,
    ComparisonResponse,
    DefaultFinancingResponse,
    FinancingOptionSchema,
    FinancingRequest,
)
from autofinance.domain.amortization import apply_financing, compare_lease_vs_finance, default_financing_options
from autofinance.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.get("/financing/defaults", response_model=DefaultFinancingResponse, name="default_financing_options")
def get_default_financing():
    """Preset lease and finance terms"""
    defaults = default_financing_options()
    return DefaultFinancingResponse(
        lease=FinancingOptionSchema(**asdict(defaults["lease"])),
        finance=FinancingOptionSchema(**asdict(defaults["finance"])),
    )


@router.post("/financing/calculate", response_model=FinancingOptionSchema, name="apply_financing")
def calculate_financing(request_body: FinancingRequest):
    """Fill monthly payment and total cost for a vehicle price"""
    result = apply_financing(request_body.base_price, request_body.option.to_domain())
    record_calculation("apply_financing")
    return FinancingOptionSchema(**asdict(result))


@router.post("/financing/compare", response_model=ComparisonResponse, name="compare_lease_vs_finance")
def compare_financing(request_body: ComparisonRequest):
    """
    Lease vs finance for one price.

    Positive savings mean leasing is cheaper than financing.
    """
    defaults = default_financing_options()
    lease = request_body.lease.to_domain() if request_body.lease else defaults["lease"]
    finance = request_body.finance.to_domain() if request_body.finance else defaults["finance"]

    comparison = compare_lease_vs_finance(request_body.base_price, lease, finance)
    record_calculation("compare_lease_vs_finance")
    return ComparisonResponse(**asdict(comparison))
