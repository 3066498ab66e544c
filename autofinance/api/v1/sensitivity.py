"""Sensitivity endpoints - credit score and down payment sweeps"""

from dataclasses import asdict
from typing import List

from fastapi import APIRouter

from autofinance.api.v1.schemas import (
    CreditImpactRequest,
    CreditScenarioSchema,
    DownPaymentRequest,
    DownPaymentScenarioSchema,
)
from autofinance.domain.sensitivity import credit_score_impact, down_payment_sensitivity
from autofinance.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/sensitivity/credit-score", response_model=List[CreditScenarioSchema], name="credit_score_impact")
def get_credit_score_impact(request_body: CreditImpactRequest):
    """Payment at credit scores 600-800"""
    scenarios = credit_score_impact(
        request_body.base_price,
        request_body.down_payment,
        request_body.base_rate,
        request_body.term_months,
    )
    record_calculation("credit_score_impact")
    return [CreditScenarioSchema(**asdict(s)) for s in scenarios]


@router.post("/sensitivity/down-payment", response_model=List[DownPaymentScenarioSchema], name="down_payment_sensitivity")
def get_down_payment_sensitivity(request_body: DownPaymentRequest):
    """Payment across six down payment levels"""
    scenarios = down_payment_sensitivity(
        request_body.base_price,
        request_body.rate,
        request_body.term_months,
        request_body.min_down,
        request_body.max_down,
    )
    record_calculation("down_payment_sensitivity")
    return [DownPaymentScenarioSchema(**asdict(s)) for s in scenarios]
