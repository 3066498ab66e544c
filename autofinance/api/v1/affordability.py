"""Affordability endpoints - budget impact and personalized tips"""

from dataclasses import asdict

from fastapi import APIRouter

from autofinance.api.v1.schemas import (
    AffordabilityImpactSchema,
    AffordabilityRequest,
    AffordabilityResponse,
    FinancialProfileSchema,
    TipsResponse,
)
from autofinance.domain.affordability import (
    affordability_impact,
    affordability_label,
    analyze_affordability,
    financial_tips,
)
from autofinance.infrastructure.observability.metrics import record_affordability, record_calculation

router = APIRouter()


@router.post("/affordability", response_model=AffordabilityResponse, name="analyze_affordability")
def assess_affordability(request_body: AffordabilityRequest):
    """Classify a monthly payment against the buyer's income"""
    profile = request_body.profile.to_domain()
    assessment = analyze_affordability(request_body.monthly_payment, profile)
    impact = affordability_impact(request_body.monthly_payment, profile.monthly_income)

    record_calculation("analyze_affordability")
    record_affordability(assessment.risk_level)

    return AffordabilityResponse(
        **asdict(assessment),
        label=affordability_label(assessment),
        impact=AffordabilityImpactSchema(**asdict(impact)),
    )


@router.post("/affordability/tips", response_model=TipsResponse, name="financial_tips")
def get_financial_tips(profile: FinancialProfileSchema):
    """Budgeting tips for a profile"""
    record_calculation("financial_tips")
    return TipsResponse(tips=financial_tips(profile.to_domain()))
