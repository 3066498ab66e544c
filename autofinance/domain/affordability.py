"""Affordability analysis - payment vs. income classification"""

from typing import List

from autofinance.domain.amortization import apply_financing
from autofinance.domain.credit import adjusted_rate, credit_score_range
from autofinance.domain.exceptions import InvalidProfileError
from autofinance.domain.models import (
    AffordabilityAssessment,
    AffordabilityImpact,
    FinancialProfile,
    FinancingOption,
    Vehicle,
)
from autofinance.utils.money import ensure_finite, round_half_away

# Inclusive upper bounds on budget impact (% of monthly income)
LOW_RISK_MAX = 15.0
MEDIUM_RISK_MAX = 20.0
HIGH_RISK_MAX = 25.0

# Share of the price the badge lets the buyer put down, trade-in included
BADGE_DOWN_PAYMENT_CAP = 0.3


def budget_impact(monthly_payment: float, monthly_income: float) -> float:
    """Monthly payment as a percentage of monthly income"""
    if monthly_income <= 0:
        raise InvalidProfileError(f"Monthly income must be > 0, got {monthly_income}")
    return ensure_finite(monthly_payment / monthly_income * 100, "budget impact")


def analyze_affordability(monthly_payment: float, profile: FinancialProfile) -> AffordabilityAssessment:
    """
    Classify a payment against the buyer's income.

    Rule of thumb: a car payment should stay within 15-20% of monthly income.
    - <= 15%: affordable, low risk
    - <= 20%: affordable, medium risk
    - <= 25%: not affordable, high risk
    - >  25%: not affordable, high risk (stronger warning)
    """
    impact = budget_impact(monthly_payment, profile.monthly_income)

    if impact <= LOW_RISK_MAX:
        return AffordabilityAssessment(
            can_afford=True,
            budget_impact_percent=impact,
            risk_level="low",
            recommendation_text=(
                "This fits comfortably within your budget! "
                "You'll have plenty of room for other expenses."
            ),
        )
    elif impact <= MEDIUM_RISK_MAX:
        return AffordabilityAssessment(
            can_afford=True,
            budget_impact_percent=impact,
            risk_level="medium",
            recommendation_text=(
                "This is within recommended limits, but consider keeping a "
                "financial cushion for unexpected expenses."
            ),
        )
    elif impact <= HIGH_RISK_MAX:
        return AffordabilityAssessment(
            can_afford=False,
            budget_impact_percent=impact,
            risk_level="high",
            recommendation_text=(
                "This payment is higher than recommended. Consider a longer term, "
                "larger down payment, or a more affordable vehicle."
            ),
        )
    else:
        return AffordabilityAssessment(
            can_afford=False,
            budget_impact_percent=impact,
            risk_level="high",
            recommendation_text=(
                "This payment may strain your budget significantly. "
                "We strongly recommend exploring more affordable options."
            ),
        )


def affordability_impact(monthly_payment: float, monthly_income: float) -> AffordabilityImpact:
    """
    Income gauge reading. Bands are strict upper bounds and deliberately
    differ from analyze_affordability's risk tiers.
    """
    percentage = budget_impact(monthly_payment, monthly_income)

    if percentage < 10:
        status, message = "excellent", "Well within budget - excellent financial position"
    elif percentage < 15:
        status, message = "good", "Comfortable payment - good financial balance"
    elif percentage < 20:
        status, message = "caution", "Stretching budget - consider lower payment"
    else:
        status, message = "overextended", "Over budget - payment too high for income"

    return AffordabilityImpact(
        percentage=round_half_away(percentage, 1),
        status=status,
        message=message,
    )


def vehicle_affordability(
    vehicle: Vehicle,
    profile: FinancialProfile,
    option: FinancingOption,
) -> AffordabilityAssessment:
    """Assessment behind a vehicle's affordability badge"""
    down_payment = min(
        profile.max_down_payment + profile.trade_in_credit,
        vehicle.base_price * BADGE_DOWN_PAYMENT_CAP,
    )
    priced = apply_financing(
        vehicle.base_price,
        FinancingOption(
            kind=option.kind,
            term_months=option.term_months,
            down_payment=down_payment,
            annual_interest_rate_percent=adjusted_rate(profile.credit_score, option.annual_interest_rate_percent),
        ),
    )
    return analyze_affordability(priced.monthly_payment, profile)


def affordability_label(assessment: AffordabilityAssessment) -> str:
    """Short badge text for an assessment"""
    if assessment.can_afford:
        return "Excellent Fit" if assessment.risk_level == "low" else "Within Budget"
    return "Above Budget"


def financial_tips(profile: FinancialProfile) -> List[str]:
    """Personalized budgeting tips, most specific first"""
    tips = []

    if credit_score_range(profile.credit_score) in ("poor", "fair"):
        tips.append(
            "Improving your credit score by 50-100 points could save you thousands "
            "in interest over the life of your loan."
        )

    if profile.max_down_payment < 3000:
        tips.append(
            "A larger down payment reduces your monthly payments and the total interest "
            "you'll pay. Aim for at least 10-20% down."
        )
    elif profile.max_down_payment >= 5000:
        tips.append(
            "Great down payment capacity! This will significantly reduce your interest "
            "costs and monthly payments."
        )

    if profile.preferred_monthly_payment > profile.monthly_income * LOW_RISK_MAX / 100:
        tips.append(
            "Your target payment exceeds 15% of your monthly income. "
            "Consider adjusting to avoid financial stress."
        )

    if profile.has_trade_in and profile.trade_in_value > 0:
        tips.append(
            "Using your trade-in as a down payment can reduce your financing needs "
            "and improve loan terms."
        )

    tips.append(
        "Leasing typically offers lower monthly payments but you won't own the vehicle. "
        "Financing costs more monthly but builds equity."
    )
    tips.append(
        "Consider total cost of ownership including insurance, maintenance, and fuel "
        "when budgeting for your vehicle."
    )

    return tips
