"""Pre-approval predictor - weighted multi-factor approval likelihood"""

import math
from typing import List, Optional

from autofinance.domain.models import Factor, FinancialProfile, PreApprovalResult, Vehicle

MIN_CREDIT_SCORE = 610
GOOD_CREDIT_SCORE = 660
EXCELLENT_CREDIT_SCORE = 720

MIN_INCOME_TO_PAYMENT_RATIO = 2.5
MIN_DOWN_PAYMENT_PERCENT = 10.0
TRADE_IN_USEFUL_VALUE = 1000

# Months used to turn a target payment into a price when no vehicle is chosen
ESTIMATE_TERM_MONTHS = 60

WEIGHTS = {
    "credit_score": 0.4,
    "income_ratio": 0.3,
    "down_payment": 0.2,
    "trade_in": 0.1,
}


def _money(amount: float) -> str:
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def evaluate_credit(credit_score: int, recommendations: List[str]) -> Factor:
    """Bucketed credit factor: <610 poor, >=720 excellent, >=660 good, else fair"""
    if credit_score < MIN_CREDIT_SCORE:
        recommendations.append(
            "Improve your credit score to at least 610 by paying bills on time and reducing debt"
        )
        return Factor(
            percentage=0,
            status="poor",
            message=(
                f"Credit score of {credit_score} is below the typical minimum ({MIN_CREDIT_SCORE}). "
                "Focus on improving credit before applying."
            ),
        )
    elif credit_score >= EXCELLENT_CREDIT_SCORE:
        return Factor(
            percentage=100,
            status="excellent",
            message=f"Excellent credit score of {credit_score}! You qualify for the best interest rates.",
        )
    elif credit_score >= GOOD_CREDIT_SCORE:
        recommendations.append("Consider improving credit to 720+ for the best interest rates")
        return Factor(
            percentage=75,
            status="good",
            message=f"Good credit score of {credit_score}. You should qualify for competitive rates.",
        )
    else:
        recommendations.append("Work on improving your credit score to get better loan terms")
        return Factor(
            percentage=50,
            status="fair",
            message=f"Fair credit score of {credit_score}. You may qualify but with higher interest rates.",
        )


def evaluate_income_ratio(
    monthly_income: float,
    preferred_monthly_payment: float,
    recommendations: List[str],
) -> Factor:
    """Income as a multiple of the target payment; lenders want at least 2.5x"""
    ratio = monthly_income / preferred_monthly_payment

    if monthly_income < preferred_monthly_payment * MIN_INCOME_TO_PAYMENT_RATIO:
        affordable_payment = math.floor(monthly_income / MIN_INCOME_TO_PAYMENT_RATIO)
        recommendations.append(
            f"Reduce target monthly payment to {_money(affordable_payment)} or increase income"
        )
        return Factor(
            percentage=0,
            status="issue",
            ratio=ratio,
            message=(
                f"Monthly income of {_money(monthly_income)} is too low for a "
                f"{_money(preferred_monthly_payment)} payment. "
                "Lenders prefer income to be at least 2.5x the payment."
            ),
        )
    elif ratio >= 5:
        return Factor(
            percentage=100,
            status="excellent",
            ratio=ratio,
            message=f"Your income is {ratio:.1f}x your target payment - excellent ratio!",
        )
    elif ratio >= 3.5:
        return Factor(
            percentage=75,
            status="good",
            ratio=ratio,
            message=f"Your income is {ratio:.1f}x your target payment - good ratio.",
        )
    else:
        recommendations.append("Consider a lower monthly payment for better approval odds")
        return Factor(
            percentage=50,
            status="concern",
            ratio=ratio,
            message=f"Your income is {ratio:.1f}x your target payment - meets minimum but tight.",
        )


def evaluate_down_payment(
    total_down_payment: float,
    estimated_price: float,
    recommendations: List[str],
) -> Factor:
    """Cash plus trade-in as a share of the price"""
    percent_down = total_down_payment / estimated_price * 100
    summary = f"{percent_down:.1f}% ({_money(total_down_payment)})"

    if percent_down >= 20:
        return Factor(
            percentage=100,
            status="excellent",
            percent_down=percent_down,
            message=f"Excellent down payment of {summary}! This significantly increases approval chances.",
        )
    elif percent_down >= 15:
        return Factor(
            percentage=83,
            status="good",
            percent_down=percent_down,
            message=f"Good down payment of {summary}.",
        )
    elif percent_down >= MIN_DOWN_PAYMENT_PERCENT:
        recommendations.append("Consider increasing down payment to 15-20% for better terms")
        return Factor(
            percentage=67,
            status="minimal",
            percent_down=percent_down,
            message=f"Down payment of {summary} meets minimum requirements.",
        )
    else:
        target = math.ceil(estimated_price * MIN_DOWN_PAYMENT_PERCENT / 100)
        recommendations.append(
            f"Increase down payment to at least {_money(target)} (10% of vehicle price)"
        )
        return Factor(
            percentage=33,
            status="low",
            percent_down=percent_down,
            message=f"Down payment of {summary} is below the recommended 10% minimum.",
        )


def evaluate_trade_in(has_trade_in: bool, trade_in_value: float) -> Factor:
    """Trade-in factor; never adds a recommendation"""
    if has_trade_in and trade_in_value >= TRADE_IN_USEFUL_VALUE:
        return Factor(
            percentage=100,
            status="helpful",
            message=f"Trade-in value of {_money(trade_in_value)} helps reduce the amount financed.",
        )
    elif has_trade_in:
        return Factor(
            percentage=50,
            status="helpful",
            message=f"Trade-in value of {_money(trade_in_value)} provides minimal help.",
        )
    else:
        return Factor(
            percentage=0,
            status="none",
            message="No trade-in vehicle. Consider trading in a current vehicle to reduce financed amount.",
        )


def likelihood_status(approval_percentage: int) -> str:
    """Map the overall percentage to a status label"""
    if approval_percentage >= 85:
        return "Very Likely"
    elif approval_percentage >= 70:
        return "Likely"
    elif approval_percentage >= 50:
        return "Possible"
    else:
        return "Unlikely"


def predict_approval(profile: FinancialProfile, vehicle: Optional[Vehicle] = None) -> PreApprovalResult:
    """
    Estimate loan approval likelihood before formal underwriting.

    Weights: credit 40%, income ratio 30%, down payment 20%, trade-in 10%.
    Without a vehicle the price is estimated as 60 months of the target
    payment. Recommendations follow factor order (credit, income, down
    payment).
    """
    estimated_price = vehicle.base_price if vehicle is not None else profile.preferred_monthly_payment * ESTIMATE_TERM_MONTHS
    recommendations: List[str] = []

    credit = evaluate_credit(profile.credit_score, recommendations)
    income = evaluate_income_ratio(profile.monthly_income, profile.preferred_monthly_payment, recommendations)
    down = evaluate_down_payment(
        profile.max_down_payment + profile.trade_in_credit,
        estimated_price,
        recommendations,
    )
    trade_in = evaluate_trade_in(profile.has_trade_in, profile.trade_in_value)

    weighted = (
        credit.percentage * WEIGHTS["credit_score"]
        + income.percentage * WEIGHTS["income_ratio"]
        + down.percentage * WEIGHTS["down_payment"]
        + trade_in.percentage * WEIGHTS["trade_in"]
    )
    # Half-up like the rest of the engine; round() would send 72.5 to 72
    approval_percentage = int(math.floor(weighted + 0.5))

    return PreApprovalResult(
        likelihood_status=likelihood_status(approval_percentage),
        approval_percentage=approval_percentage,
        credit_score=credit,
        income_ratio=income,
        down_payment=down,
        trade_in=trade_in,
        recommendations=tuple(recommendations),
        estimated_vehicle_price=estimated_price,
    )
