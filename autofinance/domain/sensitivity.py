"""Scenario sweeps over credit score and down payment"""

from typing import List, Optional

from autofinance.domain.amortization import monthly_payment, total_interest
from autofinance.domain.credit import interest_rate_by_credit
from autofinance.domain.models import CreditScoreScenario, DownPaymentScenario
from autofinance.utils.money import round_half_away, to_cents, to_whole

CREDIT_SCORE_SCENARIOS = [600, 650, 700, 750, 800]
DOWN_PAYMENT_STEPS = 5
DEFAULT_MAX_DOWN_PAYMENT_SHARE = 0.5


def credit_score_impact(
    base_price: float,
    down_payment: float,
    base_rate: float,
    term_months: int,
) -> List[CreditScoreScenario]:
    """Payment and total interest at representative credit scores"""
    principal = base_price - down_payment
    scenarios = []

    for score in CREDIT_SCORE_SCENARIOS:
        rate = interest_rate_by_credit(base_rate, score)
        payment = monthly_payment(principal, rate, term_months)

        scenarios.append(
            CreditScoreScenario(
                credit_score=score,
                interest_rate=round_half_away(rate, 1),
                monthly_payment=payment,
                total_interest=total_interest(payment, term_months, principal),
            )
        )

    return scenarios


def down_payment_sensitivity(
    base_price: float,
    rate: float,
    term_months: int,
    min_down: float = 0,
    max_down: Optional[float] = None,
) -> List[DownPaymentScenario]:
    """
    Six evenly spaced down payments from min_down to max_down, inclusive.

    max_down defaults to half the price. monthly_reduction is the drop from
    the previous point (0 for the first).
    """
    if max_down is None:
        max_down = base_price * DEFAULT_MAX_DOWN_PAYMENT_SHARE

    step = (max_down - min_down) / DOWN_PAYMENT_STEPS
    scenarios = []
    previous_payment = None

    # Index-based stepping keeps exactly six points despite float drift
    for i in range(DOWN_PAYMENT_STEPS + 1):
        down = max_down if i == DOWN_PAYMENT_STEPS else min_down + step * i
        principal = base_price - down
        payment = monthly_payment(principal, rate, term_months)
        reduction = previous_payment - payment if previous_payment is not None else 0.0

        scenarios.append(
            DownPaymentScenario(
                down_payment=to_whole(down),
                monthly_payment=payment,
                total_interest=total_interest(payment, term_months, principal),
                monthly_reduction=to_cents(reduction),
            )
        )
        previous_payment = payment

    return scenarios
