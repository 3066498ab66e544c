"""Fixed-rate amortization: monthly payment and total cost of a loan or lease"""

from dataclasses import replace
from typing import Dict

from autofinance.config import settings
from autofinance.domain.exceptions import InvalidTermError, NonFiniteResultError
from autofinance.domain.models import FinancingOption, LeaseFinanceComparison
from autofinance.utils.money import ensure_finite, to_cents


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an APR in percent to a monthly decimal rate"""
    return annual_rate_percent / 12 / 100


def monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Level monthly payment for a fixed-rate loan.

    M = P * r(1+r)^n / ((1+r)^n - 1), with r the monthly rate.

    A zero rate degenerates to straight-line principal / term. Principal may
    be negative when the down payment exceeds the price; clamping is the
    caller's job.

    Raises:
        InvalidTermError: term_months <= 0
        NonFiniteResultError: the formula overflowed
    """
    if term_months <= 0:
        raise InvalidTermError(f"Term must be a positive number of months, got {term_months}")

    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return to_cents(principal / term_months)

    try:
        growth = (1 + rate) ** term_months
    except OverflowError as e:
        raise NonFiniteResultError(f"Payment overflow at {annual_rate_percent}% over {term_months} months") from e

    payment = principal * (rate * growth) / (growth - 1)
    return to_cents(ensure_finite(payment, "monthly payment"))


def total_cost(monthly_payment: float, term_months: int, down_payment: float) -> float:
    """All payments plus the down payment, to the cent"""
    if term_months < 0:
        raise InvalidTermError(f"Term must not be negative, got {term_months}")
    return to_cents(monthly_payment * term_months + down_payment)


def apply_financing(base_price: float, option: FinancingOption) -> FinancingOption:
    """
    Fill monthly_payment and total_cost for a vehicle price.

    Returns a new option; the input is left untouched. The principal is not
    clamped, so a down payment above the price yields a negative payment.
    """
    principal = base_price - option.down_payment
    payment = monthly_payment(principal, option.annual_interest_rate_percent, option.term_months)
    cost = total_cost(payment, option.term_months, option.down_payment)
    return replace(option, monthly_payment=payment, total_cost=cost)


def total_interest(monthly_payment: float, term_months: int, principal: float) -> float:
    """Interest paid over the life of the loan"""
    return to_cents(monthly_payment * term_months - principal)


def default_financing_options() -> Dict[str, FinancingOption]:
    """Preset lease and finance terms offered before the user customizes anything"""
    return {
        "lease": FinancingOption(
            kind="lease",
            term_months=settings.lease_term_months,
            down_payment=settings.lease_down_payment,
            annual_interest_rate_percent=settings.lease_interest_rate,
        ),
        "finance": FinancingOption(
            kind="finance",
            term_months=settings.finance_term_months,
            down_payment=settings.finance_down_payment,
            annual_interest_rate_percent=settings.finance_interest_rate,
        ),
    }


def compare_lease_vs_finance(
    base_price: float,
    lease: FinancingOption,
    finance: FinancingOption,
) -> LeaseFinanceComparison:
    """
    Price both options and report how much financing costs over leasing.

    Positive savings mean the lease is cheaper.
    """
    leased = apply_financing(base_price, lease)
    financed = apply_financing(base_price, finance)

    return LeaseFinanceComparison(
        lease=leased,
        finance=financed,
        monthly_savings=to_cents(financed.monthly_payment - leased.monthly_payment),
        total_savings=to_cents(financed.total_cost - leased.total_cost),
    )
