"""Time-series projections: equity built by a loan and resale value over time"""

from typing import List

from autofinance.domain.amortization import monthly_rate
from autofinance.domain.exceptions import InvalidTermError, InvalidVehicleError
from autofinance.domain.models import DepreciationPoint, EquityPoint
from autofinance.utils.money import ensure_finite, round_half_away, to_cents, to_whole

# Fraction of value lost in each year of ownership; index 0 is purchase
DEPRECIATION_RATES = [0.0, 0.20, 0.15, 0.10, 0.08, 0.08]
LONG_TERM_DEPRECIATION_RATE = 0.08


def equity_timeline(
    base_price: float,
    down_payment: float,
    monthly_payment: float,
    annual_rate_percent: float,
    term_months: int,
) -> List[EquityPoint]:
    """
    Month-by-month equity for a financed vehicle (leases build none).

    Each payment first covers interest on the remaining principal; the rest
    reduces the principal. Remaining principal never goes below zero in the
    series, and equity is the price less what is still owed.

    Returns term_months + 1 points, month 0 being the down payment alone.
    """
    if term_months <= 0:
        raise InvalidTermError(f"Term must be a positive number of months, got {term_months}")
    ensure_finite(monthly_payment, "monthly payment")

    rate = monthly_rate(annual_rate_percent)
    remaining = base_price - down_payment
    timeline = [
        EquityPoint(month=0, equity=to_cents(down_payment), remaining_principal=to_cents(remaining)),
    ]

    for month in range(1, term_months + 1):
        interest_portion = remaining * rate
        principal_portion = monthly_payment - interest_portion
        remaining -= principal_portion

        # max() would turn NaN into a paid-off loan
        ensure_finite(remaining, f"remaining principal at month {month}")
        owed = max(0.0, remaining)
        timeline.append(
            EquityPoint(
                month=month,
                equity=to_cents(base_price - owed),
                remaining_principal=to_cents(owed),
            )
        )

    return timeline


def depreciation_rate(year: int) -> float:
    """Share of value lost during the given year of ownership"""
    if year < len(DEPRECIATION_RATES):
        return DEPRECIATION_RATES[year]
    return LONG_TERM_DEPRECIATION_RATE


def depreciation_curve(base_price: float, years: int = 5) -> List[DepreciationPoint]:
    """
    Projected resale value at each year-end, year 0 being purchase price.

    Typical curve: 20% the first year, 15% the second, 10% the third, then
    8% a year. Values are whole currency units, percentages one decimal.
    """
    if base_price <= 0:
        raise InvalidVehicleError(f"Base price must be > 0, got {base_price}")

    current_value = base_price
    curve = [DepreciationPoint(year=0, value=to_whole(current_value), depreciation_percent=0.0)]

    for year in range(1, years + 1):
        current_value = current_value * (1 - depreciation_rate(year))
        lost = (base_price - current_value) / base_price * 100

        curve.append(
            DepreciationPoint(
                year=year,
                value=to_whole(current_value),
                depreciation_percent=round_half_away(lost, 1),
            )
        )

    return curve
