"""Vehicle recommendation - filter and rank a catalog against a buyer's finances"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Set

from autofinance.domain.affordability import analyze_affordability
from autofinance.domain.amortization import monthly_payment
from autofinance.domain.credit import adjusted_rate
from autofinance.domain.models import FinancialProfile, FinancingOption, Vehicle

logger = logging.getLogger(__name__)

# Share of the price the buyer is assumed to put down
AFFORDABILITY_DOWN_PAYMENT_CAP = 0.2
RANKING_DOWN_PAYMENT_CAP = 0.3

FALLBACK_COUNT = 3
DEFAULT_LIMIT = 3


@dataclass(frozen=True)
class VehicleScore:
    """Ranking breakdown for one scored vehicle"""

    vehicle_id: str
    score: float
    monthly_payment: float
    budget_impact_percent: float


def cheapest_vehicle_ids(catalog: Sequence[Vehicle], count: int = FALLBACK_COUNT) -> List[str]:
    """Ids of the lowest-priced vehicles; ties keep catalog order"""
    by_price = sorted(catalog, key=lambda v: v.base_price)
    return [v.id for v in by_price[:count]]


def affordable_vehicle_ids(
    catalog: Sequence[Vehicle],
    profile: FinancialProfile,
    option: FinancingOption,
) -> Set[str]:
    """
    Ids of every vehicle whose payment the buyer can afford.

    Down payment is the buyer's maximum, capped at 20% of the price, and the
    rate is marked up for credit. When nothing qualifies, the three cheapest
    vehicles are returned instead.
    """
    rate = adjusted_rate(profile.credit_score, option.annual_interest_rate_percent)
    affordable = set()

    for vehicle in catalog:
        down_payment = min(profile.max_down_payment, vehicle.base_price * AFFORDABILITY_DOWN_PAYMENT_CAP)
        payment = monthly_payment(vehicle.base_price - down_payment, rate, option.term_months)
        if analyze_affordability(payment, profile).can_afford:
            affordable.add(vehicle.id)

    if not affordable:
        fallback = cheapest_vehicle_ids(catalog)
        logger.debug("No affordable vehicles, falling back to cheapest", extra={"vehicle_ids": fallback})
        return set(fallback)

    return affordable


def score_vehicles(
    catalog: Sequence[Vehicle],
    profile: FinancialProfile,
    option: FinancingOption,
) -> List[VehicleScore]:
    """
    Score affordable vehicles out of 100, in catalog order.

    Scoring:
    - up to 50: low budget impact (reaches 0 at 20% of income)
    - up to 30: payment close to the buyer's preferred payment
    - 20 for low risk, 10 otherwise

    The first vehicle is always scored even if unaffordable, so a non-empty
    catalog never yields an empty ranking.
    """
    rate = adjusted_rate(profile.credit_score, option.annual_interest_rate_percent)
    total_down = profile.max_down_payment + profile.trade_in_credit
    preferred = max(1.0, profile.preferred_monthly_payment)
    scores: List[VehicleScore] = []

    for vehicle in catalog:
        down_payment = min(total_down, vehicle.base_price * RANKING_DOWN_PAYMENT_CAP)
        payment = monthly_payment(vehicle.base_price - down_payment, rate, option.term_months)
        analysis = analyze_affordability(payment, profile)

        if not (analysis.can_afford or not scores):
            continue

        budget_impact_score = max(0.0, 50 - analysis.budget_impact_percent * 2.5)
        payment_score = max(0.0, 30 - abs(payment - preferred) / preferred * 30)
        risk_score = 20 if analysis.risk_level == "low" else 10

        scores.append(
            VehicleScore(
                vehicle_id=vehicle.id,
                score=budget_impact_score + payment_score + risk_score,
                monthly_payment=payment,
                budget_impact_percent=analysis.budget_impact_percent,
            )
        )

    return scores


def top3_recommended_vehicle_ids(
    catalog: Sequence[Vehicle],
    profile: FinancialProfile,
    option: FinancingOption,
    limit: int = DEFAULT_LIMIT,
) -> List[str]:
    """
    Best-scoring vehicle ids, highest first.

    sorted() is stable, so equal scores keep catalog order and identical
    inputs always produce the identical ranking.
    """
    ranked = sorted(score_vehicles(catalog, profile, option), key=lambda s: s.score, reverse=True)
    top = [s.vehicle_id for s in ranked[:limit]]
    if top:
        return top

    return cheapest_vehicle_ids(catalog)
