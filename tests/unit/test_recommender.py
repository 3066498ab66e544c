"""Unit tests for vehicle recommendation"""

from autofinance.domain.models import FinancialProfile, FinancingOption, Vehicle
from autofinance.domain.recommender import (
    affordable_vehicle_ids,
    cheapest_vehicle_ids,
    score_vehicles,
    top3_recommended_vehicle_ids,
)


def test_affordable_vehicle_ids_filters_by_budget(catalog: list[Vehicle], finance_option: FinancingOption):
    """Test only vehicles within 20% of income qualify"""
    buyer = FinancialProfile(monthly_income=4000, credit_score=760, max_down_payment=6000, preferred_monthly_payment=400)

    affordable = affordable_vehicle_ids(catalog, buyer, finance_option)

    # luxury: 69000 financed is ~$1318/month, 33% of income
    assert affordable == {"compact", "sedan", "suv", "truck"}


def test_affordable_vehicle_ids_fallback_to_cheapest(catalog: list[Vehicle], finance_option: FinancingOption):
    """Test nothing affordable returns the three cheapest"""
    broke = FinancialProfile(monthly_income=1, credit_score=700, max_down_payment=0, preferred_monthly_payment=1)

    affordable = affordable_vehicle_ids(catalog, broke, finance_option)

    assert affordable == {"compact", "sedan", "suv"}
    assert cheapest_vehicle_ids(catalog) == ["compact", "sedan", "suv"]


def test_cheapest_vehicle_ids_ties_keep_catalog_order():
    vehicles = [
        Vehicle(id="b", name="B", model="X", year=2024, base_price=20000, category="Sedan"),
        Vehicle(id="a", name="A", model="X", year=2024, base_price=20000, category="Sedan"),
        Vehicle(id="c", name="C", model="X", year=2024, base_price=15000, category="Sedan"),
    ]

    assert cheapest_vehicle_ids(vehicles) == ["c", "b", "a"]


def test_empty_catalog(profile: FinancialProfile, finance_option: FinancingOption):
    """Test empty catalog is not an error"""
    assert affordable_vehicle_ids([], profile, finance_option) == set()
    assert top3_recommended_vehicle_ids([], profile, finance_option) == []


def test_top3_ranking(catalog: list[Vehicle], profile: FinancialProfile, finance_option: FinancingOption):
    """
    Test ranking favors low budget impact near the preferred payment.

    With $10,000 down (capped at 30%) at 5.5%/60mo:
    suv ~$401 (closest to $500 target), sedan ~$294, compact ~$241,
    truck ~$669, luxury ~$1242 (medium risk).
    """
    top = top3_recommended_vehicle_ids(catalog, profile, finance_option)

    assert top == ["suv", "sedan", "compact"]


def test_top3_is_deterministic(catalog: list[Vehicle], profile: FinancialProfile, finance_option: FinancingOption):
    first = top3_recommended_vehicle_ids(catalog, profile, finance_option)
    second = top3_recommended_vehicle_ids(catalog, profile, finance_option)

    assert first == second


def test_top3_respects_limit(catalog: list[Vehicle], profile: FinancialProfile, finance_option: FinancingOption):
    assert len(top3_recommended_vehicle_ids(catalog, profile, finance_option, limit=5)) == 5
    assert top3_recommended_vehicle_ids(catalog, profile, finance_option, limit=1) == ["suv"]


def test_top3_scores_first_vehicle_when_nothing_affordable(catalog: list[Vehicle], finance_option: FinancingOption):
    """Test the first vehicle is always scored so the ranking is never empty"""
    struggling = FinancialProfile(monthly_income=1000, credit_score=600, max_down_payment=0, preferred_monthly_payment=300)

    assert top3_recommended_vehicle_ids(catalog, struggling, finance_option) == ["sedan"]


def test_top3_ties_keep_catalog_order(profile: FinancialProfile, finance_option: FinancingOption):
    twins = [
        Vehicle(id="first", name="A", model="X", year=2024, base_price=25000, category="Sedan"),
        Vehicle(id="second", name="B", model="X", year=2024, base_price=25000, category="Sedan"),
    ]

    assert top3_recommended_vehicle_ids(twins, profile, finance_option) == ["first", "second"]


def test_score_breakdown(catalog: list[Vehicle], profile: FinancialProfile, finance_option: FinancingOption):
    """Test scores stay within 0-100 and unaffordable vehicles are skipped"""
    scores = score_vehicles(catalog, profile, finance_option)

    assert [s.vehicle_id for s in scores] == ["sedan", "suv", "truck", "luxury", "compact"]
    assert all(0 <= s.score <= 100 for s in scores)
    luxury = next(s for s in scores if s.vehicle_id == "luxury")
    assert luxury.budget_impact_percent > 15  # medium risk, still affordable
