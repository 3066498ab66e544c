"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from autofinance.api.main import create_app
from autofinance.domain.models import FinancialProfile, FinancingOption, Vehicle


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client against a fresh app"""
    return TestClient(create_app())


@pytest.fixture
def profile() -> FinancialProfile:
    """Comfortable middle-income buyer with a trade-in"""
    return FinancialProfile(
        monthly_income=8000,
        credit_score=760,
        max_down_payment=6000,
        preferred_monthly_payment=500,
        has_trade_in=True,
        trade_in_value=4000,
    )


@pytest.fixture
def finance_option() -> FinancingOption:
    """60-month loan at 5.5%"""
    return FinancingOption(
        kind="finance",
        term_months=60,
        down_payment=5000,
        annual_interest_rate_percent=5.5,
    )


@pytest.fixture
def catalog() -> list[Vehicle]:
    """Small catalog spanning economy to luxury"""
    return [
        Vehicle(id="sedan", name="Corolla", model="LE", year=2024, base_price=22000, category="Sedan"),
        Vehicle(id="suv", name="RAV4", model="LE", year=2024, base_price=30000, category="SUV"),
        Vehicle(id="truck", name="Tundra", model="SR5", year=2024, base_price=45000, category="Truck"),
        Vehicle(id="luxury", name="Sequoia", model="Platinum", year=2024, base_price=75000, category="SUV"),
        Vehicle(id="compact", name="Yaris", model="L", year=2024, base_price=18000, category="Sedan"),
    ]
