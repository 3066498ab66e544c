"""Unit tests for credit score and down payment sweeps"""

import pytest
from autofinance.domain.exceptions import InvalidTermError
from autofinance.domain.sensitivity import credit_score_impact, down_payment_sensitivity


def test_credit_score_impact_scenarios():
    """Test five scores use the chart rate schedule"""
    scenarios = credit_score_impact(30000, 5000, 5.5, 60)

    assert [s.credit_score for s in scenarios] == [600, 650, 700, 750, 800]
    assert [s.interest_rate for s in scenarios] == [7.0, 5.5, 5.0, 4.5, 4.5]


def test_credit_score_impact_payments_fall_with_better_credit():
    scenarios = credit_score_impact(30000, 5000, 5.5, 60)
    payments = [s.monthly_payment for s in scenarios]

    assert payments[0] > payments[1] > payments[2] > payments[3]
    assert payments[3] == payments[4]  # 750 and 800 share a band


def test_credit_score_impact_total_interest():
    """Test total interest is payments less principal"""
    for scenario in credit_score_impact(30000, 5000, 5.5, 60):
        assert scenario.total_interest == pytest.approx(scenario.monthly_payment * 60 - 25000, abs=0.01)
        assert scenario.total_interest > 0


def test_credit_score_impact_invalid_term():
    with pytest.raises(InvalidTermError):
        credit_score_impact(30000, 5000, 5.5, 0)


def test_down_payment_sensitivity_defaults():
    """Test six points from zero to half the price"""
    scenarios = down_payment_sensitivity(30000, 0, 60)

    assert [s.down_payment for s in scenarios] == [0, 3000, 6000, 9000, 12000, 15000]
    assert [s.monthly_payment for s in scenarios] == [500, 450, 400, 350, 300, 250]
    assert [s.monthly_reduction for s in scenarios] == [0, 50, 50, 50, 50, 50]
    assert all(s.total_interest == 0 for s in scenarios)


def test_down_payment_sensitivity_custom_range():
    scenarios = down_payment_sensitivity(30000, 4.0, 48, min_down=1000, max_down=6000)

    assert len(scenarios) == 6
    assert [s.down_payment for s in scenarios] == [1000, 2000, 3000, 4000, 5000, 6000]
    assert scenarios[0].monthly_reduction == 0
    assert all(s.monthly_reduction > 0 for s in scenarios[1:])


def test_down_payment_sensitivity_uneven_step_keeps_six_points():
    """Test fractional steps still end exactly at max_down"""
    scenarios = down_payment_sensitivity(25000, 6.0, 60, min_down=0, max_down=10001)

    assert len(scenarios) == 6
    assert scenarios[-1].down_payment == 10001
