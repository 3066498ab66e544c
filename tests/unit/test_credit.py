"""Unit tests for credit score bands and rate schedules"""

import pytest
from autofinance.domain.credit import adjusted_rate, credit_score_range, interest_rate_by_credit


@pytest.mark.parametrize(
    "score,expected",
    [
        (850, "excellent"),
        (750, "excellent"),
        (749, "good"),
        (700, "good"),
        (699, "fair"),
        (650, "fair"),
        (649, "poor"),
        (300, "poor"),
    ],
)
def test_credit_score_range_boundaries(score, expected):
    assert credit_score_range(score) == expected


def test_adjusted_rate_markups():
    """Test recommendation schedule marks up weaker credit"""
    assert adjusted_rate(780, 5.0) == 5.0
    assert adjusted_rate(720, 5.0) == 6.0
    assert adjusted_rate(660, 5.0) == 7.5
    assert adjusted_rate(550, 5.0) == 9.5


@pytest.mark.parametrize(
    "score,expected",
    [
        (800, 4.0),
        (750, 4.0),
        (749, 4.5),
        (700, 4.5),
        (699, 5.0),
        (650, 5.0),
        (649, 6.5),
        (600, 6.5),
        (599, 8.0),
    ],
)
def test_interest_rate_by_credit_schedule(score, expected):
    """Test chart schedule discounts strong credit below the base rate"""
    assert interest_rate_by_credit(5.0, score) == expected


def test_rate_schedules_are_distinct():
    """Test the two schedules disagree, so callers must pick the right one"""
    assert adjusted_rate(760, 5.0) != interest_rate_by_credit(5.0, 760)
    assert adjusted_rate(620, 5.0) != interest_rate_by_credit(5.0, 620)
