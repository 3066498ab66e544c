"""Credit score bands and the interest-rate schedules keyed on them"""

# Markup over the base rate, used for recommendations and per-vehicle badges
RANGE_MARKUPS = {
    "excellent": 0.0,
    "good": 1.0,
    "fair": 2.5,
    "poor": 4.5,
}

# (minimum score, adjustment) pairs, checked top-down. Used by the
# credit-impact and sensitivity charts only.
SENSITIVITY_SCHEDULE = [
    (750, -1.0),
    (700, -0.5),
    (650, 0.0),
    (600, 1.5),
]
SENSITIVITY_FLOOR_ADJUSTMENT = 3.0


def credit_score_range(score: int) -> str:
    """Bucket a credit score: >=750 excellent, >=700 good, >=650 fair, else poor"""
    if score >= 750:
        return "excellent"
    elif score >= 700:
        return "good"
    elif score >= 650:
        return "fair"
    else:
        return "poor"


def adjusted_rate(score: int, base_rate: float) -> float:
    """Base APR plus the markup for the score's band"""
    return base_rate + RANGE_MARKUPS[credit_score_range(score)]


def interest_rate_by_credit(base_rate: float, score: int) -> float:
    """
    Rate used by the credit-impact charts.

    Not interchangeable with adjusted_rate: this schedule discounts strong
    scores below the base rate and has a separate 600-649 band.
    """
    for minimum, adjustment in SENSITIVITY_SCHEDULE:
        if score >= minimum:
            return base_rate + adjustment
    return base_rate + SENSITIVITY_FLOOR_ADJUSTMENT
