"""Domain models - immutable dataclasses representing financing entities"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from autofinance.domain.exceptions import (
    InvalidFinancingOptionError,
    InvalidProfileError,
    InvalidVehicleError,
)

FINANCING_KINDS = ("lease", "finance")


@dataclass(frozen=True)
class Vehicle:
    """Catalog entry priced in whole currency units"""

    id: str
    name: str
    model: str
    year: int
    base_price: float
    category: str  # "Sedan", "SUV", "Truck", ...
    price_source: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidVehicleError("Vehicle id must not be empty")
        if not isinstance(self.base_price, (int, float)) or isinstance(self.base_price, bool):
            raise InvalidVehicleError(f"Vehicle {self.id}: base_price must be a number")
        if not math.isfinite(self.base_price) or self.base_price <= 0:
            raise InvalidVehicleError(f"Vehicle {self.id}: base_price must be > 0, got {self.base_price}")


@dataclass(frozen=True)
class FinancingOption:
    """
    Lease or loan terms for a single vehicle.

    monthly_payment and total_cost stay None until the option has been run
    through amortization.apply_financing.
    """

    kind: str  # "lease" or "finance"
    term_months: int
    down_payment: float
    annual_interest_rate_percent: float
    monthly_payment: Optional[float] = None
    total_cost: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind not in FINANCING_KINDS:
            raise InvalidFinancingOptionError(f"kind must be one of {FINANCING_KINDS}, got {self.kind!r}")
        if not math.isfinite(self.down_payment) or self.down_payment < 0:
            raise InvalidFinancingOptionError(f"down_payment must be >= 0, got {self.down_payment}")
        if not math.isfinite(self.annual_interest_rate_percent) or self.annual_interest_rate_percent < 0:
            raise InvalidFinancingOptionError(
                f"annual_interest_rate_percent must be >= 0, got {self.annual_interest_rate_percent}"
            )


@dataclass(frozen=True)
class FinancialProfile:
    """Buyer's self-reported financial situation and preferences"""

    monthly_income: float
    credit_score: int
    max_down_payment: float
    preferred_monthly_payment: float
    has_trade_in: bool = False
    trade_in_value: float = 0.0
    financing_preference: str = "finance"
    loan_term_months: int = 60
    base_interest_rate_percent: float = 5.5

    def __post_init__(self) -> None:
        if not math.isfinite(self.monthly_income) or self.monthly_income <= 0:
            raise InvalidProfileError(f"monthly_income must be > 0, got {self.monthly_income}")
        if not math.isfinite(self.preferred_monthly_payment) or self.preferred_monthly_payment <= 0:
            raise InvalidProfileError(
                f"preferred_monthly_payment must be > 0, got {self.preferred_monthly_payment}"
            )
        if not math.isfinite(self.max_down_payment) or self.max_down_payment < 0:
            raise InvalidProfileError(f"max_down_payment must be >= 0, got {self.max_down_payment}")
        if not math.isfinite(self.trade_in_value) or self.trade_in_value < 0:
            raise InvalidProfileError(f"trade_in_value must be >= 0, got {self.trade_in_value}")
        if not math.isfinite(self.base_interest_rate_percent) or self.base_interest_rate_percent < 0:
            raise InvalidProfileError(
                f"base_interest_rate_percent must be >= 0, got {self.base_interest_rate_percent}"
            )
        if self.financing_preference not in FINANCING_KINDS:
            raise InvalidProfileError(
                f"financing_preference must be one of {FINANCING_KINDS}, got {self.financing_preference!r}"
            )

    @property
    def trade_in_credit(self) -> float:
        """Trade-in value counted toward the down payment"""
        return self.trade_in_value if self.has_trade_in else 0.0


@dataclass(frozen=True)
class AffordabilityAssessment:
    """Payment classified against monthly income"""

    can_afford: bool
    budget_impact_percent: float
    risk_level: str  # "low" | "medium" | "high"
    recommendation_text: str


@dataclass(frozen=True)
class AffordabilityImpact:
    """Income gauge reading for a single payment"""

    percentage: float
    status: str  # "excellent" | "good" | "caution" | "overextended"
    message: str


@dataclass(frozen=True)
class LeaseFinanceComparison:
    """Side-by-side lease and finance figures for one vehicle price"""

    lease: FinancingOption
    finance: FinancingOption
    monthly_savings: float
    total_savings: float


@dataclass(frozen=True)
class EquityPoint:
    month: int
    equity: float
    remaining_principal: float


@dataclass(frozen=True)
class DepreciationPoint:
    year: int
    value: float
    depreciation_percent: float


@dataclass(frozen=True)
class CreditScoreScenario:
    credit_score: int
    interest_rate: float
    monthly_payment: float
    total_interest: float


@dataclass(frozen=True)
class DownPaymentScenario:
    down_payment: float
    monthly_payment: float
    total_interest: float
    monthly_reduction: float


@dataclass(frozen=True)
class Factor:
    """One weighted input to the pre-approval score"""

    percentage: int
    status: str
    message: str
    ratio: Optional[float] = None  # income factor only
    percent_down: Optional[float] = None  # down payment factor only


@dataclass(frozen=True)
class PreApprovalResult:
    """Heuristic approval likelihood with per-factor breakdown"""

    likelihood_status: str  # "Very Likely" | "Likely" | "Possible" | "Unlikely"
    approval_percentage: int
    credit_score: Factor
    income_ratio: Factor
    down_payment: Factor
    trade_in: Factor
    recommendations: Tuple[str, ...] = ()
    estimated_vehicle_price: float = 0.0

    @property
    def factors(self) -> Dict[str, Factor]:
        return {
            "credit_score": self.credit_score,
            "income_ratio": self.income_ratio,
            "down_payment": self.down_payment,
            "trade_in": self.trade_in,
        }
