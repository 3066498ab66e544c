"""Pydantic schemas for API request/response validation"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from autofinance.domain.models import FinancialProfile, FinancingOption, Vehicle


class VehicleSchema(BaseModel):
    """Vehicle as supplied by or returned to a client"""

    id: str = Field(..., min_length=1)
    name: str
    model: str
    year: int
    base_price: float = Field(..., gt=0, description="Price in currency units")
    category: str
    price_source: Optional[str] = None

    def to_domain(self) -> Vehicle:
        return Vehicle(**self.model_dump())


class FinancingOptionSchema(BaseModel):
    """Lease or loan terms; payment fields are ignored on input"""

    kind: Literal["lease", "finance"]
    term_months: int = Field(..., description="Term in months, must be > 0")
    down_payment: float = Field(..., ge=0)
    annual_interest_rate_percent: float = Field(..., ge=0)
    monthly_payment: Optional[float] = None
    total_cost: Optional[float] = None

    def to_domain(self) -> FinancingOption:
        return FinancingOption(
            kind=self.kind,
            term_months=self.term_months,
            down_payment=self.down_payment,
            annual_interest_rate_percent=self.annual_interest_rate_percent,
        )


class FinancialProfileSchema(BaseModel):
    """Buyer's financial profile"""

    monthly_income: float = Field(..., gt=0)
    credit_score: int = Field(..., ge=300, le=850)
    max_down_payment: float = Field(..., ge=0)
    preferred_monthly_payment: float = Field(..., gt=0)
    has_trade_in: bool = False
    trade_in_value: float = Field(0.0, ge=0)
    financing_preference: Literal["lease", "finance"] = "finance"
    loan_term_months: int = 60
    base_interest_rate_percent: float = Field(5.5, ge=0)

    def to_domain(self) -> FinancialProfile:
        return FinancialProfile(**self.model_dump())


# Financing


class FinancingRequest(BaseModel):
    """Request body for POST /v1/financing/calculate"""

    base_price: float = Field(..., gt=0)
    option: FinancingOptionSchema


class DefaultFinancingResponse(BaseModel):
    lease: FinancingOptionSchema
    finance: FinancingOptionSchema


class ComparisonRequest(BaseModel):
    """Request body for POST /v1/financing/compare; omitted options use the defaults"""

    base_price: float = Field(..., gt=0)
    lease: Optional[FinancingOptionSchema] = None
    finance: Optional[FinancingOptionSchema] = None


class ComparisonResponse(BaseModel):
    lease: FinancingOptionSchema
    finance: FinancingOptionSchema
    monthly_savings: float
    total_savings: float


# Affordability


class AffordabilityRequest(BaseModel):
    """Request body for POST /v1/affordability"""

    monthly_payment: float
    profile: FinancialProfileSchema


class AffordabilityImpactSchema(BaseModel):
    percentage: float
    status: str
    message: str


class AffordabilityResponse(BaseModel):
    can_afford: bool
    budget_impact_percent: float
    risk_level: str
    recommendation_text: str
    label: str
    impact: AffordabilityImpactSchema


class TipsResponse(BaseModel):
    tips: List[str]


# Recommendations


class RecommendationRequest(BaseModel):
    """Request body for POST /v1/recommendations; catalog defaults to the built-in lineup"""

    profile: FinancialProfileSchema
    option: FinancingOptionSchema
    catalog: Optional[List[VehicleSchema]] = None


class RecommendationResponse(BaseModel):
    affordable_vehicle_ids: List[str]
    top_vehicle_ids: List[str]


# Projections


class EquityRequest(BaseModel):
    """Request body for POST /v1/projections/equity"""

    base_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    monthly_payment: float
    annual_interest_rate_percent: float = Field(..., ge=0)
    term_months: int


class EquityPointSchema(BaseModel):
    month: int
    equity: float
    remaining_principal: float


class DepreciationPointSchema(BaseModel):
    year: int
    value: float
    depreciation_percent: float


# Sensitivity


class CreditImpactRequest(BaseModel):
    """Request body for POST /v1/sensitivity/credit-score"""

    base_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    base_rate: float = Field(..., ge=0)
    term_months: int


class CreditScenarioSchema(BaseModel):
    credit_score: int
    interest_rate: float
    monthly_payment: float
    total_interest: float


class DownPaymentRequest(BaseModel):
    """Request body for POST /v1/sensitivity/down-payment"""

    base_price: float = Field(..., gt=0)
    rate: float = Field(..., ge=0)
    term_months: int
    min_down: float = Field(0, ge=0)
    max_down: Optional[float] = Field(None, ge=0)


class DownPaymentScenarioSchema(BaseModel):
    down_payment: float
    monthly_payment: float
    total_interest: float
    monthly_reduction: float


# Pre-approval


class PreApprovalRequest(BaseModel):
    """Request body for POST /v1/preapproval; give a vehicle_id, an inline vehicle, or neither"""

    profile: FinancialProfileSchema
    vehicle_id: Optional[str] = None
    vehicle: Optional[VehicleSchema] = None


class FactorSchema(BaseModel):
    percentage: int
    status: str
    message: str
    ratio: Optional[float] = None
    percent_down: Optional[float] = None


class PreApprovalResponse(BaseModel):
    likelihood_status: str
    approval_percentage: int
    credit_score: FactorSchema
    income_ratio: FactorSchema
    down_payment: FactorSchema
    trade_in: FactorSchema
    recommendations: List[str]
    estimated_vehicle_price: float
