"""Request and response schemas for the calculator API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models import Debt, PayoffStrategy, RiskTolerance
from .formatting import Region

MAX_YEARS = 100
MAX_AGE = 120


class CalculatorRequest(BaseModel):
    """Base request: accepts snake_case or camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    region: Region | None = Field(
        default=None, description="Region used only to format the display string"
    )


class CalculatorResponse(BaseModel):
    """Base response. ``possible`` is false when the goal cannot be reached as asked."""

    possible: bool = True
    suggestion: str | None = None
    display: str | None = None


class FutureValueRequest(CalculatorRequest):
    present_value: float = Field(ge=0)
    monthly_contribution: float = 0
    annual_rate: float
    years: float = Field(ge=0, le=MAX_YEARS)


class FutureValueResponse(CalculatorResponse):
    future_value: float
    total_contributions: float
    total_interest: float


class MonthlyPaymentRequest(CalculatorRequest):
    target_amount: float = Field(ge=0)
    current_amount: float = Field(default=0, ge=0)
    annual_rate: float
    years: float = Field(gt=0, le=MAX_YEARS)


class MonthlyPaymentResponse(CalculatorResponse):
    monthly_payment: float
    total_months: int
    total_contributions: float


class TimeToGoalRequest(CalculatorRequest):
    target_amount: float = Field(ge=0)
    current_amount: float = Field(default=0, ge=0)
    monthly_contribution: float
    annual_rate: float


class TimeToGoalResponse(CalculatorResponse):
    months: int | None = None
    years: int | None = None
    remaining_months: int | None = None


class CompoundInterestRequest(CalculatorRequest):
    principal: float = Field(ge=0)
    annual_rate: float
    years: float = Field(ge=0, le=MAX_YEARS)
    compounding_frequency: int = Field(default=12, gt=0)


class CompoundInterestResponse(CalculatorResponse):
    final_amount: float
    interest_earned: float
    apy: float


class SavingsProjectionRequest(CalculatorRequest):
    current_amount: float = Field(default=0, ge=0)
    monthly_contribution: float = 0
    annual_rate: float
    years: float = Field(ge=0, le=MAX_YEARS)


class SavingsProjectionPointResponse(BaseModel):
    month: int
    balance: float
    total_contributed: float
    total_interest: float


class SavingsProjectionResponse(CalculatorResponse):
    points: list[SavingsProjectionPointResponse]


class DebtPayoffRequest(CalculatorRequest):
    principal: float = Field(ge=0)
    annual_rate: float
    monthly_payment: float


class DebtPayoffResponse(CalculatorResponse):
    months_to_payoff: int | None = None
    total_interest: float | None = None
    total_paid: float | None = None


class MultiDebtPayoffRequest(CalculatorRequest):
    debts: list[Debt]
    total_monthly_payment: float
    strategy: PayoffStrategy = "given"


class MultiDebtPayoffResponse(CalculatorResponse):
    months: int
    total_interest: float
    total_paid: float
    amount_paid: float
    remaining_balance: float
    truncated: bool


class LoanPaymentRequest(CalculatorRequest):
    loan_amount: float = Field(ge=0)
    annual_rate: float | None = Field(default=None, description="Defaults to the mortgage rate")
    years: float = Field(gt=0, le=MAX_YEARS)


class LoanPaymentResponse(CalculatorResponse):
    monthly_payment: float
    total_paid: float
    total_interest: float


class HouseAffordabilityRequest(CalculatorRequest):
    annual_income: float = Field(ge=0)
    monthly_debts: float = Field(default=0, ge=0)
    down_payment_percent: float = Field(default=0.2, ge=0, lt=1)
    annual_rate: float | None = None
    years: float = Field(default=30, gt=0, le=MAX_YEARS)


class HouseAffordabilityResponse(CalculatorResponse):
    max_house_price: float
    max_monthly_payment: float
    max_loan_amount: float
    down_payment_needed: float


class RetirementNeedsRequest(CalculatorRequest):
    current_age: int = Field(ge=0, le=MAX_AGE)
    retirement_age: int = Field(ge=0, le=MAX_AGE)
    current_savings: float = Field(default=0, ge=0)
    annual_income: float = Field(ge=0)
    income_replacement_ratio: float = Field(default=0.8, ge=0)
    years_in_retirement: float = Field(default=25, ge=0, le=MAX_YEARS)
    annual_return: float | None = None


class RetirementNeedsResponse(CalculatorResponse):
    target_amount: float
    projected_value: float
    shortfall: float
    monthly_contribution_needed: float | None


class FinancialHealthRequest(CalculatorRequest):
    emergency_fund_months: float = Field(default=0, ge=0)
    savings_rate: float = 0
    debt_to_income_ratio: float = Field(default=0, ge=0)
    credit_score: float = Field(default=650, ge=300, le=850)
    investment_ratio: float = Field(default=0, ge=0)
    budget_adherence: float = Field(default=0.5, ge=0, le=1)


class FinancialHealthResponse(CalculatorResponse):
    overall_score: int
    savings_score: int
    debt_score: int
    spending_score: int
    investment_score: int
    credit_score: int


class TaxEstimateRequest(CalculatorRequest):
    annual_income: float = Field(ge=0)
    filing_status: str = "single"
    tax_region: Region = Field(default="US", description="Region whose brackets apply")
    deductions: float = Field(default=0, ge=0)
    credits: float = Field(default=0, ge=0)


class TaxEstimateResponse(CalculatorResponse):
    taxable_income: float
    estimated_tax: float
    effective_rate: float
    marginal_rate: float
    after_tax_income: float


class PortfolioAllocationRequest(CalculatorRequest):
    age: int = Field(ge=0, le=MAX_AGE)
    risk_tolerance: RiskTolerance = "moderate"


class PortfolioAllocationResponse(CalculatorResponse):
    stocks: int
    bonds: int
    cash: int
    risk_tolerance: RiskTolerance
