"""Value types shared by the engine, the tool layer and the API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RiskTolerance = Literal["conservative", "moderate", "aggressive"]
PayoffStrategy = Literal["given", "avalanche", "snowball"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RateAssumptions(_Frozen):
    """Default annual rates (decimal fractions) used when a caller supplies none."""

    high_yield_savings: float = 0.045
    savings_account: float = 0.02
    investment: float = 0.07  # historical stock market average
    mortgage: float = 0.07
    student_loan: float = 0.055
    credit_card: float = 0.20
    personal_loan: float = 0.10


class Debt(_Frozen):
    """A single amortizing debt. Accepts camelCase keys (``interestRate``) as well."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    balance: float = Field(ge=0, description="Amount currently owed")
    interest_rate: float = Field(description="Annual interest rate as decimal (e.g., 0.20 for 20%)")
    minimum_payment: float = Field(ge=0, description="Minimum monthly payment")


class PayoffResult(_Frozen):
    """Closed-form payoff of one debt with a fixed monthly payment."""

    months_to_payoff: int
    total_interest: float
    total_paid: float


class MultiDebtPayoffResult(_Frozen):
    """Outcome of the month-by-month multi-debt simulation.

    ``total_paid`` is the nominal ``total_monthly_payment * months``; ``amount_paid``
    is the cash actually applied to balances. When ``truncated`` is set the
    simulation hit its month cap and ``remaining_balance`` is still owed.
    """

    months: int
    total_interest: float
    total_paid: float
    amount_paid: float = 0.0
    remaining_balance: float = 0.0
    truncated: bool = False


class SavingsProjectionPoint(_Frozen):
    """One month of a savings projection."""

    month: int
    balance: float
    total_contributed: float
    total_interest: float


class LoanPaymentResult(_Frozen):
    monthly_payment: float
    total_paid: float
    total_interest: float


class HouseAffordability(_Frozen):
    max_house_price: float
    max_monthly_payment: float
    max_loan_amount: float
    down_payment_needed: float


class RetirementNeeds(_Frozen):
    """Savings target at retirement and what it takes to get there.

    ``monthly_contribution_needed`` is None when there is a shortfall but no
    months left to save.
    """

    target_amount: float
    projected_value: float
    shortfall: float
    monthly_contribution_needed: float | None


class FinancialHealthInputs(_Frozen):
    """Raw ratios a caller derives from a user's accounts."""

    emergency_fund_months: float = Field(default=0, ge=0)
    savings_rate: float = Field(default=0, description="Savings / annual income")
    debt_to_income_ratio: float = Field(default=0, ge=0, description="Total debt / annual income")
    credit_score: float = Field(default=650, ge=300, le=850)
    investment_ratio: float = Field(default=0, ge=0, description="Investments / annual income")
    budget_adherence: float = Field(
        default=0.5, ge=0, le=1, description="Share of months spent within budget"
    )


class FinancialHealthScore(_Frozen):
    overall_score: int
    savings_score: int
    debt_score: int
    spending_score: int
    investment_score: int
    credit_score: int


class TaxEstimate(_Frozen):
    """Illustrative income tax estimate. Not tax advice."""

    taxable_income: float
    estimated_tax: float
    effective_rate: float
    marginal_rate: float
    after_tax_income: float


class PortfolioAllocation(_Frozen):
    """Percentages of a portfolio by asset class; they sum to 100."""

    stocks: int
    bonds: int
    cash: int
    risk_tolerance: RiskTolerance
