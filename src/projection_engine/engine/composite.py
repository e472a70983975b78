"""Composite metrics built from the annuity and goal functions.

The ratios and weights below are rules of thumb, not derived values.
"""

from ..exceptions import InvalidInputError
from ..models import (
    FinancialHealthInputs,
    FinancialHealthScore,
    HouseAffordability,
    LoanPaymentResult,
    PortfolioAllocation,
    RateAssumptions,
    RetirementNeeds,
    RiskTolerance,
)
from .annuity import MONTHS_PER_YEAR, future_value, loan_payment, present_value
from .goals import calculate_monthly_payment

# 28/36 rule: housing <= 28% of gross monthly income, all debt <= 36%
HOUSING_RATIO = 0.28
TOTAL_DEBT_RATIO = 0.36

# Financial health
HEALTH_WEIGHTS = {
    "savings": 0.25,
    "debt": 0.25,
    "spending": 0.20,
    "investment": 0.15,
    "credit": 0.15,
}
EMERGENCY_FUND_TARGET_MONTHS = 6
SAVINGS_RATE_TARGET = 0.20
INVESTMENT_RATIO_TARGET = 1.0  # a year of income invested
CREDIT_SCORE_MIN = 300
CREDIT_SCORE_MAX = 850

# Portfolio allocation
STOCK_BASE = 110  # "110 minus your age" in stocks
RISK_STOCK_SHIFT: dict[str, int] = {"conservative": -15, "moderate": 0, "aggressive": 15}
RISK_CASH: dict[str, int] = {"conservative": 10, "moderate": 5, "aggressive": 0}
MIN_STOCKS = 10
MAX_STOCKS = 95


def calculate_loan_payment(loan_amount: float, annual_rate: float, years: float) -> LoanPaymentResult:
    """Monthly payment on a fixed-term loan plus what the loan costs overall."""
    payment = loan_payment(loan_amount, annual_rate, years)
    total_paid = payment * years * MONTHS_PER_YEAR
    return LoanPaymentResult(
        monthly_payment=payment,
        total_paid=total_paid,
        total_interest=max(0.0, total_paid - loan_amount),
    )


def calculate_house_affordability(
    annual_income: float,
    monthly_debts: float,
    down_payment_percent: float,
    annual_rate: float | None = None,
    years: float = 30,
    rates: RateAssumptions | None = None,
) -> HouseAffordability:
    """Most expensive house the 28/36 rule allows.

    Args:
        annual_income: Gross annual income
        monthly_debts: Existing monthly debt payments
        down_payment_percent: Down payment as decimal (0.20 for 20%)
        annual_rate: Mortgage rate; defaults to ``rates.mortgage``
        years: Mortgage term
        rates: Default rate table
    """
    if annual_income < 0 or monthly_debts < 0:
        raise InvalidInputError("income and monthly debts must not be negative")
    if not 0 <= down_payment_percent < 1:
        raise InvalidInputError(
            f"down_payment_percent must be in [0, 1), got {down_payment_percent}"
        )
    if annual_rate is None:
        annual_rate = (rates or RateAssumptions()).mortgage

    monthly_income = annual_income / MONTHS_PER_YEAR
    max_monthly_payment = max(
        0.0,
        min(monthly_income * HOUSING_RATIO, monthly_income * TOTAL_DEBT_RATIO - monthly_debts),
    )
    max_loan_amount = present_value(max_monthly_payment, annual_rate, years)
    max_house_price = max_loan_amount / (1 - down_payment_percent)

    return HouseAffordability(
        max_house_price=max_house_price,
        max_monthly_payment=max_monthly_payment,
        max_loan_amount=max_loan_amount,
        down_payment_needed=max_house_price * down_payment_percent,
    )


def calculate_retirement_needs(
    current_age: int,
    retirement_age: int,
    current_savings: float,
    annual_income: float,
    income_replacement_ratio: float = 0.8,
    years_in_retirement: float = 25,
    annual_return: float | None = None,
    rates: RateAssumptions | None = None,
) -> RetirementNeeds:
    """Nest egg needed to replace income in retirement, and the monthly saving to get there.

    The target is the present value, at retirement, of the replacement income
    paid monthly for ``years_in_retirement``.
    """
    years_to_retirement = retirement_age - current_age
    if years_to_retirement < 0:
        raise InvalidInputError(
            f"retirement_age ({retirement_age}) must not be before current_age ({current_age})"
        )
    if annual_return is None:
        annual_return = (rates or RateAssumptions()).investment

    monthly_income_needed = annual_income * income_replacement_ratio / MONTHS_PER_YEAR
    target_amount = present_value(monthly_income_needed, annual_return, years_in_retirement)
    projected_value = future_value(current_savings, 0, annual_return, years_to_retirement)
    shortfall = max(0.0, target_amount - projected_value)

    if shortfall == 0:
        monthly_needed = 0.0
    elif years_to_retirement == 0:
        monthly_needed = None
    else:
        monthly_needed = calculate_monthly_payment(
            target_amount, current_savings, annual_return, years_to_retirement
        )

    return RetirementNeeds(
        target_amount=target_amount,
        projected_value=projected_value,
        shortfall=shortfall,
        monthly_contribution_needed=monthly_needed,
    )


def _clamp_score(value: float) -> int:
    return round(min(100.0, max(0.0, value)))


def calculate_financial_health_score(inputs: FinancialHealthInputs) -> FinancialHealthScore:
    """Blend five 0-100 sub-scores into an overall financial health score."""
    emergency = min(1.0, inputs.emergency_fund_months / EMERGENCY_FUND_TARGET_MONTHS)
    savings_rate = min(1.0, max(0.0, inputs.savings_rate) / SAVINGS_RATE_TARGET)
    sub_scores = {
        "savings": 100 * (0.6 * emergency + 0.4 * savings_rate),
        "debt": 100 * (1 - inputs.debt_to_income_ratio),
        "spending": 100 * inputs.budget_adherence,
        "investment": 100 * inputs.investment_ratio / INVESTMENT_RATIO_TARGET,
        "credit": 100
        * (inputs.credit_score - CREDIT_SCORE_MIN)
        / (CREDIT_SCORE_MAX - CREDIT_SCORE_MIN),
    }
    clamped = {name: _clamp_score(value) for name, value in sub_scores.items()}
    overall = sum(clamped[name] * weight for name, weight in HEALTH_WEIGHTS.items())

    return FinancialHealthScore(
        overall_score=_clamp_score(overall),
        savings_score=clamped["savings"],
        debt_score=clamped["debt"],
        spending_score=clamped["spending"],
        investment_score=clamped["investment"],
        credit_score=clamped["credit"],
    )


def calculate_portfolio_allocation(
    age: int, risk_tolerance: RiskTolerance = "moderate"
) -> PortfolioAllocation:
    """Age-based stock/bond/cash split, shifted by risk tolerance."""
    if age < 0:
        raise InvalidInputError(f"age must not be negative, got {age}")
    if risk_tolerance not in RISK_STOCK_SHIFT:
        raise InvalidInputError(
            f"Unknown risk tolerance: {risk_tolerance}. Use one of {sorted(RISK_STOCK_SHIFT)}"
        )

    cash = RISK_CASH[risk_tolerance]
    stocks = STOCK_BASE - age + RISK_STOCK_SHIFT[risk_tolerance]
    stocks = min(MAX_STOCKS, max(MIN_STOCKS, stocks), 100 - cash)

    return PortfolioAllocation(
        stocks=stocks,
        bonds=100 - stocks - cash,
        cash=cash,
        risk_tolerance=risk_tolerance,
    )
