"""Pure financial projection and amortization functions."""

from .composite import (
    calculate_financial_health_score,
    calculate_house_affordability,
    calculate_loan_payment,
    calculate_portfolio_allocation,
    calculate_retirement_needs,
)
from .debt import calculate_debt_payoff, calculate_debt_payoff_multiple
from .goals import (
    calculate_apy,
    calculate_compound_interest,
    calculate_future_value,
    calculate_interest_earned,
    calculate_monthly_payment,
    calculate_time_to_goal,
    generate_savings_projection,
)
from .tax import calculate_tax_estimate

__all__ = [
    "calculate_future_value",
    "calculate_monthly_payment",
    "calculate_time_to_goal",
    "calculate_compound_interest",
    "calculate_interest_earned",
    "calculate_apy",
    "generate_savings_projection",
    "calculate_debt_payoff",
    "calculate_debt_payoff_multiple",
    "calculate_loan_payment",
    "calculate_house_affordability",
    "calculate_retirement_needs",
    "calculate_financial_health_score",
    "calculate_tax_estimate",
    "calculate_portfolio_allocation",
]
