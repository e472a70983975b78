"""Calculator tools for AI agents."""

from .calculators import (
    calculate_compound_interest,
    calculate_debt_payoff,
    calculate_debt_payoff_multiple,
    calculate_financial_health_score,
    calculate_future_value,
    calculate_house_affordability,
    calculate_loan_payment,
    calculate_monthly_payment,
    calculate_portfolio_allocation,
    calculate_retirement_needs,
    calculate_tax_estimate,
    calculate_time_to_goal,
    project_savings,
)
from .executor import CALCULATOR_TOOLS, execute_calculator_tool, tool_schemas

__all__ = [
    "CALCULATOR_TOOLS",
    "execute_calculator_tool",
    "tool_schemas",
    "calculate_future_value",
    "calculate_monthly_payment",
    "calculate_time_to_goal",
    "calculate_compound_interest",
    "project_savings",
    "calculate_debt_payoff",
    "calculate_debt_payoff_multiple",
    "calculate_loan_payment",
    "calculate_house_affordability",
    "calculate_retirement_needs",
    "calculate_financial_health_score",
    "calculate_tax_estimate",
    "calculate_portfolio_allocation",
]
