"""Savings-goal projections built on the annuity relations."""

import math

from ..exceptions import InvalidInputError
from ..models import SavingsProjectionPoint
from .annuity import (
    MONTHS_PER_YEAR,
    future_value,
    growth_factor,
    monthly_rate,
    periods_to_target,
    savings_payment,
)

# Slack when rounding fractional months up, so floating residue on an exact
# whole month does not push the goal into the next month.
MONTH_EPSILON = 1e-9


def calculate_future_value(
    present_value: float, monthly_contribution: float, annual_rate: float, years: float
) -> float:
    """Future value of savings with compound interest and monthly contributions.

    Args:
        present_value: Current amount saved
        monthly_contribution: Amount added at the end of each month
        annual_rate: Annual interest rate (e.g. 0.07 for 7%)
        years: Number of years
    """
    return future_value(present_value, monthly_contribution, annual_rate, years)


def calculate_monthly_payment(
    target_amount: float, current_amount: float, annual_rate: float, years: float
) -> float:
    """Monthly contribution needed to grow ``current_amount`` into ``target_amount``."""
    return savings_payment(target_amount, current_amount, annual_rate, years)


def calculate_time_to_goal(
    target_amount: float, current_amount: float, monthly_contribution: float, annual_rate: float
) -> int | None:
    """Whole months until the balance first meets ``target_amount``.

    Returns None when the goal cannot be reached with this contribution.
    """
    if current_amount >= target_amount:
        return 0
    if monthly_contribution <= 0:
        return None

    months = periods_to_target(target_amount, current_amount, monthly_contribution, annual_rate)
    if months is None or months <= 0:
        return None
    return math.ceil(months - MONTH_EPSILON)


def calculate_compound_interest(
    principal: float, annual_rate: float, years: float, compounding_frequency: int = 12
) -> float:
    """Principal grown with discrete compounding ``compounding_frequency`` times a year."""
    if compounding_frequency <= 0:
        raise InvalidInputError(
            f"compounding_frequency must be positive, got {compounding_frequency}"
        )
    if years < 0:
        raise InvalidInputError(f"years must not be negative, got {years}")
    growth = growth_factor(annual_rate / compounding_frequency, compounding_frequency * years)
    return principal * growth


def calculate_interest_earned(principal: float, final_amount: float) -> float:
    return max(0.0, final_amount - principal)


def calculate_apy(nominal_rate: float, compounding_frequency: int = 12) -> float:
    """Effective annual yield of a nominal rate compounded ``compounding_frequency`` times."""
    if compounding_frequency <= 0:
        raise InvalidInputError(
            f"compounding_frequency must be positive, got {compounding_frequency}"
        )
    return (1 + nominal_rate / compounding_frequency) ** compounding_frequency - 1


def generate_savings_projection(
    current_amount: float, monthly_contribution: float, annual_rate: float, years: float
) -> list[SavingsProjectionPoint]:
    """Month-by-month savings balance, from month 0 through ``years * 12``.

    Each month earns interest on the running balance, then receives the contribution.
    """
    if years < 0:
        raise InvalidInputError(f"years must not be negative, got {years}")

    rate = monthly_rate(annual_rate)
    balance = current_amount
    total_contributed = current_amount
    projection = []

    for month in range(int(years * MONTHS_PER_YEAR) + 1):
        if month > 0:
            balance = balance * (1 + rate) + monthly_contribution
            total_contributed += monthly_contribution

        projection.append(
            SavingsProjectionPoint(
                month=month,
                balance=round(balance, 2),
                total_contributed=round(total_contributed, 2),
                total_interest=round(balance - total_contributed, 2),
            )
        )

    return projection
