"""Debt payoff computation.

Pure functions: plain numbers and Debt models in, immutable results out. No I/O
apart from a warning log when a simulation hits its month cap.
"""

import logging
import math
from collections.abc import Sequence

from ..exceptions import InvalidInputError
from ..models import Debt, MultiDebtPayoffResult, PayoffResult, PayoffStrategy
from .annuity import balance_after, monthly_rate, periods_to_payoff
from .goals import MONTH_EPSILON

logger = logging.getLogger(__name__)

MAX_PAYOFF_MONTHS = 600  # 50 years
PAID_OFF_TOLERANCE = 0.01  # balances at or below this count as repaid


def calculate_debt_payoff(
    principal: float, annual_rate: float, monthly_payment: float
) -> PayoffResult | None:
    """Months to repay one debt with a fixed monthly payment, and what it costs.

    Returns None when the payment does not cover a month of interest, since the
    balance would then never shrink. The final month pays only what is still owed.
    A debt counts as repaid once at most ``PAID_OFF_TOLERANCE`` is left, the same
    rule ``calculate_debt_payoff_multiple`` closes debts by.
    """
    if principal < 0:
        raise InvalidInputError(f"principal must not be negative, got {principal}")
    if monthly_payment <= 0:
        return None
    if principal <= PAID_OFF_TOLERANCE:
        return PayoffResult(months_to_payoff=0, total_interest=0.0, total_paid=0.0)

    rate = monthly_rate(annual_rate)
    if monthly_payment <= principal * rate:
        return None

    months = periods_to_payoff(principal, annual_rate, monthly_payment, PAID_OFF_TOLERANCE)
    if months is None:
        return None

    whole_months = max(1, math.ceil(months - MONTH_EPSILON))
    owed_before_last = balance_after(principal, annual_rate, monthly_payment, whole_months - 1)
    final_payment = min(monthly_payment, max(0.0, owed_before_last * (1 + rate)))
    total_paid = monthly_payment * (whole_months - 1) + final_payment
    # Sub-cent balance left unpaid when the debt closes.
    left_over = max(0.0, balance_after(principal, annual_rate, monthly_payment, whole_months))

    return PayoffResult(
        months_to_payoff=whole_months,
        total_interest=round(max(0.0, total_paid + left_over - principal), 2),
        total_paid=round(total_paid, 2),
    )


def payoff_order(debts: Sequence[Debt], strategy: PayoffStrategy = "given") -> list[int]:
    """Indices of ``debts`` in the order extra payment should go to them.

    ``given`` keeps the caller's order, ``avalanche`` puts the highest rate first,
    ``snowball`` the smallest balance first. Ties keep input order.
    """
    indices = list(range(len(debts)))
    if strategy == "given":
        return indices
    if strategy == "avalanche":
        return sorted(indices, key=lambda i: -debts[i].interest_rate)
    if strategy == "snowball":
        return sorted(indices, key=lambda i: debts[i].balance)
    raise InvalidInputError(f"Unknown payoff strategy: {strategy}")


def calculate_debt_payoff_multiple(
    debts: Sequence[Debt],
    total_monthly_payment: float,
    strategy: PayoffStrategy = "given",
    max_months: int = MAX_PAYOFF_MONTHS,
) -> MultiDebtPayoffResult:
    """Simulate paying down several debts month by month.

    Every open debt except the current target pays its minimum; whatever is left
    of ``total_monthly_payment`` goes to the target, which is the first open debt
    in the priority order fixed by ``strategy``. Interest on all debts counts
    toward ``total_interest``. Stops when every debt is repaid or after
    ``max_months`` months, in which case the result is marked ``truncated``.
    """
    if max_months <= 0:
        raise InvalidInputError(f"max_months must be positive, got {max_months}")
    if not debts or total_monthly_payment <= 0:
        return MultiDebtPayoffResult(months=0, total_interest=0.0, total_paid=0.0)

    # Working balances; the caller's Debt objects are never touched.
    balances = [debt.balance for debt in debts]
    open_debts = [i for i in payoff_order(debts, strategy) if balances[i] > PAID_OFF_TOLERANCE]

    month = 0
    total_interest = 0.0
    amount_paid = 0.0

    while open_debts and month < max_months:
        month += 1
        target, *others = open_debts
        remaining_payment = total_monthly_payment

        for i in others:
            interest = balances[i] * monthly_rate(debts[i].interest_rate)
            owed = balances[i] + interest
            payment = min(debts[i].minimum_payment, owed)
            balances[i] = owed - payment
            total_interest += interest
            amount_paid += payment
            remaining_payment -= payment

        interest = balances[target] * monthly_rate(debts[target].interest_rate)
        owed = balances[target] + interest
        payment = min(max(0.0, remaining_payment), owed)
        balances[target] = owed - payment
        total_interest += interest
        amount_paid += payment

        open_debts = [i for i in open_debts if balances[i] > PAID_OFF_TOLERANCE]

    remaining_balance = sum(balances[i] for i in open_debts)
    truncated = bool(open_debts)
    if truncated:
        logger.warning(
            "Debt payoff simulation stopped at %d months with %.2f still owed",
            month,
            remaining_balance,
        )

    return MultiDebtPayoffResult(
        months=month,
        total_interest=round(total_interest, 2),
        total_paid=round(total_monthly_payment * month, 2),
        amount_paid=round(amount_paid, 2),
        remaining_balance=round(remaining_balance, 2),
        truncated=truncated,
    )
