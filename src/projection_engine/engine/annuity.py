"""Time-value-of-money relations for a level-payment, fixed-rate annuity.

Pure functions, float in, float out. No I/O.

Rates are annual decimal fractions (0.07 for 7%) compounded monthly. Payments
fall at the end of each month (ordinary annuity).

The private ``_fv``/``_pv``/``_pmt``/``_nper`` helpers use the spreadsheet sign
convention: money leaving the saver/borrower is negative, money arriving is
positive. The public functions hide that and take and return non-negative,
intuitively signed amounts.
"""

import math

from ..exceptions import InvalidInputError

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate: float) -> float:
    return annual_rate / MONTHS_PER_YEAR


def _months(years: float) -> float:
    if years < 0:
        raise InvalidInputError(f"years must not be negative, got {years}")
    return years * MONTHS_PER_YEAR


def _require_non_negative(**amounts: float) -> None:
    for name, value in amounts.items():
        if value < 0:
            raise InvalidInputError(f"{name} must not be negative, got {value}")


def growth_factor(rate: float, nper: float) -> float:
    """``(1 + rate) ** nper``, rejecting horizons too long to represent as a float."""
    try:
        return (1 + rate) ** nper
    except OverflowError as e:
        raise InvalidInputError(
            f"{nper:g} periods at rate {rate:g} is out of range for this calculation"
        ) from e


def _fv(rate: float, nper: float, pmt: float, pv: float) -> float:
    if rate == 0:
        return -(pv + pmt * nper)
    growth = growth_factor(rate, nper)
    return -(pv * growth + pmt * (growth - 1) / rate)


def _pv(rate: float, nper: float, pmt: float, fv: float) -> float:
    if rate == 0:
        return -(fv + pmt * nper)
    growth = growth_factor(rate, nper)
    return -(fv + pmt * (growth - 1) / rate) / growth


def _pmt(rate: float, nper: float, pv: float, fv: float) -> float:
    if nper == 0:
        raise InvalidInputError("payment is undefined over zero periods")
    if rate == 0:
        return -(fv + pv) / nper
    growth = growth_factor(rate, nper)
    return -(fv + pv * growth) * rate / (growth - 1)


def _nper(rate: float, pmt: float, pv: float, fv: float) -> float | None:
    """Number of periods, or None when no (finite, real) solution exists."""
    if rate == 0:
        if pmt == 0:
            return None
        return -(pv + fv) / pmt
    if rate <= -1:
        return None

    numerator = pmt - fv * rate
    denominator = pmt + pv * rate
    if denominator == 0 or numerator / denominator <= 0:
        return None
    return math.log(numerator / denominator) / math.log(1 + rate)


def future_value(
    present_value: float, monthly_contribution: float, annual_rate: float, years: float
) -> float:
    """Balance after ``years`` of monthly compounding with a level monthly contribution."""
    months = _months(years)
    value = _fv(monthly_rate(annual_rate), months, -monthly_contribution, -present_value)
    return max(0.0, value)


def present_value(
    monthly_payment: float, annual_rate: float, years: float, future_amount: float = 0.0
) -> float:
    """Amount needed today to fund ``monthly_payment`` for ``years``.

    ``future_amount`` is an optional lump sum that must also be left over at the end.
    """
    _require_non_negative(monthly_payment=monthly_payment, future_amount=future_amount)
    months = _months(years)
    return max(0.0, -_pv(monthly_rate(annual_rate), months, monthly_payment, future_amount))


def savings_payment(
    target_amount: float, current_amount: float, annual_rate: float, years: float
) -> float:
    """Level monthly deposit that grows ``current_amount`` into ``target_amount``.

    Returns 0 when the current amount alone already reaches the target.
    """
    months = _months(years)
    if months == 0:
        raise InvalidInputError("years must be positive to solve for a monthly payment")
    payment = -_pmt(monthly_rate(annual_rate), months, -current_amount, target_amount)
    return max(0.0, payment)


def loan_payment(principal: float, annual_rate: float, years: float) -> float:
    """Level monthly payment that amortizes ``principal`` to zero over ``years``."""
    _require_non_negative(principal=principal)
    months = _months(years)
    if months == 0:
        raise InvalidInputError("years must be positive to solve for a loan payment")
    return max(0.0, -_pmt(monthly_rate(annual_rate), months, principal, 0.0))


def periods_to_target(
    target_amount: float, current_amount: float, monthly_contribution: float, annual_rate: float
) -> float | None:
    """Fractional months until savings reach ``target_amount``, or None if they never do."""
    return _nper(monthly_rate(annual_rate), -monthly_contribution, -current_amount, target_amount)


def periods_to_payoff(
    principal: float, annual_rate: float, monthly_payment: float, remaining: float = 0.0
) -> float | None:
    """Fractional months until a debt is down to ``remaining``, or None if it never is."""
    return _nper(monthly_rate(annual_rate), -monthly_payment, principal, -remaining)


def balance_after(principal: float, annual_rate: float, monthly_payment: float, months: int) -> float:
    """Debt balance left after ``months`` level payments (negative once overpaid)."""
    return -_fv(monthly_rate(annual_rate), months, -monthly_payment, principal)
