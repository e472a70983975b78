"""Simplified income tax estimate.

Bracket tables are illustrative round numbers per region, good enough to show
the shape of a progressive tax. They are not authoritative and are not
indexed for inflation.
"""

import math

from ..exceptions import InvalidInputError
from ..models import TaxEstimate

# (upper bound of taxable income, marginal rate)
TAX_BRACKETS: dict[str, dict[str, list[tuple[float, float]]]] = {
    "US": {
        "single": [
            (11_600, 0.10),
            (47_150, 0.12),
            (100_525, 0.22),
            (191_950, 0.24),
            (243_725, 0.32),
            (609_350, 0.35),
            (math.inf, 0.37),
        ],
        "married": [
            (23_200, 0.10),
            (94_300, 0.12),
            (201_050, 0.22),
            (383_900, 0.24),
            (487_450, 0.32),
            (731_200, 0.35),
            (math.inf, 0.37),
        ],
    },
    "UK": {
        "single": [(37_700, 0.20), (125_140, 0.40), (math.inf, 0.45)],
    },
    "EU": {
        "single": [(55_000, 0.30), (275_000, 0.42), (math.inf, 0.45)],
    },
}

STANDARD_DEDUCTIONS: dict[str, dict[str, float]] = {
    "US": {"single": 14_600, "married": 29_200},
    "UK": {"single": 12_570},  # personal allowance
    "EU": {"single": 11_600},  # basic allowance
}


def _brackets_for(region: str, filing_status: str) -> tuple[list[tuple[float, float]], float]:
    region_brackets = TAX_BRACKETS.get(region)
    if region_brackets is None:
        raise InvalidInputError(f"Unknown region: {region}. Use one of {sorted(TAX_BRACKETS)}")

    if len(region_brackets) == 1:
        # Individual taxation: filing status does not change the brackets.
        status = "single"
    elif filing_status in region_brackets:
        status = filing_status
    else:
        raise InvalidInputError(
            f"Unknown filing status: {filing_status}. Use one of {sorted(region_brackets)}"
        )
    return region_brackets[status], STANDARD_DEDUCTIONS[region][status]


def calculate_tax_estimate(
    annual_income: float,
    filing_status: str = "single",
    region: str = "US",
    deductions: float = 0.0,
    credits: float = 0.0,
) -> TaxEstimate:
    """Estimate income tax with the greater of itemized or standard deductions."""
    if annual_income < 0 or deductions < 0 or credits < 0:
        raise InvalidInputError("income, deductions and credits must not be negative")

    brackets, standard_deduction = _brackets_for(region, filing_status)
    taxable_income = max(0.0, annual_income - max(standard_deduction, deductions))

    tax = 0.0
    marginal_rate = brackets[0][1] if taxable_income > 0 else 0.0
    lower = 0.0
    for upper, rate in brackets:
        if taxable_income <= lower:
            break
        tax += (min(taxable_income, upper) - lower) * rate
        marginal_rate = rate
        lower = upper

    tax = max(0.0, tax - credits)

    return TaxEstimate(
        taxable_income=round(taxable_income, 2),
        estimated_tax=round(tax, 2),
        effective_rate=round(tax / annual_income, 4) if annual_income > 0 else 0.0,
        marginal_rate=marginal_rate,
        after_tax_income=round(annual_income - tax, 2),
    )
