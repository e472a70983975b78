"""Financial calculator tools."""

from typing import Annotated

from langchain_core.tools import tool
from pydantic import ValidationError

from ..config import settings
from ..engine import (
    calculate_compound_interest as compound_interest,
    calculate_debt_payoff as debt_payoff,
    calculate_debt_payoff_multiple as debt_payoff_multiple,
    calculate_financial_health_score as financial_health_score,
    calculate_future_value as future_value,
    calculate_house_affordability as house_affordability,
    calculate_loan_payment as loan_payment,
    calculate_monthly_payment as monthly_payment,
    calculate_portfolio_allocation as portfolio_allocation,
    calculate_retirement_needs as retirement_needs,
    calculate_tax_estimate as tax_estimate,
    calculate_time_to_goal as time_to_goal,
    generate_savings_projection,
)
from ..exceptions import InvalidInputError
from ..models import Debt, FinancialHealthInputs

SAVINGS_RATE_HINT = (
    "Annual interest rate as a decimal (e.g., 0.045 for 4.5%). Use 0.045 for high-yield "
    "savings, 0.07 for investments, 0.02 for regular savings."
)


def _money(value: float) -> float:
    return round(value, 2)


@tool
def calculate_future_value(
    present_value: Annotated[float, "Current amount saved (starting balance)"],
    monthly_contribution: Annotated[float, "Amount added each month"],
    annual_rate: Annotated[float, SAVINGS_RATE_HINT],
    years: Annotated[float, "Number of years to calculate"],
) -> dict:
    """Calculate the future value of savings with compound interest.

    Use this when users ask "how much will I have" or "what will my savings grow to".
    """
    try:
        result = future_value(present_value, monthly_contribution, annual_rate, years)
    except InvalidInputError as e:
        return {"error": str(e)}

    total_contributions = present_value + monthly_contribution * years * 12
    return {
        "future_value": _money(result),
        "total_contributions": _money(total_contributions),
        "total_interest": _money(result - total_contributions),
    }


@tool
def calculate_monthly_payment(
    target_amount: Annotated[float, "The goal amount to reach"],
    current_amount: Annotated[float, "Amount already saved"],
    annual_rate: Annotated[float, SAVINGS_RATE_HINT],
    years: Annotated[float, "Years to reach the goal"],
) -> dict:
    """Calculate the monthly savings needed to reach a specific goal.

    Use this when users ask "how much do I need to save per month" or
    "what monthly amount will get me to my goal".
    """
    try:
        payment = monthly_payment(target_amount, current_amount, annual_rate, years)
    except InvalidInputError as e:
        return {"error": str(e)}

    return {
        "monthly_payment": _money(payment),
        "total_months": round(years * 12),
        "total_contributions": _money(current_amount + payment * years * 12),
    }


@tool
def calculate_time_to_goal(
    target_amount: Annotated[float, "The goal amount to reach"],
    current_amount: Annotated[float, "Amount already saved"],
    monthly_contribution: Annotated[float, "Amount being saved each month"],
    annual_rate: Annotated[float, SAVINGS_RATE_HINT],
) -> dict:
    """Calculate how long it will take to reach a savings goal at the current contribution rate.

    Use this when users ask "how long will it take" or "when will I reach my goal".
    """
    months = time_to_goal(target_amount, current_amount, monthly_contribution, annual_rate)
    if months is None:
        return {
            "error": "Cannot reach goal with current contribution rate",
            "suggestion": "Increase monthly contributions or extend timeframe",
        }

    return {
        "months": months,
        "years": months // 12,
        "remaining_months": months % 12,
        "total_contributions": _money(current_amount + max(0, monthly_contribution) * months),
    }


@tool
def calculate_compound_interest(
    principal: Annotated[float, "Initial amount"],
    annual_rate: Annotated[float, "Annual interest rate as a decimal (e.g., 0.045 for 4.5%)"],
    years: Annotated[float, "Number of years"],
    compound_frequency: Annotated[
        int, "Times per year interest compounds (12 for monthly, 365 for daily)"
    ] = 12,
) -> dict:
    """Calculate compound interest growth without contributions.

    Use this for "how much will X grow to" questions without monthly additions.
    """
    try:
        result = compound_interest(principal, annual_rate, years, compound_frequency)
    except InvalidInputError as e:
        return {"error": str(e)}

    return {
        "final_amount": _money(result),
        "interest_earned": _money(result - principal),
    }


@tool
def project_savings(
    current_amount: Annotated[float, "Starting balance"],
    monthly_contribution: Annotated[float, "Amount added each month"],
    annual_rate: Annotated[float, SAVINGS_RATE_HINT],
    years: Annotated[float, "Number of years to project"],
) -> dict:
    """Project a savings balance year by year.

    Use this to show users how their balance builds up over time and how much
    of it comes from interest.
    """
    try:
        projection = generate_savings_projection(
            current_amount, monthly_contribution, annual_rate, years
        )
    except InvalidInputError as e:
        return {"error": str(e)}

    yearly = [point for point in projection if point.month % 12 == 0 and point.month > 0]
    final = projection[-1]
    return {
        "final_balance": final.balance,
        "total_contributed": final.total_contributed,
        "total_interest": final.total_interest,
        "year_by_year": [
            {"year": point.month // 12, "balance": point.balance, "interest": point.total_interest}
            for point in yearly
        ],
    }


@tool
def calculate_debt_payoff(
    principal: Annotated[float, "The debt amount (balance owed)"],
    annual_rate: Annotated[
        float,
        "Annual interest rate as a decimal (e.g., 0.20 for 20%). Credit cards are typically "
        "0.15-0.25, student loans 0.04-0.07, personal loans 0.08-0.15.",
    ],
    monthly_payment: Annotated[float, "Amount paid each month toward the debt"],
) -> dict:
    """Calculate how long it will take to pay off a single debt and the total interest paid.

    Use this for credit cards, loans, or any single debt payoff question.
    """
    try:
        result = debt_payoff(principal, annual_rate, monthly_payment)
    except InvalidInputError as e:
        return {"error": str(e)}

    if result is None:
        return {
            "error": "Monthly payment does not cover interest charges",
            "suggestion": "Increase monthly payment amount",
        }
    return result.model_dump()


@tool
def calculate_debt_payoff_multiple(
    debts: Annotated[
        list[dict],
        "Debts with 'balance', 'interest_rate' (decimal) and 'minimum_payment' keys, "
        "in the order they should be targeted",
    ],
    total_monthly_payment: Annotated[float, "Total amount paid toward all debts each month"],
    strategy: Annotated[
        str,
        "'given' to keep the order above, 'avalanche' for highest rate first, "
        "'snowball' for smallest balance first",
    ] = "given",
) -> dict:
    """Simulate paying off several debts at once with one monthly budget.

    Every debt gets its minimum payment; the rest goes to one target debt at a time.
    Use this to compare avalanche and snowball plans or to check a debt-free date.
    """
    try:
        parsed = [Debt(**debt) for debt in debts]
        result = debt_payoff_multiple(parsed, total_monthly_payment, strategy=strategy)
    except (InvalidInputError, ValidationError) as e:
        return {"error": str(e)}

    output = result.model_dump()
    if result.truncated:
        output["suggestion"] = (
            "Debts are not repaid within 50 years; increase the monthly payment"
        )
    return output


@tool
def calculate_loan_payment(
    loan_amount: Annotated[float, "The principal loan amount"],
    annual_rate: Annotated[
        float,
        "Annual interest rate as a decimal (e.g., 0.07 for 7%). Mortgages typically 0.06-0.08, "
        "auto loans 0.04-0.08, personal loans 0.08-0.15.",
    ],
    years: Annotated[float, "Loan term in years (e.g., 30 for mortgage, 5 for auto loan)"],
) -> dict:
    """Calculate the required monthly payment for a loan.

    Use this for mortgage, auto loan, or any fixed-term loan questions.
    """
    try:
        result = loan_payment(loan_amount, annual_rate, years)
    except InvalidInputError as e:
        return {"error": str(e)}

    return {name: _money(value) for name, value in result.model_dump().items()}


@tool
def calculate_house_affordability(
    annual_income: Annotated[float, "Gross annual income"],
    monthly_debts: Annotated[float, "Existing monthly debt payments"],
    down_payment_percent: Annotated[float, "Down payment as a decimal (0.20 for 20%)"],
    annual_rate: Annotated[
        float | None, "Mortgage interest rate as a decimal; omit to use the current default"
    ] = None,
    years: Annotated[int, "Mortgage term in years"] = 30,
) -> dict:
    """Estimate the most expensive house a user can afford under the 28/36 rule.

    Use this when users ask "how much house can I afford".
    """
    try:
        result = house_affordability(
            annual_income,
            monthly_debts,
            down_payment_percent,
            annual_rate,
            years,
            rates=settings.default_rates,
        )
    except InvalidInputError as e:
        return {"error": str(e)}

    return {name: round(value) for name, value in result.model_dump().items()}


@tool
def calculate_retirement_needs(
    current_age: Annotated[int, "User's current age"],
    retirement_age: Annotated[int, "Age the user wants to retire at"],
    current_savings: Annotated[float, "Retirement savings so far"],
    annual_income: Annotated[float, "Current annual income"],
    income_replacement_ratio: Annotated[
        float, "Share of income needed in retirement as a decimal"
    ] = 0.8,
    years_in_retirement: Annotated[int, "Expected years in retirement"] = 25,
    annual_return: Annotated[
        float | None,
        "Expected annual return as a decimal; omit to use the default investment return",
    ] = None,
) -> dict:
    """Calculate how much a user needs saved to retire and the monthly saving to get there.

    Use this for "am I on track for retirement" or "how much do I need to retire" questions.
    """
    try:
        result = retirement_needs(
            current_age,
            retirement_age,
            current_savings,
            annual_income,
            income_replacement_ratio,
            years_in_retirement,
            annual_return,
            rates=settings.default_rates,
        )
    except InvalidInputError as e:
        return {"error": str(e)}

    output = {
        "target_amount": round(result.target_amount),
        "projected_value": round(result.projected_value),
        "shortfall": round(result.shortfall),
    }
    if result.monthly_contribution_needed is None:
        output["monthly_contribution_needed"] = None
        output["suggestion"] = "No time left to save; consider a later retirement age"
    else:
        output["monthly_contribution_needed"] = round(result.monthly_contribution_needed)
    return output


@tool
def calculate_financial_health_score(
    emergency_fund_months: Annotated[float, "Months of expenses covered by savings"] = 0,
    savings_rate: Annotated[float, "Savings as a share of annual income"] = 0,
    debt_to_income_ratio: Annotated[float, "Total debt divided by annual income"] = 0,
    credit_score: Annotated[float, "Credit score between 300 and 850"] = 650,
    investment_ratio: Annotated[float, "Investments divided by annual income"] = 0,
    budget_adherence: Annotated[float, "Share of months spent within budget (0-1)"] = 0.5,
) -> dict:
    """Score a user's overall financial health from 0 to 100, with sub-scores.

    Use this when users ask how they are doing financially overall.
    """
    try:
        inputs = FinancialHealthInputs(
            emergency_fund_months=emergency_fund_months,
            savings_rate=savings_rate,
            debt_to_income_ratio=debt_to_income_ratio,
            credit_score=credit_score,
            investment_ratio=investment_ratio,
            budget_adherence=budget_adherence,
        )
    except ValidationError as e:
        return {"error": str(e)}

    return financial_health_score(inputs).model_dump()


@tool
def calculate_tax_estimate(
    annual_income: Annotated[float, "Gross annual income"],
    filing_status: Annotated[str, "'single' or 'married'"] = "single",
    region: Annotated[str, "'US', 'UK' or 'EU'"] = "US",
    deductions: Annotated[float, "Itemized deductions"] = 0,
    credits: Annotated[float, "Tax credits"] = 0,
) -> dict:
    """Give a rough, illustrative income tax estimate using simplified brackets.

    This is not tax advice; say so when presenting the result.
    """
    try:
        return tax_estimate(annual_income, filing_status, region, deductions, credits).model_dump()
    except InvalidInputError as e:
        return {"error": str(e)}


@tool
def calculate_portfolio_allocation(
    age: Annotated[int, "User's current age"],
    risk_tolerance: Annotated[str, "'conservative', 'moderate' or 'aggressive'"] = "moderate",
) -> dict:
    """Suggest a stock/bond/cash split based on age and risk tolerance.

    Use this when users ask how to divide their investments.
    """
    try:
        return portfolio_allocation(age, risk_tolerance).model_dump()
    except InvalidInputError as e:
        return {"error": str(e)}
