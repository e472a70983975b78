"""FastAPI route handlers."""

import logging

from fastapi import APIRouter, Depends

from .. import engine
from ..config import settings
from ..models import FinancialHealthInputs
from ..tools import execute_calculator_tool, tool_schemas
from .auth import verify_token
from .formatting import format_currency
from .schemas import (
    CompoundInterestRequest,
    CompoundInterestResponse,
    DebtPayoffRequest,
    DebtPayoffResponse,
    FinancialHealthRequest,
    FinancialHealthResponse,
    FutureValueRequest,
    FutureValueResponse,
    HouseAffordabilityRequest,
    HouseAffordabilityResponse,
    LoanPaymentRequest,
    LoanPaymentResponse,
    MonthlyPaymentRequest,
    MonthlyPaymentResponse,
    MultiDebtPayoffRequest,
    MultiDebtPayoffResponse,
    PortfolioAllocationRequest,
    PortfolioAllocationResponse,
    RetirementNeedsRequest,
    RetirementNeedsResponse,
    SavingsProjectionPointResponse,
    SavingsProjectionRequest,
    SavingsProjectionResponse,
    TaxEstimateRequest,
    TaxEstimateResponse,
    TimeToGoalRequest,
    TimeToGoalResponse,
)

router = APIRouter(prefix="/v1", dependencies=[Depends(verify_token)])

logger = logging.getLogger(__name__)


def _money(value: float) -> float:
    return round(value, 2)


def _display(amount: float, region) -> str | None:
    return format_currency(amount, region) if region else None


@router.post("/calculators/future-value", response_model=FutureValueResponse)
def future_value(request: FutureValueRequest):
    """Future value of savings with monthly contributions."""
    logger.info("future-value %s", request)
    result = engine.calculate_future_value(
        request.present_value, request.monthly_contribution, request.annual_rate, request.years
    )
    contributions = request.present_value + request.monthly_contribution * request.years * 12
    return FutureValueResponse(
        future_value=_money(result),
        total_contributions=_money(contributions),
        total_interest=_money(result - contributions),
        display=_display(result, request.region),
    )


@router.post("/calculators/monthly-payment", response_model=MonthlyPaymentResponse)
def monthly_payment(request: MonthlyPaymentRequest):
    """Monthly contribution needed to reach a goal in time."""
    logger.info("monthly-payment %s", request)
    payment = engine.calculate_monthly_payment(
        request.target_amount, request.current_amount, request.annual_rate, request.years
    )
    months = round(request.years * 12)
    return MonthlyPaymentResponse(
        monthly_payment=_money(payment),
        total_months=months,
        total_contributions=_money(request.current_amount + payment * request.years * 12),
        display=_display(payment, request.region),
    )


@router.post("/calculators/time-to-goal", response_model=TimeToGoalResponse)
def time_to_goal(request: TimeToGoalRequest):
    """Months until a goal is reached at the current savings rate."""
    logger.info("time-to-goal %s", request)
    months = engine.calculate_time_to_goal(
        request.target_amount,
        request.current_amount,
        request.monthly_contribution,
        request.annual_rate,
    )
    if months is None:
        return TimeToGoalResponse(
            possible=False,
            suggestion="Increase monthly contributions or extend timeframe",
        )
    return TimeToGoalResponse(months=months, years=months // 12, remaining_months=months % 12)


@router.post("/calculators/compound-interest", response_model=CompoundInterestResponse)
def compound_interest(request: CompoundInterestRequest):
    """Lump-sum growth with discrete compounding."""
    logger.info("compound-interest %s", request)
    result = engine.calculate_compound_interest(
        request.principal, request.annual_rate, request.years, request.compounding_frequency
    )
    return CompoundInterestResponse(
        final_amount=_money(result),
        interest_earned=_money(engine.calculate_interest_earned(request.principal, result)),
        apy=round(engine.calculate_apy(request.annual_rate, request.compounding_frequency), 6),
        display=_display(result, request.region),
    )


@router.post("/calculators/savings-projection", response_model=SavingsProjectionResponse)
def savings_projection(request: SavingsProjectionRequest):
    """Month-by-month savings balance."""
    logger.info("savings-projection %s", request)
    points = engine.generate_savings_projection(
        request.current_amount, request.monthly_contribution, request.annual_rate, request.years
    )
    return SavingsProjectionResponse(
        points=[SavingsProjectionPointResponse(**p.model_dump()) for p in points],
        display=_display(points[-1].balance, request.region),
    )


@router.post("/calculators/debt-payoff", response_model=DebtPayoffResponse)
def debt_payoff(request: DebtPayoffRequest):
    """Payoff timeline for one debt."""
    logger.info("debt-payoff %s", request)
    result = engine.calculate_debt_payoff(
        request.principal, request.annual_rate, request.monthly_payment
    )
    if result is None:
        return DebtPayoffResponse(
            possible=False,
            suggestion="Monthly payment does not cover interest charges; increase the payment",
        )
    return DebtPayoffResponse(
        **result.model_dump(), display=_display(result.total_interest, request.region)
    )


@router.post("/calculators/debt-payoff-multiple", response_model=MultiDebtPayoffResponse)
def debt_payoff_multiple(request: MultiDebtPayoffRequest):
    """Payoff timeline for several debts sharing one monthly budget."""
    logger.info("debt-payoff-multiple %s", request)
    result = engine.calculate_debt_payoff_multiple(
        request.debts, request.total_monthly_payment, strategy=request.strategy
    )
    return MultiDebtPayoffResponse(
        **result.model_dump(),
        possible=not result.truncated,
        suggestion="Increase the monthly payment" if result.truncated else None,
        display=_display(result.total_interest, request.region),
    )


@router.post("/calculators/loan-payment", response_model=LoanPaymentResponse)
def loan_payment(request: LoanPaymentRequest):
    """Monthly payment on a fixed-term loan."""
    logger.info("loan-payment %s", request)
    annual_rate = request.annual_rate
    if annual_rate is None:
        annual_rate = settings.default_rates.mortgage
    result = engine.calculate_loan_payment(request.loan_amount, annual_rate, request.years)
    return LoanPaymentResponse(
        monthly_payment=_money(result.monthly_payment),
        total_paid=_money(result.total_paid),
        total_interest=_money(result.total_interest),
        display=_display(result.monthly_payment, request.region),
    )


@router.post("/calculators/house-affordability", response_model=HouseAffordabilityResponse)
def house_affordability(request: HouseAffordabilityRequest):
    """Maximum house price under the 28/36 rule."""
    logger.info("house-affordability %s", request)
    result = engine.calculate_house_affordability(
        request.annual_income,
        request.monthly_debts,
        request.down_payment_percent,
        request.annual_rate,
        request.years,
        rates=settings.default_rates,
    )
    return HouseAffordabilityResponse(
        **{name: _money(value) for name, value in result.model_dump().items()},
        display=_display(result.max_house_price, request.region),
    )


@router.post("/calculators/retirement-needs", response_model=RetirementNeedsResponse)
def retirement_needs(request: RetirementNeedsRequest):
    """Retirement savings target and the monthly contribution to reach it."""
    logger.info("retirement-needs %s", request)
    result = engine.calculate_retirement_needs(
        request.current_age,
        request.retirement_age,
        request.current_savings,
        request.annual_income,
        request.income_replacement_ratio,
        request.years_in_retirement,
        request.annual_return,
        rates=settings.default_rates,
    )
    monthly_needed = result.monthly_contribution_needed
    return RetirementNeedsResponse(
        target_amount=_money(result.target_amount),
        projected_value=_money(result.projected_value),
        shortfall=_money(result.shortfall),
        monthly_contribution_needed=None if monthly_needed is None else _money(monthly_needed),
        possible=monthly_needed is not None,
        suggestion="Consider a later retirement age" if monthly_needed is None else None,
        display=_display(result.target_amount, request.region),
    )


@router.post("/calculators/financial-health", response_model=FinancialHealthResponse)
def financial_health(request: FinancialHealthRequest):
    """Composite 0-100 financial health score."""
    logger.info("financial-health %s", request)
    inputs = FinancialHealthInputs(**request.model_dump(exclude={"region"}))
    return FinancialHealthResponse(**engine.calculate_financial_health_score(inputs).model_dump())


@router.post("/calculators/tax-estimate", response_model=TaxEstimateResponse)
def tax_estimate(request: TaxEstimateRequest):
    """Illustrative income tax estimate."""
    logger.info("tax-estimate %s", request)
    result = engine.calculate_tax_estimate(
        request.annual_income,
        request.filing_status,
        request.tax_region,
        request.deductions,
        request.credits,
    )
    return TaxEstimateResponse(
        **result.model_dump(), display=_display(result.estimated_tax, request.region)
    )


@router.post("/calculators/portfolio-allocation", response_model=PortfolioAllocationResponse)
def portfolio_allocation(request: PortfolioAllocationRequest):
    """Age-based stock/bond/cash split."""
    logger.info("portfolio-allocation %s", request)
    result = engine.calculate_portfolio_allocation(request.age, request.risk_tolerance)
    return PortfolioAllocationResponse(**result.model_dump())


@router.get("/tools")
def list_tools():
    """JSON-schema definitions of the calculator tools, for binding to an LLM."""
    return {"object": "list", "data": tool_schemas()}


@router.post("/tools/{tool_name}")
def run_tool(tool_name: str, tool_input: dict):
    """Execute one calculator tool call and return its raw result."""
    logger.info("tool %s %s", tool_name, tool_input)
    return {"tool": tool_name, "output": execute_calculator_tool(tool_name, tool_input)}
