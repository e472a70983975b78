"""Dispatch calculator tool calls by name."""

import logging

from langchain_core.tools import BaseTool
from langchain_core.utils.function_calling import convert_to_openai_tool
from pydantic import ValidationError

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

logger = logging.getLogger(__name__)

CALCULATOR_TOOLS: list[BaseTool] = [
    calculate_future_value,
    calculate_monthly_payment,
    calculate_time_to_goal,
    calculate_compound_interest,
    project_savings,
    calculate_debt_payoff,
    calculate_debt_payoff_multiple,
    calculate_loan_payment,
    calculate_house_affordability,
    calculate_retirement_needs,
    calculate_financial_health_score,
    calculate_tax_estimate,
    calculate_portfolio_allocation,
]

_TOOLS_BY_NAME = {t.name: t for t in CALCULATOR_TOOLS}


def tool_schemas() -> list[dict]:
    """JSON-schema function definitions for every calculator tool (OpenAI format)."""
    return [convert_to_openai_tool(t) for t in CALCULATOR_TOOLS]


def execute_calculator_tool(tool_name: str, tool_input: dict) -> dict:
    """Run a calculator tool and return its structured result.

    Unknown tools and arguments that fail validation come back as an ``error`` dict
    so the calling agent can correct itself.
    """
    calculator = _TOOLS_BY_NAME.get(tool_name)
    if calculator is None:
        logger.warning("Unknown tool requested: %s", tool_name)
        return {"error": f"Unknown tool: {tool_name}"}

    try:
        return calculator.invoke(tool_input)
    except ValidationError as e:
        logger.info("Rejected arguments for %s: %s", tool_name, e)
        return {"error": f"Invalid arguments for {tool_name}: {e}"}
