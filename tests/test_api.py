"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    """Create a test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_service_info(self, client):
        """Test root endpoint returns service information."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "Goal Projection Engine"
        assert "version" in data


class TestAuthentication:
    """Tests for API authentication."""

    def test_missing_auth_header(self, client):
        """Test request without auth header is rejected."""
        response = client.get("/v1/tools")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing authentication token"

    def test_invalid_token(self, client):
        """Test request with invalid token is rejected."""
        response = client.post(
            "/v1/calculators/future-value",
            json={"presentValue": 0, "monthlyContribution": 100, "annualRate": 0.07, "years": 10},
            headers={"Authorization": "Bearer invalid-token"},
        )
        assert response.status_code == 401


class TestGoalEndpoints:
    """Tests for the savings and goal calculators."""

    def test_future_value_camel_case(self, client, auth_headers):
        """Test camelCase fields and a regional display string."""
        response = client.post(
            "/v1/calculators/future-value",
            json={
                "presentValue": 0,
                "monthlyContribution": 100,
                "annualRate": 0.07,
                "years": 10,
                "region": "US",
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["future_value"] == pytest.approx(17308.48, abs=0.5)
        assert data["display"] == "$17,308"
        assert data["possible"] is True

    def test_future_value_snake_case_without_region(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/future-value",
            json={"present_value": 1000, "monthly_contribution": 0, "annual_rate": 0, "years": 5},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["future_value"] == 1000
        assert response.json()["display"] is None

    def test_time_to_goal_impossible(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/time-to-goal",
            json={"targetAmount": 10000, "monthlyContribution": 0, "annualRate": 0.05},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["possible"] is False
        assert data["months"] is None
        assert data["suggestion"]

    def test_compound_interest(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/compound-interest",
            json={"principal": 1000, "annualRate": 0.05, "years": 10, "region": "EU"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["final_amount"] == pytest.approx(1647.01, abs=0.01)
        assert data["display"] == "1.647 €"

    def test_savings_projection(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/savings-projection",
            json={"currentAmount": 500, "monthlyContribution": 50, "annualRate": 0.04, "years": 1},
            headers=auth_headers,
        )
        assert response.status_code == 200
        points = response.json()["points"]
        assert len(points) == 13
        assert points[0]["balance"] == 500

    def test_negative_years_rejected(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/future-value",
            json={"presentValue": 0, "monthlyContribution": 100, "annualRate": 0.07, "years": -1},
            headers=auth_headers,
        )
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "path,payload",
        [
            (
                "/v1/calculators/future-value",
                {"presentValue": 1000, "monthlyContribution": 100, "annualRate": 0.07},
            ),
            ("/v1/calculators/compound-interest", {"principal": 1000, "annualRate": 0.07}),
            ("/v1/calculators/loan-payment", {"loanAmount": 100000, "annualRate": 0.07}),
        ],
    )
    def test_very_long_horizon_rejected(self, client, auth_headers, path, payload):
        response = client.post(path, json={**payload, "years": 20000}, headers=auth_headers)
        assert response.status_code == 422

    def test_overflowing_growth_is_a_validation_error(self, client, auth_headers):
        """A horizon within bounds whose growth still overflows is reported as 422."""
        response = client.post(
            "/v1/calculators/compound-interest",
            json={"principal": 1000, "annualRate": 100000, "years": 100, "compoundingFrequency": 1},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert "out of range" in response.json()["detail"]


class TestDebtEndpoints:
    """Tests for the debt payoff calculators."""

    def test_debt_payoff(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/debt-payoff",
            json={"principal": 5000, "annualRate": 0.20, "monthlyPayment": 300},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["months_to_payoff"] == 20

    def test_debt_payoff_impossible(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/debt-payoff",
            json={"principal": 1000, "annualRate": 0.24, "monthlyPayment": 15},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["possible"] is False
        assert data["months_to_payoff"] is None

    def test_multiple_debts(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/debt-payoff-multiple",
            json={
                "debts": [
                    {"balance": 600, "interestRate": 0, "minimumPayment": 50},
                    {"balance": 400, "interestRate": 0, "minimumPayment": 50},
                ],
                "totalMonthlyPayment": 200,
                "strategy": "avalanche",
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["months"] == 5
        assert data["truncated"] is False
        assert data["possible"] is True

    def test_multiple_debts_truncated(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/debt-payoff-multiple",
            json={
                "debts": [{"balance": 1000000, "interestRate": 0.25, "minimumPayment": 10}],
                "totalMonthlyPayment": 100,
            },
            headers=auth_headers,
        )
        data = response.json()
        assert data["truncated"] is True
        assert data["possible"] is False
        assert data["months"] == 600


class TestPlanningEndpoints:
    """Tests for loan, affordability, retirement, health, tax and allocation endpoints."""

    def test_loan_payment(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/loan-payment",
            json={"loanAmount": 400000, "annualRate": 0.07, "years": 30},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["monthly_payment"] == pytest.approx(2661.21, abs=0.01)

    def test_house_affordability(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/house-affordability",
            json={"annualIncome": 120000, "downPaymentPercent": 0.2, "annualRate": 0},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["max_monthly_payment"] == 2800

    def test_retirement_no_time_left(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/retirement-needs",
            json={"currentAge": 65, "retirementAge": 65, "annualIncome": 80000},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["possible"] is False
        assert data["monthly_contribution_needed"] is None

    def test_retirement_before_current_age(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/retirement-needs",
            json={"currentAge": 50, "retirementAge": 40, "annualIncome": 80000},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert "retirement_age" in response.json()["detail"]

    def test_financial_health(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/financial-health",
            json={
                "emergencyFundMonths": 3,
                "savingsRate": 0.1,
                "debtToIncomeRatio": 0.3,
                "creditScore": 575,
                "investmentRatio": 0.5,
                "budgetAdherence": 0.8,
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["overall_score"] == 61

    def test_tax_estimate(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/tax-estimate",
            json={"annualIncome": 50000, "taxRegion": "UK", "region": "UK"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["estimated_tax"] == pytest.approx(7486)
        assert data["display"] == "£7,486"

    def test_tax_estimate_unknown_filing_status(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/tax-estimate",
            json={"annualIncome": 50000, "filingStatus": "widowed"},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert "Unknown filing status" in response.json()["detail"]

    def test_portfolio_allocation(self, client, auth_headers):
        response = client.post(
            "/v1/calculators/portfolio-allocation",
            json={"age": 30, "riskTolerance": "aggressive"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert (data["stocks"], data["bonds"], data["cash"]) == (95, 5, 0)


class TestToolEndpoints:
    """Tests for listing and executing calculator tools over HTTP."""

    def test_list_tools(self, client, auth_headers):
        response = client.get("/v1/tools", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["object"] == "list"
        assert len(data["data"]) == 13

    def test_run_tool(self, client, auth_headers):
        response = client.post(
            "/v1/tools/calculate_time_to_goal",
            json={
                "target_amount": 10000,
                "current_amount": 0,
                "monthly_contribution": 200,
                "annual_rate": 0.05,
            },
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["tool"] == "calculate_time_to_goal"
        assert data["output"]["months"] == 46

    def test_run_unknown_tool(self, client, auth_headers):
        response = client.post("/v1/tools/get_weather", json={}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["output"]["error"] == "Unknown tool: get_weather"
