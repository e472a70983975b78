"""Tests for the single- and multi-debt payoff calculators."""

import logging

import pytest

from src.projection_engine.engine.debt import (
    MAX_PAYOFF_MONTHS,
    calculate_debt_payoff,
    calculate_debt_payoff_multiple,
    payoff_order,
)
from src.projection_engine.exceptions import InvalidInputError
from src.projection_engine.models import Debt


class TestCalculateDebtPayoff:
    """Tests for calculate_debt_payoff."""

    def test_payment_below_interest_is_impossible(self):
        """$1,000 at 24% accrues $20/month; a $15 payment never retires it."""
        assert calculate_debt_payoff(1000, 0.24, 15) is None

    def test_non_positive_payment_is_impossible(self):
        assert calculate_debt_payoff(1000, 0.10, 0) is None
        assert calculate_debt_payoff(1000, 0.10, -25) is None

    @pytest.mark.parametrize("principal", [0, 0.004])
    def test_zero_principal(self, principal):
        result = calculate_debt_payoff(principal, 0.20, 100)
        assert result.months_to_payoff == 0
        assert result.total_interest == 0
        assert result.total_paid == 0

    def test_credit_card_payoff(self):
        result = calculate_debt_payoff(5000, 0.20, 300)
        assert result.months_to_payoff == 20
        assert 895 < result.total_interest < 915
        assert result.total_paid == pytest.approx(5000 + result.total_interest, abs=0.01)

    def test_final_month_pays_only_what_is_owed(self):
        result = calculate_debt_payoff(5000, 0.20, 300)
        assert result.total_paid < 300 * result.months_to_payoff
        assert result.total_paid > 300 * (result.months_to_payoff - 1)

    def test_zero_rate_exact(self):
        result = calculate_debt_payoff(1200, 0, 100)
        assert result.months_to_payoff == 12
        assert result.total_interest == 0
        assert result.total_paid == 1200

    def test_zero_rate_partial_final_month(self):
        result = calculate_debt_payoff(1000, 0, 300)
        assert result.months_to_payoff == 4
        assert result.total_paid == 1000
        assert result.total_interest == 0

    @pytest.mark.parametrize(
        "principal,rate,payment",
        [(500, 0.05, 600), (10_000, 0.07, 200), (25_000, 0.18, 1_000), (300, 0.29, 31)],
    )
    def test_interest_never_negative(self, principal, rate, payment):
        result = calculate_debt_payoff(principal, rate, payment)
        assert result is not None
        assert result.total_interest >= 0
        assert result.months_to_payoff >= 1

    def test_payment_larger_than_balance(self):
        result = calculate_debt_payoff(500, 0.12, 1000)
        assert result.months_to_payoff == 1
        assert result.total_paid == pytest.approx(505, abs=0.01)

    def test_negative_principal_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate_debt_payoff(-100, 0.1, 50)


class TestPayoffOrder:
    """Tests for payoff_order."""

    @pytest.fixture
    def debts(self):
        return [
            Debt(balance=3000, interest_rate=0.10, minimum_payment=60),
            Debt(balance=500, interest_rate=0.20, minimum_payment=25),
            Debt(balance=1000, interest_rate=0.30, minimum_payment=30),
        ]

    def test_given_keeps_input_order(self, debts):
        assert payoff_order(debts, "given") == [0, 1, 2]

    def test_avalanche_highest_rate_first(self, debts):
        assert payoff_order(debts, "avalanche") == [2, 1, 0]

    def test_snowball_smallest_balance_first(self, debts):
        assert payoff_order(debts, "snowball") == [1, 2, 0]

    def test_unknown_strategy_rejected(self, debts):
        with pytest.raises(InvalidInputError):
            payoff_order(debts, "random")


class TestCalculateDebtPayoffMultiple:
    """Tests for calculate_debt_payoff_multiple."""

    def test_empty_debts(self):
        result = calculate_debt_payoff_multiple([], 500)
        assert result.months == 0
        assert result.total_interest == 0
        assert result.total_paid == 0
        assert not result.truncated

    def test_non_positive_payment(self):
        debts = [Debt(balance=1000, interest_rate=0.1, minimum_payment=50)]
        result = calculate_debt_payoff_multiple(debts, 0)
        assert result.months == 0
        assert result.total_paid == 0

    def test_single_debt_matches_closed_form(self):
        """With one debt the simulation reduces to the closed-form payoff."""
        single = calculate_debt_payoff(5000, 0.20, 300)
        multi = calculate_debt_payoff_multiple(
            [Debt(balance=5000, interest_rate=0.20, minimum_payment=100)], 300
        )

        assert multi.months == single.months_to_payoff
        assert multi.total_interest == pytest.approx(single.total_interest, abs=0.011)
        assert multi.amount_paid == pytest.approx(single.total_paid, abs=0.011)
        assert multi.total_paid == 300 * multi.months
        assert multi.remaining_balance == 0
        assert not multi.truncated

    @pytest.mark.parametrize(
        "principal,rate,payment",
        [(300.005, 0, 100), (5000.004, 0, 250), (1200, 0, 100), (2500, 0.18, 120)],
    )
    def test_single_debt_matches_closed_form_near_tolerance(self, principal, rate, payment):
        """A sub-cent remainder closes the debt in both calculations."""
        single = calculate_debt_payoff(principal, rate, payment)
        multi = calculate_debt_payoff_multiple(
            [Debt(balance=principal, interest_rate=rate, minimum_payment=10)], payment
        )

        assert multi.months == single.months_to_payoff
        assert multi.total_interest == pytest.approx(single.total_interest, abs=0.011)
        assert multi.amount_paid == pytest.approx(single.total_paid, abs=0.011)
        assert not multi.truncated

    def test_sub_cent_remainder_does_not_add_a_month(self):
        result = calculate_debt_payoff(300.005, 0, 100)
        assert result.months_to_payoff == 3
        assert result.total_paid == 300
        assert result.total_interest == 0

    def test_does_not_mutate_input(self):
        debts = [
            Debt(balance=2000, interest_rate=0.18, minimum_payment=50),
            Debt(balance=800, interest_rate=0.22, minimum_payment=25),
        ]
        snapshot = [debt.model_copy() for debt in debts]

        calculate_debt_payoff_multiple(debts, 400)

        assert debts == snapshot

    def test_counts_interest_on_every_debt(self):
        """Interest on non-target debts is included, not just the target's."""
        debts = [
            Debt(balance=1000, interest_rate=0.0, minimum_payment=50),
            Debt(balance=1000, interest_rate=0.12, minimum_payment=50),
        ]
        result = calculate_debt_payoff_multiple(debts, 200)
        assert result.total_interest > 0
        assert result.amount_paid == pytest.approx(2000 + result.total_interest, abs=0.02)

    def test_zero_rate_two_debts(self):
        debts = [
            Debt(balance=600, interest_rate=0, minimum_payment=50),
            Debt(balance=400, interest_rate=0, minimum_payment=50),
        ]
        result = calculate_debt_payoff_multiple(debts, 200)
        assert result.months == 5
        assert result.total_interest == 0
        assert result.amount_paid == 1000
        assert result.total_paid == 1000

    def test_leftover_payment_is_not_rolled_over(self):
        """Money left after the target is repaid mid-month is not moved to the next debt."""
        debts = [
            Debt(balance=600, interest_rate=0, minimum_payment=50),
            Debt(balance=400, interest_rate=0, minimum_payment=50),
        ]
        result = calculate_debt_payoff_multiple(debts, 200, strategy="snowball")
        assert result.months == 6
        assert result.amount_paid == 1000
        assert result.total_paid == 1200

    def test_already_paid_debts_are_skipped(self):
        debts = [
            Debt(balance=0, interest_rate=0.1, minimum_payment=50),
            Debt(balance=1000, interest_rate=0, minimum_payment=100),
        ]
        result = calculate_debt_payoff_multiple(debts, 100)
        assert result.months == 10

    def test_avalanche_pays_less_interest(self):
        debts = [
            Debt(balance=1000, interest_rate=0.05, minimum_payment=25),
            Debt(balance=1000, interest_rate=0.25, minimum_payment=25),
        ]
        given = calculate_debt_payoff_multiple(debts, 200, strategy="given")
        avalanche = calculate_debt_payoff_multiple(debts, 200, strategy="avalanche")
        assert avalanche.total_interest < given.total_interest
        assert not given.truncated and not avalanche.truncated

    def test_stops_at_cap(self, caplog):
        """A payment far below the interest accrued terminates at the cap."""
        debts = [Debt(balance=1_000_000, interest_rate=0.25, minimum_payment=10)]

        with caplog.at_level(logging.WARNING):
            result = calculate_debt_payoff_multiple(debts, 100)

        assert result.months == MAX_PAYOFF_MONTHS == 600
        assert result.truncated
        assert result.remaining_balance > 1_000_000
        assert result.total_paid == 100 * 600
        assert "stopped at 600 months" in caplog.text

    def test_custom_cap(self):
        debts = [Debt(balance=10_000, interest_rate=0.1, minimum_payment=10)]
        result = calculate_debt_payoff_multiple(debts, 100, max_months=12)
        assert result.months == 12
        assert result.truncated

    def test_invalid_cap_rejected(self):
        with pytest.raises(InvalidInputError):
            calculate_debt_payoff_multiple([], 100, max_months=0)

    def test_negative_balance_rejected_by_model(self):
        with pytest.raises(ValueError):
            Debt(balance=-1, interest_rate=0.1, minimum_payment=10)
