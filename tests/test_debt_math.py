"""Tests for the amortization helpers."""

import math

import pytest

from balance_compartido.utils.debt_math import (
    accrue_monthly_interest,
    calculate_monthly_payment,
    calculate_remaining_months,
    round_currency,
    to_monthly_rate,
)


class TestRoundCurrency:
    @pytest.mark.parametrize("value", [0, 1.005, 2.675, 1010.0000000000001, 123.456789, 0.1 + 0.2, 99999.995])
    def test_idempotent(self, value):
        once = round_currency(value)
        assert round_currency(once) == once

    def test_half_up_compensates_binary_representation(self):
        # 1.005 is stored as 1.00499999...; the epsilon pushes it back up
        assert round_currency(1.005) == 1.01

    def test_removes_float_noise(self):
        assert round_currency(1000 * 1.01) == 1010.0
        assert round_currency(0.1 + 0.2) == 0.3


class TestMonthlyRate:
    @pytest.mark.parametrize("rate", [None, 0, 0.0, -5, float("nan")])
    def test_missing_or_non_positive_rate_is_zero(self, rate):
        assert to_monthly_rate(rate) == 0

    def test_converts_annual_percent(self):
        assert to_monthly_rate(12) == pytest.approx(0.01)
        assert to_monthly_rate(24) == pytest.approx(0.02)

    @pytest.mark.parametrize("rate", [None, 0, -3])
    def test_no_accrual_without_rate(self, rate):
        assert accrue_monthly_interest(100.456, rate) == round_currency(100.456)

    def test_accrues_one_month(self):
        assert accrue_monthly_interest(1000, 12) == 1010.0
        assert accrue_monthly_interest(120000, 6.5) == 120650.0


class TestRemainingMonths:
    def test_payment_below_interest_has_no_schedule(self):
        # 2% monthly on 10000 is 200, far above the payment
        assert calculate_remaining_months(10000, 10, 24) is None

    def test_payment_equal_to_interest_has_no_schedule(self):
        assert calculate_remaining_months(10000, 100, 12) is None

    @pytest.mark.parametrize("balance,payment", [(0, 100), (-10, 100), (1000, 0), (1000, -5)])
    def test_invalid_inputs(self, balance, payment):
        assert calculate_remaining_months(balance, payment, 12) is None

    def test_interest_free_is_simple_division(self):
        assert calculate_remaining_months(1200, 100, None) == 12
        assert calculate_remaining_months(1250, 100, 0) == 12.5

    @pytest.mark.parametrize(
        "principal,rate,months",
        [(12000, 12, 12), (120000, 6.5, 60), (18000, 5.2, 24), (4200, 28, 18), (500, 0, 7)],
    )
    def test_round_trip_with_monthly_payment(self, principal, rate, months):
        payment = calculate_monthly_payment(principal, rate, months)
        remaining = calculate_remaining_months(principal, payment, rate)
        assert remaining is not None
        assert abs(remaining - months) <= 1


class TestMonthlyPayment:
    @pytest.mark.parametrize("principal,months", [(0, 12), (-100, 12), (1000, 0), (1000, -1)])
    def test_no_payment_for_invalid_inputs(self, principal, months):
        assert calculate_monthly_payment(principal, 12, months) == 0

    def test_straight_line_without_interest(self):
        assert calculate_monthly_payment(1200, None, 12) == 100.0
        assert calculate_monthly_payment(1000, 0, 3) == 333.33

    def test_annuity_payment(self):
        assert calculate_monthly_payment(12000, 12, 12) == 1066.19

    def test_degenerate_factor_falls_back_to_straight_line(self):
        # The monthly rate is too small to move (1 + r) away from 1.0
        assert calculate_monthly_payment(1200, 1e-15, 12) == 100.0

    def test_result_is_finite_and_rounded(self):
        payment = calculate_monthly_payment(18000, 5.2, 24)
        assert math.isfinite(payment)
        assert round_currency(payment) == payment
