"""
Unit Tests for Commission Calculator

Tests verify commission = floor(spend × rate / 100).
"""

from decimal import Decimal

import pytest

from revenue_engine.calculators.commission import CommissionCalculator


class TestCommissionCalculator:
    """Test commission calculation on monthly spend."""

    @pytest.fixture
    def calculator(self):
        return CommissionCalculator()

    def test_whole_result(self, calculator):
        """150,000 × 20% = 30,000"""
        assert calculator.calculate(Decimal("150000"), Decimal("20")) == Decimal("30000")

    def test_fraction_is_floored(self, calculator):
        """1,001 × 15% = 150.15 → 150"""
        assert calculator.calculate(Decimal("1001"), Decimal("15")) == Decimal("150")

    def test_just_below_next_unit_is_floored(self, calculator):
        """999 × 10% = 99.9 → 99"""
        assert calculator.calculate(Decimal("999"), Decimal("10")) == Decimal("99")

    def test_fractional_rate(self, calculator):
        """200,000 × 12.5% = 25,000"""
        assert calculator.calculate(Decimal("200000"), Decimal("12.5")) == Decimal("25000")

    def test_rate_above_one_hundred_percent(self, calculator):
        """1,000 × 150% = 1,500"""
        assert calculator.calculate(Decimal("1000"), Decimal("150")) == Decimal("1500")

    def test_zero_rate(self, calculator):
        assert calculator.calculate(Decimal("500000"), Decimal("0")) == Decimal("0")

    def test_zero_spend(self, calculator):
        assert calculator.calculate(Decimal("0"), Decimal("20")) == Decimal("0")

    def test_negative_rate_never_produces_negative_commission(self, calculator):
        assert calculator.calculate(Decimal("1000"), Decimal("-5")) == Decimal("0")

    def test_negative_spend_never_produces_negative_commission(self, calculator):
        assert calculator.calculate(Decimal("-1000"), Decimal("20")) == Decimal("0")

    def test_result_is_integral(self, calculator):
        result = calculator.calculate(Decimal("123457"), Decimal("17"))
        assert result == result.to_integral_value()
        assert result == Decimal("20987")
