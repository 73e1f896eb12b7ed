"""
Commission Calculator

Calculates the agency commission earned on a month's media spend.
"""

from decimal import ROUND_FLOOR, Decimal


class CommissionCalculator:
    """Calculates commission as a percentage of spend, in whole currency units."""

    PERCENT = Decimal("100")

    def calculate(self, spend: Decimal, rate: Decimal) -> Decimal:
        """
        Calculate commission for a spend amount.

        Commission = floor(spend × rate / 100)

        Fractions are always rounded down, and the result is never negative.
        """
        commission = (spend * rate / self.PERCENT).to_integral_value(rounding=ROUND_FLOOR)
        if commission < 0:
            return Decimal("0")
        return commission
