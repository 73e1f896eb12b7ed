"""
First-Month Adjustment

An order's one-time adjustment is recognized in the earliest month that has
recorded spend for the order's account, and in no other month.
"""

from decimal import Decimal
from typing import Iterable

from ..models import Order, SpendRecord


class AdjustmentApplicator:
    """Applies order adjustments to the first spend month of each account."""

    def __init__(self, spend_records: Iterable[SpendRecord] = ()):
        # Earliest month per account across the whole spend dataset
        self._first_months: dict[str, str] = {}
        for record in spend_records:
            current = self._first_months.get(record.account_id)
            if current is None or record.month < current:
                self._first_months[record.account_id] = record.month

    def first_month(self, account_id: str) -> str | None:
        """Return the earliest month with spend for the account, if any."""
        return self._first_months.get(account_id)

    def apply(self, record: SpendRecord, order: Order) -> Decimal:
        """Return the adjustment recognized for this spend record."""
        if record.month == self.first_month(record.account_id):
            return order.adjustment
        return Decimal("0")

