"""
Unit Tests for the First-Month Adjustment

Tests verify the adjustment lands only in an account's earliest spend month.
"""

from decimal import Decimal

import pytest

from revenue_engine.calculators.adjustment import AdjustmentApplicator
from revenue_engine.models import Order, SpendRecord


def first_spend_month(account_id, spend_records):
    """Earliest month of the account by full scan over every spend record."""
    months = [r.month for r in spend_records if r.account_id == account_id]
    return min(months) if months else None


def make_spend(month, account_id="ACC-001", amount=100000, record_id=None):
    return SpendRecord(
        id=record_id or f"{account_id}-{month}",
        month=month,
        account_id=account_id,
        spend_amount=Decimal(str(amount)),
    )


class TestFirstMonth:
    """Test the per-account earliest month index."""

    def test_earliest_month_regardless_of_input_order(self):
        records = [make_spend("2023-12"), make_spend("2023-10"), make_spend("2023-11")]
        assert AdjustmentApplicator(records).first_month("ACC-001") == "2023-10"

    def test_accounts_are_independent(self):
        records = [
            make_spend("2023-11", "ACC-001"),
            make_spend("2023-09", "ACC-002"),
            make_spend("2023-10", "ACC-001"),
        ]
        applicator = AdjustmentApplicator(records)

        assert applicator.first_month("ACC-001") == "2023-10"
        assert applicator.first_month("ACC-002") == "2023-09"

    def test_unknown_account(self):
        assert AdjustmentApplicator([make_spend("2023-10")]).first_month("ACC-404") is None

    def test_year_boundary_sorts_lexicographically(self):
        records = [make_spend("2024-01"), make_spend("2023-12")]
        assert AdjustmentApplicator(records).first_month("ACC-001") == "2023-12"

    def test_index_agrees_with_full_scan(self):
        records = [
            make_spend("2024-02", "ACC-003"),
            make_spend("2023-11", "ACC-001"),
            make_spend("2023-10", "ACC-003"),
            make_spend("2023-12", "ACC-002"),
            make_spend("2023-10", "ACC-001"),
            make_spend("2024-01", "ACC-002"),
        ]
        applicator = AdjustmentApplicator(records)

        for account_id in ["ACC-001", "ACC-002", "ACC-003", "ACC-404"]:
            assert applicator.first_month(account_id) == first_spend_month(account_id, records)


class TestApplyAdjustment:
    """Test which records receive the order's adjustment."""

    @pytest.fixture
    def order(self):
        return Order(id="1", account_id="ACC-001", media="Google", adjustment=Decimal("50000"))

    def test_only_first_month_receives_adjustment(self, order):
        m3, m1, m2 = make_spend("2024-01"), make_spend("2023-11"), make_spend("2023-12")
        applicator = AdjustmentApplicator([m3, m1, m2])

        assert applicator.apply(m1, order) == Decimal("50000")
        assert applicator.apply(m2, order) == Decimal("0")
        assert applicator.apply(m3, order) == Decimal("0")

    def test_two_records_in_first_month_both_receive_adjustment(self, order):
        """The rule is keyed on the month, so each first-month record gets it."""
        a = make_spend("2023-10", record_id="a")
        b = make_spend("2023-10", record_id="b")
        applicator = AdjustmentApplicator([a, b])

        assert applicator.apply(a, order) == Decimal("50000")
        assert applicator.apply(b, order) == Decimal("50000")

    def test_zero_adjustment(self):
        order = Order(id="1", account_id="ACC-001", media="Google")
        record = make_spend("2023-10")

        assert AdjustmentApplicator([record]).apply(record, order) == Decimal("0")

    def test_negative_adjustment_passes_through(self):
        order = Order(id="1", account_id="ACC-001", media="Google", adjustment=Decimal("-10000"))
        record = make_spend("2023-10")

        assert AdjustmentApplicator([record]).apply(record, order) == Decimal("-10000")
