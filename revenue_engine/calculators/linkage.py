"""
Linkage Inspector

Shows how the three datasets link up: which orders have a rate master,
which spend records find an order, and where the master data is incomplete
or ambiguous. Everything here is informational and never blocks a report.
"""

from decimal import Decimal

from ..models import (
    DataQualityWarning, LinkageInspection, OrderRateView, ReportInput,
    SpendPreview, SpendSummary
)
from .commission import CommissionCalculator
from .rate import RateResolver


class LinkageInspector:
    """Inspects the links between orders, rate masters and spend records."""

    def __init__(self):
        self.commission_calculator = CommissionCalculator()

    def inspect(self, snapshot: ReportInput) -> LinkageInspection:
        resolver = RateResolver(snapshot.rates)
        return LinkageInspection(
            order_rates=self._order_rates(snapshot, resolver),
            spend_previews=self._spend_previews(snapshot, resolver),
            spend_summary=self._spend_summary(snapshot),
            warnings=self._warnings(snapshot, resolver),
        )

    def _order_rates(self, snapshot: ReportInput, resolver: RateResolver) -> list[OrderRateView]:
        return [
            OrderRateView(
                order_id=order.id,
                account_id=order.account_id,
                media=order.media,
                rate=resolver.resolve(order.account_id, order.media),
                has_rate_master=resolver.has_master(order.account_id, order.media),
            )
            for order in snapshot.orders
        ]

    def _spend_previews(self, snapshot: ReportInput, resolver: RateResolver) -> list[SpendPreview]:
        orders_by_account = {}
        for order in snapshot.orders:
            orders_by_account.setdefault(order.account_id, order)

        previews = []
        for record in snapshot.spend_records:
            order = orders_by_account.get(record.account_id)
            if order is None:
                previews.append(SpendPreview(
                    record_id=record.id,
                    month=record.month,
                    account_id=record.account_id,
                    spend_amount=record.spend_amount,
                    has_order=False,
                ))
                continue

            rate = resolver.resolve(order.account_id, order.media)
            previews.append(SpendPreview(
                record_id=record.id,
                month=record.month,
                account_id=record.account_id,
                spend_amount=record.spend_amount,
                has_order=True,
                media=order.media,
                rate=rate,
                estimated_commission=self.commission_calculator.calculate(record.spend_amount, rate),
            ))
        return previews

    def _spend_summary(self, snapshot: ReportInput) -> SpendSummary:
        return SpendSummary(
            record_count=len(snapshot.spend_records),
            total_spend=sum((r.spend_amount for r in snapshot.spend_records), Decimal("0")),
        )

    def _warnings(self, snapshot: ReportInput, resolver: RateResolver) -> list[DataQualityWarning]:
        warnings = []

        seen_accounts: dict[str, str] = {}
        for order in snapshot.orders:
            if order.account_id in seen_accounts:
                warnings.append(DataQualityWarning(
                    code="duplicate_order_account",
                    message=(
                        f"Order {order.id!r} shares account {order.account_id!r} with order "
                        f"{seen_accounts[order.account_id]!r}; the first order is used"
                    ),
                    record_id=order.id,
                ))
                continue
            seen_accounts[order.account_id] = order.id

            if not order.billing_company:
                warnings.append(DataQualityWarning(
                    code="missing_billing_company",
                    message=f"Order {order.id!r} has no billing company; revenue is grouped as unknown",
                    record_id=order.id,
                ))
            if not resolver.has_master(order.account_id, order.media):
                warnings.append(DataQualityWarning(
                    code="missing_rate_master",
                    message=(
                        f"No commission rate for account {order.account_id!r} on "
                        f"{order.media!r}; a 0% rate is applied"
                    ),
                    record_id=order.id,
                ))

        seen_pairs: dict[tuple[str, str], str] = {}
        for entry in snapshot.rates:
            if entry.key in seen_pairs:
                warnings.append(DataQualityWarning(
                    code="duplicate_rate_pair",
                    message=(
                        f"Rate {entry.id!r} duplicates account {entry.account_id!r} on "
                        f"{entry.media!r}; rate {seen_pairs[entry.key]!r} is used"
                    ),
                    record_id=entry.id,
                ))
                continue
            seen_pairs[entry.key] = entry.id

        for record in snapshot.spend_records:
            if record.account_id not in seen_accounts:
                warnings.append(DataQualityWarning(
                    code="orphan_spend_record",
                    message=(
                        f"Spend record {record.id!r} for account {record.account_id!r} "
                        f"has no order and is left out of the report"
                    ),
                    record_id=record.id,
                ))

        return warnings
