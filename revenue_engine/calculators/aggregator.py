"""
Revenue Aggregator

Joins spend records to orders, prices them against the rate master and
groups recognized revenue by billing company and month.
"""

import logging
from decimal import Decimal
from typing import Iterable

from ..models import (
    BillingCompanyGroup, CommissionRate, DetailLine, Order, RevenueReport,
    SpendRecord
)
from .adjustment import AdjustmentApplicator
from .commission import CommissionCalculator
from .rate import RateResolver

logger = logging.getLogger(__name__)


class RevenueAggregator:
    """Builds the billing-company monthly revenue report."""

    def __init__(self):
        self.commission_calculator = CommissionCalculator()

    def aggregate(
        self,
        orders: Iterable[Order],
        rates: Iterable[CommissionRate],
        spend_records: Iterable[SpendRecord],
    ) -> RevenueReport:
        """
        Compute recognized revenue for every spend record that links to an order.

        For each spend record, in input order:
        1. Find the order for its account (first match). Records without an
           order are skipped.
        2. Resolve the rate from the ORDER's account and media.
        3. Commission = floor(spend × rate / 100)
        4. Add the order's adjustment if this is the account's first spend month.
        5. Revenue = spend + commission + adjustment
        6. Accumulate into the billing company's monthly totals.

        Never raises: missing orders, rates and names degrade to skipped
        records, 0% rates and the placeholder company.
        """
        spend_records = list(spend_records)
        orders_by_account = self._index_orders(orders)
        resolver = RateResolver(rates)
        adjustments = AdjustmentApplicator(spend_records)

        report = RevenueReport(all_months=self.collect_months(spend_records))

        for record in spend_records:
            order = orders_by_account.get(record.account_id)
            if order is None:
                logger.debug(f"Skipping spend record {record.id!r}: no order for account {record.account_id!r}")
                continue

            group = self._get_group(report, order.group_key)

            rate = resolver.resolve(order.account_id, order.media)
            commission = self.commission_calculator.calculate(record.spend_amount, rate)
            adjustment = adjustments.apply(record, order)
            total = record.spend_amount + commission + adjustment

            group.monthly_totals[record.month] += total
            group.details.append(DetailLine(
                month=record.month,
                account=order.account_id,
                media=order.media,
                spend=record.spend_amount,
                rate=rate,
                commission=commission,
                adjustment_applied=adjustment,
                total_revenue=total,
            ))

        logger.debug(
            f"Aggregated {len(spend_records)} spend records into "
            f"{len(report.groups)} billing companies over {len(report.all_months)} months"
        )
        return report

    @staticmethod
    def collect_months(spend_records: Iterable[SpendRecord]) -> list[str]:
        """Sorted distinct months across all spend records."""
        return sorted({record.month for record in spend_records})

    @staticmethod
    def _index_orders(orders: Iterable[Order]) -> dict[str, Order]:
        index: dict[str, Order] = {}
        for order in orders:
            index.setdefault(order.account_id, order)
        return index

    @staticmethod
    def _get_group(report: RevenueReport, name: str) -> BillingCompanyGroup:
        group = report.groups.get(name)
        if group is None:
            group = BillingCompanyGroup(
                name=name,
                monthly_totals={month: Decimal("0") for month in report.all_months},
            )
            report.groups[name] = group
        return group


def compute_report(
    orders: Iterable[Order],
    rates: Iterable[CommissionRate],
    spend_records: Iterable[SpendRecord],
) -> RevenueReport:
    """Compute the revenue report for a snapshot of the three datasets."""
    return RevenueAggregator().aggregate(orders, rates, spend_records)
