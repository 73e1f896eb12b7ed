"""
Output Builder

Constructs the final API response from processing context.
"""

from decimal import Decimal

from .models import (
    BillingCompanyGroup, DataQualityWarning, DetailLine, OrderRateView,
    ProcessingContext, ReportResult, SpendPreview
)


def to_amount(value: Decimal) -> int | float:
    """Convert Decimal to int for whole amounts, else float with 2 decimal places."""
    if value == value.to_integral_value():
        return int(value)
    return round(float(value), 2)


class OutputBuilder:
    """Builds the final output response."""

    def build(self, ctx: ProcessingContext) -> ReportResult:
        """Construct the complete report result from processing context."""
        return ReportResult(
            report=self._build_report(ctx),
            totals=self._build_totals(ctx),
            details=self._build_detail_listing(ctx),
            spend_summary=self._build_spend_summary(ctx),
            spend_previews=[self._spend_preview(p) for p in ctx.linkage.spend_previews],
            order_rates=[self._order_rate(v) for v in ctx.linkage.order_rates],
            warnings=[self._warning(w) for w in ctx.linkage.warnings],
        )

    def _build_report(self, ctx: ProcessingContext) -> dict:
        """Report grid: every month, and each billing company in encounter order."""
        report = ctx.report
        return {
            "all_months": list(report.all_months),
            "groups": {name: self._group(group) for name, group in report.groups.items()},
        }

    def _build_totals(self, ctx: ProcessingContext) -> dict:
        totals = ctx.totals
        return {
            "row_totals": {name: to_amount(v) for name, v in totals.row_totals.items()},
            "column_totals": {month: to_amount(v) for month, v in totals.column_totals.items()},
            "grand_total": to_amount(totals.grand_total),
            "balanced": totals.is_balanced,
        }

    def _build_detail_listing(self, ctx: ProcessingContext) -> list:
        """All detail lines across companies, tagged with their billing company."""
        listing = []
        for name, group in ctx.report.groups.items():
            for line in group.details:
                listing.append({"billing_company": name, **self._detail(line)})
        return listing

    def _build_spend_summary(self, ctx: ProcessingContext) -> dict:
        summary = ctx.linkage.spend_summary
        return {
            "record_count": summary.record_count,
            "total_spend": to_amount(summary.total_spend),
        }

    def _group(self, group: BillingCompanyGroup) -> dict:
        return {
            "name": group.name,
            "monthly_totals": {month: to_amount(v) for month, v in group.monthly_totals.items()},
            "row_total": to_amount(group.row_total),
            "details": [self._detail(line) for line in group.details],
        }

    def _detail(self, line: DetailLine) -> dict:
        return {
            "month": line.month,
            "account": line.account,
            "media": line.media,
            "spend": to_amount(line.spend),
            "rate": to_amount(line.rate),
            "commission": to_amount(line.commission),
            "adjustment_applied": to_amount(line.adjustment_applied),
            "total_revenue": to_amount(line.total_revenue),
        }

    def _spend_preview(self, preview: SpendPreview) -> dict:
        return {
            "id": preview.record_id,
            "month": preview.month,
            "account_id": preview.account_id,
            "spend_amount": to_amount(preview.spend_amount),
            "has_order": preview.has_order,
            "media": preview.media,
            "rate": to_amount(preview.rate),
            "estimated_commission": to_amount(preview.estimated_commission),
        }

    def _order_rate(self, view: OrderRateView) -> dict:
        return {
            "order_id": view.order_id,
            "account_id": view.account_id,
            "media": view.media,
            "rate": to_amount(view.rate),
            "has_rate_master": view.has_rate_master,
        }

    def _warning(self, warning: DataQualityWarning) -> dict:
        return {
            "code": warning.code,
            "message": warning.message,
            "record_id": warning.record_id,
        }
