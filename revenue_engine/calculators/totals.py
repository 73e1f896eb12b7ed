"""
Totals Calculator

Derives row, column and grand totals from a revenue report.
"""

from decimal import Decimal

from ..models import ReportTotals, RevenueReport


class TotalsCalculator:
    """Calculates report totals."""

    def calculate(self, report: RevenueReport) -> ReportTotals:
        """
        Row total    = sum of a company's monthly totals
        Column total = sum of a month's totals across companies
        Grand total  = sum of row totals, cross-checked against column totals
        """
        row_totals = {name: group.row_total for name, group in report.groups.items()}

        column_totals = {}
        for month in report.all_months:
            column_totals[month] = sum(
                (group.monthly_totals.get(month, Decimal("0")) for group in report.groups.values()),
                Decimal("0"),
            )

        return ReportTotals(
            row_totals=row_totals,
            column_totals=column_totals,
            grand_total_by_rows=sum(row_totals.values(), Decimal("0")),
            grand_total_by_columns=sum(column_totals.values(), Decimal("0")),
        )
