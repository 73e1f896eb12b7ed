"""
Domain Models for the Revenue Recognition Engine

These dataclasses provide type-safe representations of all business entities.
All monetary values and rates use Decimal for precision.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

UNKNOWN_BILLING_COMPANY = "(unknown billing company)"

# Currency-sane bounds: up to 10^15 units, 6 decimal places
MAX_MAGNITUDE = 15
PLACES = Decimal("0.000001")


def to_decimal(value) -> Decimal:
    """Parse a numeric input, treating blank, malformed or out-of-range values as zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not result.is_finite() or result.adjusted() > MAX_MAGNITUDE:
        return Decimal("0")
    if result.as_tuple().exponent < PLACES.as_tuple().exponent:
        return result.quantize(PLACES, rounding=ROUND_HALF_UP)
    return result


def to_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _pick(data: dict, snake: str, camel: str, default=None):
    # Front-end payloads use camelCase keys
    return data.get(snake, data.get(camel, default))


# =============================================================================
# INPUT MODELS
# =============================================================================


@dataclass(frozen=True)
class Order:
    """A sales order tying an ad account to a client and a billing company."""

    id: str
    account_id: str
    media: str
    billing_company: str = ""
    client_name: str = ""
    start_date: str = ""
    end_date: str = ""
    budget: Decimal = Decimal("0")
    adjustment: Decimal = Decimal("0")

    @property
    def group_key(self) -> str:
        """Billing company used for grouping, with the placeholder for blanks."""
        return self.billing_company or UNKNOWN_BILLING_COMPANY

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        return cls(
            id=to_text(data.get("id")),
            account_id=to_text(_pick(data, "account_id", "accountId")),
            media=to_text(data.get("media")),
            billing_company=to_text(_pick(data, "billing_company", "billingCompany")),
            client_name=to_text(_pick(data, "client_name", "clientName")),
            start_date=to_text(_pick(data, "start_date", "startDate")),
            end_date=to_text(_pick(data, "end_date", "endDate")),
            budget=to_decimal(data.get("budget")),
            adjustment=to_decimal(data.get("adjustment")),
        )


@dataclass(frozen=True)
class CommissionRate:
    """Rate master entry: commission percentage for an (account, media) pair."""

    id: str
    account_id: str
    media: str
    rate: Decimal  # percentage, 20 means 20%

    @property
    def key(self) -> tuple[str, str]:
        return (self.account_id, self.media)

    @classmethod
    def from_dict(cls, data: dict) -> "CommissionRate":
        return cls(
            id=to_text(data.get("id")),
            account_id=to_text(_pick(data, "account_id", "accountId")),
            media=to_text(data.get("media")),
            rate=to_decimal(data.get("rate")),
        )


@dataclass(frozen=True)
class SpendRecord:
    """Media spend recorded for one account in one month."""

    id: str
    month: str  # "YYYY-MM"
    account_id: str
    spend_amount: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "SpendRecord":
        return cls(
            id=to_text(data.get("id")),
            month=to_text(data.get("month")),
            account_id=to_text(_pick(data, "account_id", "accountId")),
            spend_amount=to_decimal(_pick(data, "spend_amount", "spendAmount")),
        )


@dataclass(frozen=True)
class ReportInput:
    """Immutable snapshot of the three datasets a report is computed from."""

    orders: tuple[Order, ...] = ()
    rates: tuple[CommissionRate, ...] = ()
    spend_records: tuple[SpendRecord, ...] = ()

    @classmethod
    def of(cls, orders=(), rates=(), spend_records=()) -> "ReportInput":
        return cls(
            orders=tuple(orders),
            rates=tuple(rates),
            spend_records=tuple(spend_records),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "ReportInput":
        rates = data.get("commission_rates", data.get("rates")) or []
        spend = data.get("spend_records", data.get("spend")) or []
        return cls(
            orders=tuple(Order.from_dict(o) for o in data.get("orders") or []),
            rates=tuple(CommissionRate.from_dict(r) for r in rates),
            spend_records=tuple(SpendRecord.from_dict(s) for s in spend),
        )


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass
class DetailLine:
    """Revenue recognized for one spend record that joined to an order."""

    month: str
    account: str
    media: str
    spend: Decimal
    rate: Decimal
    commission: Decimal
    adjustment_applied: Decimal
    total_revenue: Decimal


@dataclass
class BillingCompanyGroup:
    """Monthly revenue and detail lines for one billing company."""

    name: str
    monthly_totals: dict[str, Decimal] = field(default_factory=dict)
    details: list[DetailLine] = field(default_factory=list)

    @property
    def row_total(self) -> Decimal:
        return sum(self.monthly_totals.values(), Decimal("0"))


@dataclass
class RevenueReport:
    """The aggregator's output: every month seen plus groups in encounter order."""

    all_months: list[str] = field(default_factory=list)
    groups: dict[str, BillingCompanyGroup] = field(default_factory=dict)


@dataclass
class ReportTotals:
    """Row, column and grand totals of a report."""

    row_totals: dict[str, Decimal] = field(default_factory=dict)
    column_totals: dict[str, Decimal] = field(default_factory=dict)
    grand_total_by_rows: Decimal = Decimal("0")
    grand_total_by_columns: Decimal = Decimal("0")

    @property
    def grand_total(self) -> Decimal:
        return self.grand_total_by_rows

    @property
    def is_balanced(self) -> bool:
        return self.grand_total_by_rows == self.grand_total_by_columns


@dataclass
class OrderRateView:
    """Rate applied to an order and whether a rate master backs it."""

    order_id: str
    account_id: str
    media: str
    rate: Decimal
    has_rate_master: bool


@dataclass
class SpendPreview:
    """Estimated commission for a spend record before aggregation."""

    record_id: str
    month: str
    account_id: str
    spend_amount: Decimal
    has_order: bool
    media: str | None = None
    rate: Decimal = Decimal("0")
    estimated_commission: Decimal = Decimal("0")


@dataclass
class SpendSummary:
    record_count: int = 0
    total_spend: Decimal = Decimal("0")


@dataclass
class DataQualityWarning:
    """Informational notice about incomplete or ambiguous master data."""

    code: str
    message: str
    record_id: str = ""


@dataclass
class LinkageInspection:
    """Results of the linkage inspection step."""

    order_rates: list[OrderRateView] = field(default_factory=list)
    spend_previews: list[SpendPreview] = field(default_factory=list)
    spend_summary: SpendSummary = field(default_factory=SpendSummary)
    warnings: list[DataQualityWarning] = field(default_factory=list)


@dataclass
class ProcessingContext:
    """
    Holds all intermediate state during report processing.
    This is the "bag" that flows through the pipeline.
    """

    # Input (immutable during processing)
    snapshot: ReportInput

    # Step results (populated as we go)
    report: RevenueReport = field(default_factory=RevenueReport)
    totals: ReportTotals = field(default_factory=ReportTotals)
    linkage: LinkageInspection = field(default_factory=LinkageInspection)


@dataclass
class ReportResult:
    """Final output of report processing."""

    report: dict
    totals: dict
    details: list
    spend_summary: dict
    spend_previews: list
    order_rates: list
    warnings: list
