"""
REVENUE RECOGNITION ENGINE
Monthly recognized revenue by billing company
"""

from .calculators import compute_report, resolve_rate
from .models import (
    CommissionRate, Order, ReportInput, ReportResult, RevenueReport,
    SpendRecord, UNKNOWN_BILLING_COMPANY
)
from .processor import ReportProcessor

__all__ = [
    'ReportProcessor',
    'ReportInput',
    'ReportResult',
    'RevenueReport',
    'Order',
    'CommissionRate',
    'SpendRecord',
    'UNKNOWN_BILLING_COMPANY',
    'compute_report',
    'resolve_rate',
]
