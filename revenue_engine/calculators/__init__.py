"""
Calculators Package

Provides all calculation components for revenue report processing.
"""

from .adjustment import AdjustmentApplicator
from .aggregator import RevenueAggregator, compute_report
from .commission import CommissionCalculator
from .linkage import LinkageInspector
from .rate import RateResolver, resolve_rate
from .totals import TotalsCalculator

__all__ = [
    "RateResolver",
    "CommissionCalculator",
    "AdjustmentApplicator",
    "RevenueAggregator",
    "TotalsCalculator",
    "LinkageInspector",
    "compute_report",
    "resolve_rate",
]
