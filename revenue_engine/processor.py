"""
Report Processor - Main Orchestrator

Coordinates the revenue report pipeline through discrete, testable steps.
"""

import logging
from typing import Dict, Any

from .models import ProcessingContext, ReportInput, ReportResult
from .validators import InputValidator
from .calculators import (
    RevenueAggregator,
    TotalsCalculator,
    LinkageInspector
)
from .output import OutputBuilder

logger = logging.getLogger(__name__)


class ReportProcessor:
    """
    Main orchestrator for revenue report processing.

    Implements a clear pipeline pattern:
    1. Build Context
    2. Aggregate Revenue
    3. Calculate Totals
    4. Inspect Linkage
    5. Build Output

    The processor keeps no per-report state, so one instance can serve
    any number of reports.
    """

    def __init__(self):
        # Initialize all calculators
        self.validator = InputValidator()
        self.aggregator = RevenueAggregator()
        self.totals_calculator = TotalsCalculator()
        self.linkage_inspector = LinkageInspector()
        self.output_builder = OutputBuilder()

    def process(self, snapshot: ReportInput) -> ReportResult:
        """
        Process a snapshot of the three datasets through the complete pipeline.

        Args:
            snapshot: Immutable ReportInput

        Returns:
            ReportResult with the report, totals and linkage information
        """
        # Step 1: Build initial context
        ctx = ProcessingContext(snapshot=snapshot)

        # Step 2: Aggregate revenue by billing company and month
        ctx.report = self.aggregator.aggregate(
            snapshot.orders, snapshot.rates, snapshot.spend_records
        )

        # Step 3: Calculate row, column and grand totals
        ctx.totals = self.totals_calculator.calculate(ctx.report)

        # Step 4: Inspect how the datasets link up
        ctx.linkage = self.linkage_inspector.inspect(snapshot)

        logger.debug(
            f"Report computed: {len(ctx.report.groups)} billing companies, "
            f"{len(ctx.linkage.warnings)} data quality warnings"
        )

        # Step 5: Build output
        return self.output_builder.build(ctx)

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a report from raw dictionary input.

        Convenience method for API usage.
        """
        self.validator.validate(data)
        snapshot = ReportInput.from_dict(data)
        result = self.process(snapshot)
        return self._result_to_dict(result)

    def _result_to_dict(self, result: ReportResult) -> Dict[str, Any]:
        """Convert ReportResult to dictionary for API response."""
        return {
            "report": result.report,
            "totals": result.totals,
            "details": result.details,
            "spend_summary": result.spend_summary,
            "spend_previews": result.spend_previews,
            "order_rates": result.order_rates,
            "warnings": result.warnings,
        }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def process_report_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Process a report from Python dict and return Python dict.
    """
    processor = ReportProcessor()
    return processor.process_from_dict(input_data)


def process_report_from_json(json_input: str) -> str:
    """
    Process a report from JSON string input and return JSON string output.
    """
    import json

    try:
        input_data = json.loads(json_input)
        processor = ReportProcessor()
        result = processor.process_from_dict(input_data)
        return json.dumps(result, indent=2, ensure_ascii=False)

    except json.JSONDecodeError as e:
        error_response = {"error": f"Invalid JSON: {str(e)}", "status": "failed"}
        return json.dumps(error_response, indent=2)

    except ValueError as e:
        error_response = {"error": str(e), "status": "validation_failed"}
        return json.dumps(error_response, indent=2)

    except Exception as e:
        error_response = {"error": str(e), "status": "failed"}
        return json.dumps(error_response, indent=2)
