"""
AWS Lambda handler for the Revenue Recognition API.

This is the production entry point for AWS Lambda deployments.
For local development, use main.py (Flask app) instead.
"""

import base64
import json
import logging
import os

from revenue_engine import CommissionRate, ReportProcessor
from revenue_engine.calculators import RateResolver
from revenue_engine.models import to_text
from revenue_engine.output import to_amount

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Environment (dev, staging, prod)
ENVIRONMENT = os.environ.get("ENVIRONMENT", "dev")

# Initialize processor (reused across warm invocations)
processor = ReportProcessor()

# CORS headers for API Gateway
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def lambda_handler(event, context):
    """
    Main Lambda entry point.

    Handles API Gateway events for:
    - GET /health
    - GET /api
    - POST /compute_report
    - POST /resolve_rate
    - OPTIONS (CORS preflight)
    """
    # Handle CORS preflight
    http_method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    if http_method == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    # Get path (supports both REST API and HTTP API formats)
    path = event.get("path") or event.get("rawPath", "")

    # Route to appropriate handler
    if path == "/health" and http_method == "GET":
        return handle_health()
    elif path == "/api" and http_method == "GET":
        return handle_api_info()
    elif path == "/compute_report" and http_method == "POST":
        return handle_compute_report(event)
    elif path == "/resolve_rate" and http_method == "POST":
        return handle_resolve_rate(event)
    else:
        return _response(404, {"error": "Not found", "path": path})


def handle_health():
    """Health check endpoint."""
    return _response(200, {"status": "healthy", "environment": ENVIRONMENT})


def handle_api_info():
    """API information endpoint."""
    return _response(
        200,
        {
            "status": "ok",
            "message": "Revenue Recognition API",
            "version": "1.0",
            "environment": ENVIRONMENT,
            "runtime": "AWS Lambda",
            "endpoints": {
                "compute_report": "/compute_report [POST]",
                "resolve_rate": "/resolve_rate [POST]",
                "health": "/health [GET]",
            },
        },
    )


def handle_compute_report(event):
    """Compute the billing-company monthly revenue report."""
    try:
        input_data = _parse_body(event)
        if input_data is None:
            return _response(400, {"error": "No input data provided", "status": "failed"})

        # Log request
        logger.info(f"Computing report in {ENVIRONMENT}")

        # Process through engine
        result = processor.process_from_dict(input_data)

        logger.info(f"Report computed: {len(result['report']['groups'])} billing companies")

        return _response(200, result)

    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {str(e)}")
        return _response(400, {"error": f"Invalid JSON: {str(e)}", "status": "failed"})

    except (ValueError, KeyError, TypeError) as e:
        # Payload shape errors from engine
        logger.error(f"Validation error: {str(e)}")
        return _response(400, {"error": f"Validation error: {str(e)}", "status": "validation_failed"})

    except Exception as e:
        # Unexpected errors - log details but return generic message to avoid information disclosure
        logger.error(f"Unexpected processing error: {str(e)}", exc_info=True)
        return _response(500, {"error": "An unexpected error occurred during processing", "status": "failed"})


def handle_resolve_rate(event):
    """Look up the commission rate for an account and media pair."""
    try:
        input_data = _parse_body(event)
        if input_data is None:
            return _response(400, {"error": "No input data provided", "status": "failed"})

        processor.validator.validate(input_data)
        rates = input_data.get("commission_rates", input_data.get("rates")) or []
        resolver = RateResolver(CommissionRate.from_dict(r) for r in rates)

        account_id = to_text(input_data.get("account_id", input_data.get("accountId")))
        media = to_text(input_data.get("media"))

        return _response(
            200,
            {
                "account_id": account_id,
                "media": media,
                "rate": to_amount(resolver.resolve(account_id, media)),
                "has_rate_master": resolver.has_master(account_id, media),
            },
        )

    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {str(e)}")
        return _response(400, {"error": f"Invalid JSON: {str(e)}", "status": "failed"})

    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Validation error: {str(e)}")
        return _response(400, {"error": f"Validation error: {str(e)}", "status": "validation_failed"})

    except Exception as e:
        logger.error(f"Unexpected rate lookup error: {str(e)}", exc_info=True)
        return _response(500, {"error": "An unexpected error occurred during processing", "status": "failed"})


def _parse_body(event):
    """Decode the request body; None when the body is empty."""
    body = event.get("body", "")
    if not isinstance(body, str):
        return body
    if not body:
        return None
    # Handle base64 encoded body (API Gateway)
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


def _response(status_code: int, payload) -> dict:
    return {
        "statusCode": status_code,
        "headers": CORS_HEADERS,
        "body": json.dumps(payload, ensure_ascii=False),
    }
