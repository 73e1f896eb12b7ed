from flask import Flask, request, jsonify
from flask_cors import CORS
from revenue_engine import ReportProcessor, CommissionRate
from revenue_engine.models import to_text
from revenue_engine.calculators import RateResolver
from revenue_engine.output import to_amount
from revenue_engine.validators import InputValidator
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Billing companies and months must keep their report order
app.json.sort_keys = False
app.json.ensure_ascii = False

# Enable CORS for all routes (the editing front end calls the API directly)
CORS(app)

# Initialize the report processor
processor = ReportProcessor()
validator = InputValidator()


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Revenue Recognition API",
        "version": "1.0",
        "endpoints": {
            "compute_report": "/compute_report [POST]",
            "resolve_rate": "/resolve_rate [POST]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/compute_report", methods=["POST"])
def compute_report():
    """
    Compute the billing-company monthly revenue report
    """
    try:
        # Get input data
        input_data = request.get_json(force=True, silent=True)

        if input_data is None:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        # Log request
        logger.info(f"Computing report: {_describe(input_data)}")

        # Process through engine
        result = processor.process_from_dict(input_data)

        logger.info(f"Report computed: {len(result['report']['groups'])} billing companies")

        return jsonify(result), 200

    except ValueError as e:
        # Payload shape errors from engine
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": str(e),
            "status": "failed"
        }), 500


@app.route("/resolve_rate", methods=["POST"])
def resolve_rate():
    """
    Look up the commission rate for an account and media pair
    """
    try:
        input_data = request.get_json(force=True, silent=True)

        if input_data is None:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        validator.validate(input_data)
        rates = input_data.get("commission_rates", input_data.get("rates")) or []
        resolver = RateResolver(CommissionRate.from_dict(r) for r in rates)

        account_id = to_text(input_data.get("account_id", input_data.get("accountId")))
        media = to_text(input_data.get("media"))
        rate = resolver.resolve(account_id, media)

        return jsonify({
            "account_id": account_id,
            "media": media,
            "rate": to_amount(rate),
            "has_rate_master": resolver.has_master(account_id, media)
        }), 200

    except ValueError as e:
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        logger.error(f"Rate lookup error: {str(e)}", exc_info=True)
        return jsonify({
            "error": str(e),
            "status": "failed"
        }), 500


def _describe(input_data) -> str:
    """Dataset sizes for request logging."""
    if not isinstance(input_data, dict):
        return "invalid payload"
    sizes = []
    for key in ("orders", "commission_rates", "spend_records"):
        entries = input_data.get(key)
        sizes.append(f"{key}={len(entries) if isinstance(entries, list) else 0}")
    return ", ".join(sizes)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
