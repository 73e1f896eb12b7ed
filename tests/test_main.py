"""Tests for the Flask API."""

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


class TestFlaskApi:
    """Test the Flask routes and responses."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy"}

    def test_api_info(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert "resolve_rate" in response.get_json()["endpoints"]

    def test_compute_report_keeps_group_order(self, client):
        """Billing companies come back in encounter order, not sorted."""
        payload = {
            "orders": [
                {"id": "1", "billingCompany": "Zeta", "accountId": "ACC-001", "media": "Google"},
                {"id": "2", "billingCompany": "Alpha", "accountId": "ACC-002", "media": "Google"},
            ],
            "spend_records": [
                {"id": "b1", "month": "2023-11", "accountId": "ACC-001", "spendAmount": 100},
                {"id": "b2", "month": "2023-10", "accountId": "ACC-002", "spendAmount": 200},
            ],
        }
        response = client.post("/compute_report", json=payload)

        assert response.status_code == 200
        body = response.get_json()
        assert body["report"]["all_months"] == ["2023-10", "2023-11"]
        assert body["totals"]["grand_total"] == 300
        assert response.get_data(as_text=True).index('"Zeta"') < response.get_data(as_text=True).index('"Alpha"')

    def test_compute_report_empty_object(self, client):
        response = client.post("/compute_report", json={})

        assert response.status_code == 200
        assert response.get_json()["report"]["groups"] == {}

    def test_compute_report_invalid_json(self, client):
        response = client.post("/compute_report", data="not json", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json()["status"] == "failed"

    def test_compute_report_validation_error(self, client):
        response = client.post("/compute_report", json={"orders": "ACC-001"})

        assert response.status_code == 400
        assert response.get_json()["status"] == "validation_failed"

    def test_resolve_rate(self, client):
        payload = {
            "accountId": "ACC-001",
            "media": "Google",
            "rates": [{"id": "m1", "accountId": "ACC-001", "media": "Google", "rate": 12.5}],
        }
        response = client.post("/resolve_rate", json=payload)

        assert response.status_code == 200
        assert response.get_json() == {
            "account_id": "ACC-001",
            "media": "Google",
            "rate": 12.5,
            "has_rate_master": True,
        }

    def test_resolve_rate_validation_error(self, client):
        response = client.post("/resolve_rate", json=["ACC-001"])

        assert response.status_code == 400

    def test_resolve_rate_null_account_is_blank(self, client):
        payload = {
            "account_id": None,
            "media": "Google",
            "rates": [{"id": "m1", "accountId": None, "media": "Google", "rate": 10}],
        }
        response = client.post("/resolve_rate", json=payload)

        assert response.status_code == 200
        body = response.get_json()
        assert body["account_id"] == ""
        assert body["rate"] == 10
        assert body["has_rate_master"] is True

    def test_resolve_rate_unexpected_error(self, client, monkeypatch):
        def broken_resolver(rates):
            raise RuntimeError("rate index unavailable")

        monkeypatch.setattr("main.RateResolver", broken_resolver)
        response = client.post("/resolve_rate", json={"accountId": "ACC-001", "media": "Google"})

        assert response.status_code == 500
        assert response.get_json() == {"error": "rate index unavailable", "status": "failed"}
