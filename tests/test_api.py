"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.http_server import app
from config import Settings


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestDescribeEndpoints:
    """Test description endpoints."""

    def test_describe_query(self, client):
        """Test describing an expression passed as a query parameter."""
        response = client.get("/api/v1/describe", params={"expression": "0 9 * * 1-5"})

        assert response.status_code == 200
        data = response.json()
        assert data["expression"] == "0 9 * * 1-5"
        assert data["scope"] == "full"
        assert data["description"] == "At 09:00, Monday through Friday"

    def test_describe_query_twelve_hour(self, client):
        """Test overriding the clock format per request."""
        response = client.get(
            "/api/v1/describe",
            params={"expression": "0 9 * * 1-5", "use_24_hour_format": "false"}
        )

        assert response.status_code == 200
        assert response.json()["description"] == "At 9:00AM, Monday through Friday"

    def test_describe_query_scope(self, client):
        """Test describing one part of an expression."""
        response = client.get(
            "/api/v1/describe",
            params={"expression": "0 0 10-12 * * ?", "scope": "hours"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["scope"] == "hours"
        assert data["description"] == "Between 10:00 and 12:59"

    def test_describe_invalid_expression(self, client):
        """Test invalid expressions are rejected with the failing field."""
        response = client.get("/api/v1/describe", params={"expression": "60 * * * *"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["field"] == "minute"
        assert "MINUTE" in detail["message"]

    def test_describe_too_few_parts(self, client):
        """Test whole-expression failures are tagged as such."""
        response = client.get("/api/v1/describe", params={"expression": "* * * *"})

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "expression"

    def test_describe_missing_expression(self, client):
        """Test the expression parameter is required."""
        response = client.get("/api/v1/describe")

        assert response.status_code == 422

    def test_describe_body(self, client):
        """Test describing an expression passed in the request body."""
        response = client.post("/api/v1/describe", json={
            "expression": "*/5 * * * *",
            "options": {"verbose": True}
        })

        assert response.status_code == 200
        assert response.json()["description"] == "Every 5 minutes, every hour, every day"

    def test_describe_body_without_raising(self, client):
        """Test errors come back as the description when not raising."""
        response = client.post("/api/v1/describe", json={
            "expression": "60 * * * *",
            "options": {"throw_on_parse_error": False}
        })

        assert response.status_code == 200
        assert response.json()["description"] == (
            "The expression describing the MINUTE field is not in a valid format"
        )

    def test_describe_body_unknown_scope(self, client):
        """Test unknown scopes are rejected by request validation."""
        response = client.post("/api/v1/describe", json={
            "expression": "* * * * *",
            "scope": "weekly"
        })

        assert response.status_code == 422

    def test_configured_defaults(self, client, monkeypatch):
        """Test the configured defaults apply when a request sets nothing."""
        monkeypatch.setenv("CRON_DESCRIBER_VERBOSE", "true")
        monkeypatch.setenv("CRON_DESCRIBER_USE_24_HOUR_FORMAT", "false")

        with patch("api.endpoints.settings", Settings()):
            response = client.get("/api/v1/describe", params={"expression": "*/5 9 * * *"})

        assert response.status_code == 200
        assert response.json()["description"] == (
            "Every 5 minutes, between 9:00AM and 9:59AM, every day"
        )


class TestValidateEndpoint:
    """Test the validation endpoint."""

    def test_validate_valid(self, client):
        """Test a valid expression returns its canonical fields."""
        response = client.post("/api/v1/validate", json={"expression": "0 0/5 14,18 * * ?"})

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["fields"]["minute"] == "*/5"
        assert data["fields"]["hour"] == "14-14,18-18"
        assert data["fields"]["day_of_week"] == "*"

    def test_validate_invalid(self, client):
        """Test an invalid expression reports the failing field."""
        response = client.post("/api/v1/validate", json={"expression": "0 0 12 1 * MON"})

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["field"] == "expression"
        assert data["message"].startswith("Specifying both a Day of Month and Day of Week")

    def test_validate_alternate_dialect(self, client):
        """Test the day-of-week dialect can be chosen per request."""
        response = client.post("/api/v1/validate", json={
            "expression": "0 0 12 ? * 7",
            "use_alternate_dow_dialect": True
        })

        assert response.status_code == 200
        assert response.json()["fields"]["day_of_week"] == "0"


class TestHealthEndpoints:
    """Test health and status endpoints."""

    def test_root_endpoint(self, client):
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Cron Describer"
        assert data["status"] == "running"

    def test_health_endpoint(self, client):
        """Test health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
