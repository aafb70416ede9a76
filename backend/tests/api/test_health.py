"""Tests for health check endpoints."""

from fastapi.testclient import TestClient
from unittest.mock import patch

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        response = client.get("/api/health")
        assert set(response.json().keys()) == {"status", "version"}

    @patch("api.routes.health.get_settings")
    def test_readiness_when_configured(self, mock_settings):
        """Readiness reports ready once the database is configured."""
        settings = mock_settings.return_value
        settings.supabase_url = "https://example.supabase.co"
        settings.supabase_service_role_key = "service-key"
        settings.openai_api_key = "sk-test"
        settings.openai_base_url = ""

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "configured", "ai": "configured"}

    @patch("api.routes.health.get_settings")
    def test_readiness_without_database(self, mock_settings):
        settings = mock_settings.return_value
        settings.supabase_url = ""
        settings.supabase_service_role_key = ""
        settings.openai_api_key = ""
        settings.openai_base_url = ""

        data = client.get("/api/ready").json()

        assert data["status"] == "not_ready"
        assert data["database"] == "missing"
        assert data["ai"] == "missing"

    @patch("api.routes.health.get_settings")
    def test_local_model_counts_as_configured(self, mock_settings):
        """A base URL alone is enough for a local model server."""
        settings = mock_settings.return_value
        settings.supabase_url = "https://example.supabase.co"
        settings.supabase_service_role_key = "service-key"
        settings.openai_api_key = ""
        settings.openai_base_url = "http://localhost:11434/v1"

        assert client.get("/api/ready").json()["ai"] == "configured"
