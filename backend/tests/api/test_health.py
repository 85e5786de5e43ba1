"""Tests for health check endpoints."""

import pytest
from fastapi.testclient import TestClient

from api import app
from shared.config import get_settings


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

    def test_readiness_check_unconfigured(self):
        """Readiness should report in-memory storage without Supabase."""
        response = client.get("/api/ready")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "in-memory"
        assert data["catalog"] == "unconfigured"

    def test_readiness_check_configured(self, monkeypatch):
        """Readiness should report Supabase and the catalog when configured."""
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-key")
        monkeypatch.setenv("TMDB_API_KEY", "tmdb-key")
        get_settings.cache_clear()

        data = client.get("/api/ready").json()
        assert data["database"] == "supabase"
        assert data["catalog"] == "configured"

    def test_readiness_response_structure(self):
        """Readiness response should have correct structure."""
        data = client.get("/api/ready").json()
        assert set(data.keys()) == {"status", "database", "catalog"}
