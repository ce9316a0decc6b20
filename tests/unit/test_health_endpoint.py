"""
Unit tests for health check endpoint.

Tests the GET /health endpoint with Neo4j connectivity verification.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from citygraph.main import app

client = TestClient(app)


@pytest.fixture
def neo4j_client():
    """Install a mocked Neo4j client on app.state."""
    mock_client = MagicMock()
    mock_client.execute_query = AsyncMock(return_value=[{"ok": 1}])
    app.state.neo4j_client = mock_client
    try:
        yield mock_client
    finally:
        del app.state.neo4j_client


class TestHealthEndpoint:
    """Test GET /health endpoint."""

    def test_health_check_neo4j_up(self, neo4j_client):
        """Test health check when Neo4j is available."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["api"]["status"] == "up"
        assert data["services"]["neo4j"]["status"] == "up"
        assert isinstance(data["services"]["neo4j"]["response_time_ms"], int)
        assert data["services"]["neo4j"]["response_time_ms"] >= 0
        assert "timestamp" in data
        assert "version" in data
        neo4j_client.execute_query.assert_called_once_with("RETURN 1 AS ok")

    def test_health_check_neo4j_down(self, neo4j_client):
        """Test health check when Neo4j is unavailable."""
        neo4j_client.execute_query.side_effect = Exception("Connection refused")

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["services"]["api"]["status"] == "up"
        assert data["services"]["neo4j"]["status"] == "down"
        assert data["services"]["neo4j"]["response_time_ms"] is None

    def test_health_check_without_client(self):
        """Test health check before the lifespan created a client."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"

    def test_health_check_response_time_measurement(self, neo4j_client):
        """Test that response time is measured."""

        async def slow_query(*args, **kwargs):
            await asyncio.sleep(0.01)
            return [{"ok": 1}]

        neo4j_client.execute_query.side_effect = slow_query

        response = client.get("/health")

        assert response.json()["services"]["neo4j"]["response_time_ms"] >= 10
