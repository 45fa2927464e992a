"""
Integration tests for health endpoint.
"""
import pytest
from httpx import AsyncClient
from datetime import datetime


@pytest.mark.asyncio
async def test_health_check_without_word_list(client: AsyncClient, no_service):
    """Test health check is healthy even when no word list is loaded."""
    response = await client.get("/health")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["dictionary"] == "not_loaded"
    assert data["vocabulary_size"] == 0


@pytest.mark.asyncio
async def test_health_check_with_word_list(client: AsyncClient, loaded_service):
    """Test health check reports the loaded vocabulary size."""
    response = await client.get("/health")

    assert response.status_code == 200

    data = response.json()
    assert data["dictionary"] == "loaded"
    assert data["vocabulary_size"] == loaded_service.vocabulary_size()


@pytest.mark.asyncio
async def test_health_check_response_format(client: AsyncClient, no_service):
    """Test that health check response has correct format."""
    response = await client.get("/health")

    data = response.json()

    required_fields = ["status", "dictionary", "vocabulary_size", "timestamp"]
    for field in required_fields:
        assert field in data, f"Missing required field: {field}"

    assert isinstance(data["status"], str)
    assert isinstance(data["dictionary"], str)
    assert isinstance(data["vocabulary_size"], int)
    assert isinstance(data["timestamp"], str)


@pytest.mark.asyncio
async def test_health_check_timestamp_format(client: AsyncClient, no_service):
    """Test that timestamp is in ISO format and recent."""
    response = await client.get("/health")

    data = response.json()

    parsed_time = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
    now = datetime.now(parsed_time.tzinfo)
    assert abs((now - parsed_time).total_seconds()) < 60, "Timestamp is not recent"


@pytest.mark.asyncio
async def test_health_response_has_request_id(client: AsyncClient, no_service):
    """Test the request logging middleware tags responses."""
    response = await client.get("/health")
    assert "x-request-id" in response.headers


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient):
    """Test root endpoint links to docs and health."""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"
