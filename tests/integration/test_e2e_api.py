import pytest
from fastapi.testclient import TestClient
from pokeapi_mcp.main import app


@pytest.fixture(scope="module")
def test_client():
    """
    Provides a TestClient with the lifespan running.
    The MCP session manager can only be started once per process, hence module scope.
    """
    with TestClient(app) as client:
        yield client


def test_health_endpoint(test_client):
    # Act (Hit the public API endpoint)
    response = test_client.get("/health")

    # Assert
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_mcp_transport_is_mounted():
    paths = {getattr(route, "path", None) for route in app.routes}

    assert "/health" in paths
    # The streamable HTTP app is mounted at the root and serves /mcp itself
    assert "" in paths or "/" in paths
