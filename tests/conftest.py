import pytest
from pokeapi_mcp import dependencies


@pytest.fixture(autouse=True)
def fresh_dependencies(monkeypatch):
    """Each test starts with a new client and config read from a clean environment."""
    monkeypatch.delenv("POKEAPI_MCP_DEBUG", raising=False)
    dependencies.reset()
    yield
    dependencies.reset()
