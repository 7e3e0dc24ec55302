import pytest
import httpx
from pokeapi_mcp.clients.pokeapi_client import PokeAPIClient, APIClientError


MOCK_POKEAPI_SUCCESS = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
}

@pytest.fixture
def poke_client():
    """Provides a PokeAPIClient pointed at the public base URL (mocked by httpx_mock)."""
    return PokeAPIClient()

@pytest.mark.asyncio
async def test_successful_fetch_returns_parsed_json(httpx_mock, poke_client):
    """Verifies the client returns the JSON body untouched."""
    # ARRANGE: Mock the external API call
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/pikachu",
        json=MOCK_POKEAPI_SUCCESS,
        status_code=200
    )

    # ACT
    result = await poke_client.fetch_resource("/pokemon/pikachu")

    # ASSERT
    assert result == MOCK_POKEAPI_SUCCESS

@pytest.mark.asyncio
async def test_query_string_is_sent_verbatim(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?limit=5&offset=10",
        json={"count": 0, "next": None, "results": []},
    )

    result = await poke_client.fetch_resource("/pokemon?limit=5&offset=10")

    assert result["results"] == []

@pytest.mark.asyncio
async def test_not_found_raises_with_status_and_reason(httpx_mock, poke_client):
    """A 404 keeps its status code and carries the PokéAPI error message."""
    # ARRANGE: Mock the external API to return a 404 Not Found
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/nonexistent",
        status_code=404
    )

    # ACT & ASSERT
    with pytest.raises(APIClientError) as excinfo:
        await poke_client.fetch_resource("/pokemon/nonexistent")

    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "PokéAPI error: 404 Not Found"
    assert str(excinfo.value) == "PokéAPI error: 404 Not Found"

@pytest.mark.asyncio
async def test_internal_error_raises(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/move/internalerror",
        status_code=500
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.fetch_resource("/move/internalerror")

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == "PokéAPI error: 500 Internal Server Error"

@pytest.mark.asyncio
async def test_network_error_raises_503(httpx_mock, poke_client):
    """Tests that a network failure (timeout, DNS error) raises our custom error."""
    # ARRANGE: Mock a network failure (RequestError)
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url="https://pokeapi.co/api/v2/type/fire"
    )

    # ACT & ASSERT
    with pytest.raises(APIClientError) as excinfo:
        await poke_client.fetch_resource("/type/fire")

    assert excinfo.value.status_code == 503
    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_non_json_body_raises(httpx_mock, poke_client):
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/ability/static",
        text="<html>maintenance</html>",
        status_code=200
    )

    with pytest.raises(APIClientError) as excinfo:
        await poke_client.fetch_resource("/ability/static")

    assert "unexpected response format" in excinfo.value.detail

@pytest.mark.asyncio
async def test_every_call_hits_the_network(httpx_mock, poke_client):
    """No caching: two identical fetches make two requests."""
    httpx_mock.add_response(url="https://pokeapi.co/api/v2/pokemon/pikachu", json=MOCK_POKEAPI_SUCCESS)
    httpx_mock.add_response(url="https://pokeapi.co/api/v2/pokemon/pikachu", json=MOCK_POKEAPI_SUCCESS)

    await poke_client.fetch_resource("/pokemon/pikachu")
    await poke_client.fetch_resource("/pokemon/pikachu")

    assert len(httpx_mock.get_requests()) == 2
