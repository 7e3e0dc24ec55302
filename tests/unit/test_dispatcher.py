import pytest
from unittest.mock import AsyncMock
from pokeapi_mcp.clients.pokeapi_client import APIClientError
from pokeapi_mcp.models import ListedPokemon
from pokeapi_mcp.services.dispatcher import run_tool
from pokeapi_mcp.services.projectors import ProjectionError


PROJECTION = ListedPokemon(id=25, name="pikachu")


@pytest.mark.asyncio
async def test_success_returns_pretty_printed_json():
    operation = AsyncMock(return_value=PROJECTION)

    text = await run_tool(operation, fallback="Failed to fetch Pokemon")

    assert text == '{\n  "id": 25,\n  "name": "pikachu"\n}'
    operation.assert_awaited_once()

@pytest.mark.asyncio
async def test_debug_flag_prefixes_success_output():
    text = await run_tool(AsyncMock(return_value=PROJECTION), fallback="unused", debug=True)

    assert text.startswith("DEBUG: {")

@pytest.mark.asyncio
async def test_upstream_error_becomes_error_line():
    operation = AsyncMock(side_effect=APIClientError(status_code=404, detail="PokéAPI error: 404 Not Found"))

    text = await run_tool(operation, fallback="Failed to fetch Pokemon", debug=True)

    # The debug marker never applies to failures
    assert text == "Error: PokéAPI error: 404 Not Found"

@pytest.mark.asyncio
async def test_projection_error_becomes_error_line():
    operation = AsyncMock(side_effect=ProjectionError("Cannot read an evolution chain id from ''"))

    text = await run_tool(operation, fallback="Failed to fetch evolution chain")

    assert text == "Error: Cannot read an evolution chain id from ''"

@pytest.mark.asyncio
async def test_error_without_message_uses_fallback():
    text = await run_tool(AsyncMock(side_effect=RuntimeError()), fallback="Failed to fetch move")

    assert text == "Error: Failed to fetch move"

@pytest.mark.asyncio
async def test_unexpected_error_never_escapes():
    text = await run_tool(AsyncMock(side_effect=KeyError("sprites")), fallback="Failed to fetch Pokemon")

    assert text.startswith("Error: ")
