"""FastMCP server exposing PokéAPI lookups as tools, a types resource and an analysis prompt."""
import json
import logging
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from pokeapi_mcp.dependencies import get_config, get_pokemon_service
from pokeapi_mcp.services import run_tool

logger = logging.getLogger(__name__)

POKEMON_TYPES = [
    "normal", "fire", "water", "electric", "grass", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
]

ANALYSIS_PROMPT = """Please analyze {pokemon} comprehensively. Use the available tools to:
1. Get the Pokemon's basic info (stats, types, abilities)
2. Get type matchup information for its types
3. Get its evolution chain
4. Get details on its abilities

Then provide an analysis covering:
- Base stat distribution and role
- Type advantages and disadvantages
- Useful abilities and their effects
- Evolution path
- Overall competitive viability"""

mcp = FastMCP("PokéAPI MCP Server")


@mcp.tool(
    name="get-pokemon",
    title="Get Pokemon",
    description="Get detailed information about a Pokemon by name or ID",
)
async def get_pokemon(
    pokemon: Annotated[str, Field(description="Pokemon name (e.g., 'pikachu') or ID (e.g., '25')")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_pokemon(pokemon),
        fallback="Failed to fetch Pokemon",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-pokemon-species",
    title="Get Pokemon Species",
    description="Get species information including evolution chain, habitat, and flavor text",
)
async def get_pokemon_species(
    pokemon: Annotated[str, Field(description="Pokemon name or ID")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_species(pokemon),
        fallback="Failed to fetch species",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-pokemon-type",
    title="Get Pokemon Type",
    description="Get type information including damage relations (strengths/weaknesses)",
)
async def get_pokemon_type(
    type: Annotated[str, Field(description="Type name (e.g., 'fire', 'water', 'electric')")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_type(type),
        fallback="Failed to fetch type",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-pokemon-ability",
    title="Get Pokemon Ability",
    description="Get detailed information about a Pokemon ability",
)
async def get_pokemon_ability(
    ability: Annotated[str, Field(description="Ability name (e.g., 'overgrow', 'blaze', 'static')")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_ability(ability),
        fallback="Failed to fetch ability",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-pokemon-move",
    title="Get Pokemon Move",
    description="Get detailed information about a Pokemon move",
)
async def get_pokemon_move(
    move: Annotated[str, Field(description="Move name (e.g., 'thunderbolt', 'flamethrower', 'surf')")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_move(move),
        fallback="Failed to fetch move",
        debug=get_config().debug,
    )


@mcp.tool(
    name="list-pokemon",
    title="List Pokemon",
    description="List Pokemon with pagination. Returns names and IDs.",
)
async def list_pokemon(
    limit: Annotated[int, Field(ge=1, le=100, description="Number of Pokemon to return (max 100)")] = 20,
    offset: Annotated[int, Field(ge=0, description="Offset for pagination")] = 0,
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.list_pokemon(limit=limit, offset=offset),
        fallback="Failed to list Pokemon",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-evolution-chain",
    title="Get Evolution Chain",
    description="Get the evolution chain for a Pokemon species",
)
async def get_evolution_chain(
    pokemon: Annotated[str, Field(description="Pokemon name to find evolution chain for")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_evolution_chain(pokemon),
        fallback="Failed to fetch evolution chain",
        debug=get_config().debug,
    )


@mcp.tool(
    name="get-generation",
    title="Get Generation",
    description="Get information about a Pokemon generation including all Pokemon from that generation",
)
async def get_generation(
    generation: Annotated[int | str, Field(description="Generation number (1-9) or name (e.g., 'generation-i')")],
) -> str:
    service = get_pokemon_service()
    return await run_tool(
        lambda: service.get_generation(generation),
        fallback="Failed to fetch generation",
        debug=get_config().debug,
    )


@mcp.resource(
    "pokeapi://types",
    name="pokemon-types",
    title="Pokemon Types Reference",
    description="List of all Pokemon types",
    mime_type="application/json",
)
def pokemon_types() -> str:
    return json.dumps(
        {
            "types": POKEMON_TYPES,
            "note": "Use get-pokemon-type tool for detailed type information",
        },
        indent=2,
    )


@mcp.prompt(
    name="analyze-pokemon",
    title="Analyze Pokemon",
    description="Analyze a Pokemon's strengths, weaknesses, and competitive viability",
)
def analyze_pokemon(
    pokemon: Annotated[str, Field(description="Name of the Pokemon to analyze")],
) -> str:
    return ANALYSIS_PROMPT.format(pokemon=pokemon)


def configure_logging() -> None:
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if get_config().debug else logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Entry point for `python -m pokeapi_mcp` or the `pokeapi-mcp` console script."""
    configure_logging()
    logger.info("Starting PokéAPI MCP server on stdio")
    mcp.run()


if __name__ == "__main__":
    run()
