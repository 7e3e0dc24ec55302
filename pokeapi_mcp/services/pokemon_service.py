import logging
import re

from pokeapi_mcp.clients.pokeapi_client import PokeAPIClient
from pokeapi_mcp.models import (
    AbilityDocument,
    AbilityProjection,
    EvolutionChainDocument,
    EvolutionChainProjection,
    GenerationDocument,
    GenerationProjection,
    ListingDocument,
    ListingProjection,
    MoveDocument,
    MoveProjection,
    PokemonDocument,
    PokemonProjection,
    SpeciesDocument,
    SpeciesProjection,
    TypeDocument,
    TypeProjection,
)
from pokeapi_mcp.services import projectors
from pokeapi_mcp.services.projectors import ProjectionError, parse_document

logger = logging.getLogger(__name__)

GENERATION_PREFIXES = ("generation-", "gen")
ROMAN_NUMERALS = {"i": 1, "v": 5, "x": 10}


def normalize_identifier(identifier: str) -> str:
    """PokéAPI paths are lower-case with hyphens in place of spaces."""
    return identifier.strip().lower().replace(" ", "-")


def _roman_to_int(numeral: str) -> int:
    total = 0
    for current, following in zip(numeral, numeral[1:] + " "):
        value = ROMAN_NUMERALS[current]
        if following != " " and ROMAN_NUMERALS[following] > value:
            total -= value
        else:
            total += value
    return total


def normalize_generation(generation: int | str) -> str:
    """
    Reduces a generation reference to the bare identifier used in the request path.

    Integers pass through. Strings lose a leading "generation-" or "gen" (any case),
    so "Gen1" and "generation-1" both become "1"; a bare Roman numeral such as the
    "i" left over from "generation-i" is converted to its number.
    """
    if isinstance(generation, int):
        return str(generation)

    identifier = normalize_identifier(generation)
    for prefix in GENERATION_PREFIXES:
        if identifier.startswith(prefix):
            identifier = identifier[len(prefix):]
            break
    identifier = identifier.lstrip("-")

    if identifier and set(identifier) <= ROMAN_NUMERALS.keys():
        return str(_roman_to_int(identifier))
    return identifier


def parse_chain_id(chain_url: str) -> int:
    """Extracts the evolution chain id from the tail of its resource URL."""
    segments = [segment for segment in chain_url.split("/") if segment]
    if not segments or not re.fullmatch(r"\d+", segments[-1]):
        raise ProjectionError(f"Cannot read an evolution chain id from '{chain_url}'")
    return int(segments[-1])


class PokemonService:
    """One method per tool: build the path, fetch once, validate, project."""

    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def _fetch(self, model, path: str):
        data = await self._poke_client.fetch_resource(path)
        return parse_document(model, data, path)

    async def get_pokemon(self, pokemon: str) -> PokemonProjection:
        doc = await self._fetch(PokemonDocument, f"/pokemon/{normalize_identifier(pokemon)}")
        return projectors.project_pokemon(doc)

    async def get_species(self, pokemon: str) -> SpeciesProjection:
        doc = await self._fetch(SpeciesDocument, f"/pokemon-species/{normalize_identifier(pokemon)}")
        return projectors.project_species(doc)

    async def get_type(self, type_name: str) -> TypeProjection:
        doc = await self._fetch(TypeDocument, f"/type/{normalize_identifier(type_name)}")
        return projectors.project_type(doc)

    async def get_ability(self, ability: str) -> AbilityProjection:
        doc = await self._fetch(AbilityDocument, f"/ability/{normalize_identifier(ability)}")
        return projectors.project_ability(doc)

    async def get_move(self, move: str) -> MoveProjection:
        doc = await self._fetch(MoveDocument, f"/move/{normalize_identifier(move)}")
        return projectors.project_move(doc)

    async def list_pokemon(self, limit: int = 20, offset: int = 0) -> ListingProjection:
        doc = await self._fetch(ListingDocument, f"/pokemon?limit={limit}&offset={offset}")
        return projectors.project_listing(doc, offset)

    async def get_evolution_chain(self, pokemon: str) -> EvolutionChainProjection:
        """
        Two sequential fetches: the species (for the chain reference), then the chain itself.
        A failure in either one aborts the whole lookup.
        """
        species = await self._fetch(SpeciesDocument, f"/pokemon-species/{normalize_identifier(pokemon)}")
        chain_id = parse_chain_id(species.evolution_chain.url)
        logger.debug(f"Resolved {species.name} to evolution chain {chain_id}")

        doc = await self._fetch(EvolutionChainDocument, f"/evolution-chain/{chain_id}")
        return projectors.project_evolution_chain(doc)

    async def get_generation(self, generation: int | str) -> GenerationProjection:
        doc = await self._fetch(GenerationDocument, f"/generation/{normalize_generation(generation)}")
        return projectors.project_generation(doc)
