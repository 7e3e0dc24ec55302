"""Projection and dispatch logic behind the MCP tools."""
from .pokemon_service import PokemonService
from .dispatcher import run_tool

__all__ = [
    'PokemonService',
    'run_tool'
]
