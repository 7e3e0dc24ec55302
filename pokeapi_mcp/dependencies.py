from pokeapi_mcp.clients import PokeAPIClient
from pokeapi_mcp.config import ServerConfig
from pokeapi_mcp.services import PokemonService

_poke_client = None
_config = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_config() -> ServerConfig:
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config

def get_pokemon_service() -> PokemonService:
    return PokemonService(poke_client=get_poke_client())

def reset():
    """Forget the cached client and config (tests swap them between cases)."""
    global _poke_client, _config
    _poke_client = None
    _config = None
