from pokeapi_mcp.server import run

run()
