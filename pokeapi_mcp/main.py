import contextlib

from fastapi import FastAPI

from pokeapi_mcp.dependencies import get_poke_client
from pokeapi_mcp.server import configure_logging, mcp

configure_logging()

# Builds the session manager, so it must exist before the lifespan runs it
mcp_app = mcp.streamable_http_app()


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    async with mcp.session_manager.run():
        yield
    await get_poke_client().close()


app = FastAPI(
    title="PokéAPI MCP Server",
    description="PokéAPI lookups exposed as Model Context Protocol tools over streamable HTTP.",
    lifespan=lifespan,
)


@app.get("/health", summary="Liveness probe")
async def health():
    return {"status": "ok"}


# The MCP transport serves its own /mcp route; registered last so /health still matches first
app.mount("/", mcp_app)
