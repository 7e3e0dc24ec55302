import os

from pydantic import BaseModel, Field

TRUTHY = {"1", "true", "yes", "on"}


class ServerConfig(BaseModel):
    """Process-wide settings; the debug flag prefixes tool output with a DEBUG marker."""
    debug: bool = Field(default=False, description="Enable debug logging")

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(debug=os.getenv("POKEAPI_MCP_DEBUG", "false").strip().lower() in TRUTHY)
