import httpx
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

# Raised for any upstream failure (non-2xx status, network error, unreadable body)
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)

    def __str__(self) -> str:
        return self.detail


class PokeAPIClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(self, base_url: str | None = None):
        # No timeout override: the transport defaults apply
        self.client = httpx.AsyncClient(base_url=base_url or self.BASE_URL)

    async def fetch_resource(self, path: str) -> dict:
        """
        Performs exactly one GET against the PokéAPI and returns the parsed JSON body.
        Callers are responsible for normalizing identifiers inside `path`.
        """
        logger.info(f"Fetching PokéAPI resource: {path}")

        try:
            response = await self.client.get(path)
            response.raise_for_status()  # Raises for any non-2xx status code
            return response.json()

        except httpx.HTTPStatusError as e:
            detail = f"PokéAPI error: {e.response.status_code} {e.response.reason_phrase}"
            logger.error(f"{detail} ({path})")
            raise APIClientError(status_code=e.response.status_code, detail=detail)

        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokéAPI network error for {path}: {str(e)}")
            raise APIClientError(status_code=503, detail=f"PokéAPI network error: {str(e)}")

        except ValueError:
            logger.error(f"PokéAPI returned a non-JSON body for {path}")
            raise APIClientError(status_code=502, detail="PokéAPI returned an unexpected response format.")

    async def close(self):
        """Close the underlying HTTP connection pool (call on shutdown)."""
        await self.client.aclose()
