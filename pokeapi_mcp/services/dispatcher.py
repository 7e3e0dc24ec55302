import logging
from typing import Awaitable, Callable

from fastapi import HTTPException

from pokeapi_mcp.models import Projection
from pokeapi_mcp.services.projectors import ProjectionError

logger = logging.getLogger(__name__)

DEBUG_MARKER = "DEBUG: "


def _error_message(error: Exception, fallback: str) -> str:
    if isinstance(error, HTTPException):
        message = error.detail
    else:
        message = str(error)
    return message or fallback


async def run_tool(
    operation: Callable[[], Awaitable[Projection]],
    *,
    fallback: str,
    debug: bool = False,
) -> str:
    """
    Runs one tool invocation and returns the text of its result envelope.

    Success yields the pretty-printed projection (prefixed with the debug marker when
    `debug` is set). Any failure yields a single `Error: <message>` line instead;
    nothing is raised past this point.
    """
    try:
        projection = await operation()
    except (HTTPException, ProjectionError) as e:
        logger.warning(f"Tool failed: {_error_message(e, fallback)}")
        return f"Error: {_error_message(e, fallback)}"
    except Exception as e:
        logger.exception("Unexpected error while running tool")
        return f"Error: {_error_message(e, fallback)}"

    text = projection.render()
    if debug:
        logger.debug(f"Tool result:\n{text}")
        return f"{DEBUG_MARKER}{text}"
    return text
