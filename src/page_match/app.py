"""Application factory: the composition root.

Creates and wires settings, logging, profiling, the container, and the MCP server.
"""

from mcp.server.fastmcp import FastMCP

from page_match.config import get_settings
from page_match.container import configure as configure_container
from page_match.logging import configure_logging
from page_match.profiling import configure_profiling


def create_app() -> FastMCP:
    """Create the fully-configured MCP application."""
    settings = get_settings()
    configure_logging(debug=settings.debug)
    configure_profiling(enabled=settings.profile, profiles_dir=settings.profiles_dir)
    configure_container(settings)

    # Import tools after bootstrap so they can use get_container()
    from page_match.server import mcp  # noqa: PLC0415

    return mcp
