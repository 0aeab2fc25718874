"""
Jira Fields MCP Server.

Exposes the field projection and suggestion engine to MCP clients. Records are
fetched by the caller; the server only shapes them and helps recover from
field-name mistakes.

The server integrates:
- Tools: project_fields, suggest_fields, validate_fields, describe_fields
- Catalog: static per-entity field catalogs loaded once at start-up

Each component is accessible via server.tools.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from fastmcp import FastMCP

from .tools import Tools

# Configure logging with specific control over different components
# Note: Default to WARNING but allow CLI to override this
logging.basicConfig(
    level=logging.WARNING, format="%(name)s - %(levelname)s - %(message)s"
)

# Keep stdio quiet so INFO messages do not surface as warnings in MCP clients
logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)

# General FastMCP logger
fastmcp_logger = logging.getLogger("FastMCP")
fastmcp_logger.setLevel(logging.WARNING)


@dataclass
class Server:
    """Jira field tools served over MCP."""

    catalog_root: str | Path | None = None

    # Internal fields
    mcp: FastMCP = field(init=False, repr=False)
    tools: Tools = field(init=False, repr=False)

    _started_monotonic: float = field(init=False, repr=False)

    def __post_init__(self):
        """Initialize the MCP server after dataclass initialization."""
        self.mcp = FastMCP(name="jira-fields")

        # Catalog load happens here so bad catalog data fails at start-up
        self.tools = Tools(catalog_root=self.catalog_root)

        self._register_components()

        # Monotonic start time for stable uptime
        self._started_monotonic = time.monotonic()

        logger.debug("Jira fields MCP server initialized")

    def _register_components(self):
        """Register tools with the MCP server."""
        logger.debug("Registering tools component")
        self.tools.register(self.mcp)

    def run(
        self,
        transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
        host: str = "127.0.0.1",
        port: int = 8000,
    ):
        """Run the server with the specified transport.

        Args:
            transport: Transport protocol to use
            host: Host to bind to (for HTTP transports)
            port: Port to bind to (for HTTP transports)
        """
        if transport == "stdio":
            logger.setLevel(logging.WARNING)
            logger.debug("Starting Jira fields MCP server with stdio transport")
            self.mcp.run(transport=transport)
        elif transport in ["sse", "streamable-http"]:
            logger.setLevel(logging.INFO)
            logger.info(
                f"Starting Jira fields MCP server with {transport} transport on {host}:{port}"
            )
            self.mcp.run(transport=transport, host=host, port=port)
        else:
            raise ValueError(
                f"Unsupported transport: {transport}. "
                f"Supported transports: stdio, sse, streamable-http"
            )

    def uptime_seconds(self) -> float:
        """Return process uptime in seconds using monotonic clock."""
        return max(0.0, time.monotonic() - self._started_monotonic)


def run_server(
    transport: Literal["stdio", "sse", "streamable-http"] = "stdio",
    host: str = "127.0.0.1",
    port: int = 8000,
    catalog_root: str | Path | None = None,
):
    """
    Entry point for running the server with specified transport.

    Args:
        transport: Either 'stdio', 'sse', or 'streamable-http'
        host: Host for HTTP transport
        port: Port for HTTP transport
        catalog_root: Directory of catalog YAML files (packaged data if None)
    """
    server = Server(catalog_root=catalog_root)
    server.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    run_server()
