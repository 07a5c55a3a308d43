"""WordPress MCP Server entry point."""

from __future__ import annotations

import httpx
from mcp.server.fastmcp import FastMCP

from .client import WordPressClient
from .config import SERVER_NAME, WordPressConfig, logger
from .tools import register_all_tools


def create_server(
    config: WordPressConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    """Build a FastMCP server with every WordPress tool registered.

    Args:
        config: Site credentials. Read from the environment when omitted.
        transport: httpx transport for outbound requests (tests pass a mock).
    """
    if config is None:
        config = WordPressConfig.from_env()
    server = FastMCP(SERVER_NAME)
    register_all_tools(server, WordPressClient(config, transport=transport))
    return server


# Create the MCP server
mcp = create_server()


def main():
    """Run the MCP server over stdio."""
    logger.info("Starting %s", SERVER_NAME)
    mcp.run()


if __name__ == "__main__":
    main()
