"""MCP tool implementations for WordPress content management."""

from .categories import register_category_tools
from .posts import register_post_tools

__all__ = [
    "register_post_tools",
    "register_category_tools",
]


def register_all_tools(mcp, client):
    """Register all tools with the MCP server."""
    register_post_tools(mcp, client)
    register_category_tools(mcp, client)
