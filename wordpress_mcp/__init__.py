"""WordPress MCP Server.

An MCP server exposing WordPress post and category management over the
WordPress REST API, authenticated with an application password.
"""

from .server import main, mcp

__all__ = ["mcp", "main"]
__version__ = "1.0.0"
