"""
Transports module - different ways to access the MCP server.

- STDIO: Default transport (screenrec.server.run)
- HTTP/SSE: For remote UI clients
"""

__all__ = []
