"""
Tools module - MCP tool definitions.

All tools are registered with the FastMCP server in server.py.
"""

from .recording import register_recording_tools


def register_all_tools(mcp, session):
    """Register all tools with the MCP server.

    Args:
        mcp: FastMCP server instance.
        session: RecordingSession instance (None on unsupported platforms).
    """
    register_recording_tools(mcp, session)


__all__ = [
    "register_all_tools",
    "register_recording_tools",
]
