#!/usr/bin/env python3
"""
screenrec - FastMCP Server for native screen recording

Provides tools for:
- Starting and stopping a recording with the platform's own capture tool
  (macOS screencapture, Windows Game Bar)
- Pausing and resuming where the platform supports it
- Reporting recording state and elapsed duration
"""

import atexit
import logging
from typing import Optional

from fastmcp import FastMCP

from .core.config import current_platform
from .core.errors import UnknownPlatformError
from .factory import get_session
from .session import RecordingSession
from .tools import register_all_tools

logger = logging.getLogger(__name__)

# Create the FastMCP server
mcp = FastMCP("screenrec")


def _create_session() -> Optional[RecordingSession]:
    try:
        return get_session(current_platform())
    except UnknownPlatformError as e:
        logger.warning(f"Recording unavailable: {e}")
        return None


# One session per server process
session = _create_session()
register_all_tools(mcp, session)

if session is not None:
    atexit.register(session.close)


# =============================================================================
# Entry Points
# =============================================================================

def run():
    """Entry point for STDIO transport (default)."""
    logging.basicConfig(level=logging.INFO)
    mcp.run()


def main():
    """Entry point for SSE transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="sse")


if __name__ == "__main__":
    run()
