#!/usr/bin/env python3
"""
HTTP/SSE Server for screenrec

Exposes the recording tools over HTTP using Server-Sent Events (SSE), so a
UI running in another process can drive the recorder.

Usage:
    python -m screenrec.transports.http
    # or
    screenrec-http
"""

import logging
import os

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Run the HTTP server using FastMCP's SSE transport."""
    from screenrec.server import mcp

    host = os.environ.get("MCP_HOST", "127.0.0.1")
    port = int(os.environ.get("MCP_PORT", "8080"))

    logger.info(f"Starting screenrec MCP HTTP Server on {host}:{port}")
    logger.info(f"SSE endpoint: http://{host}:{port}/sse")

    mcp.run(transport="sse", host=host, port=port)


if __name__ == "__main__":
    main()
