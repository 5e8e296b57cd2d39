#!/usr/bin/env python3
"""
Entry point for the CHUK Tonnetz MCP Server.

Supports the stdio and http transports of chuk-mcp-server. The lattice
config is read from <config-dir>/tonnetz.yaml when present.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Tonnetz MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory containing tonnetz.yaml (default: current directory)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (includes every region change)",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.config_dir:
        os.environ["TONNETZ_CONFIG_DIR"] = args.config_dir

    # The server module builds the lattice on import, after config is known
    from chuk_mcp_tonnetz.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tonnetz MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tonnetz MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
