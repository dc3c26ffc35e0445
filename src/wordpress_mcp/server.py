from __future__ import annotations

import asyncio
import os

from mcp.server.fastmcp import FastMCP

from wordpress_mcp.core.config import load_sites_from_env
from wordpress_mcp.core.logging import setup_logging
from wordpress_mcp.core.registry import register_discovered_tools


def create_app() -> FastMCP:
    sites = load_sites_from_env(use_dotenv=True)
    app = FastMCP("wordpress-mcp")
    register_discovered_tools(app, sites)
    return app


# --- Entry point ----------------------------------------------------------- #


async def main() -> None:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    app = create_app()
    await app.run_stdio_async()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
