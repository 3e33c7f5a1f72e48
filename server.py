# server.py
import logging
import sys

from mcp.server.fastmcp import FastMCP

from spotify_search import config
from spotify_search.tools import register_tools


def create_server(settings: config.Settings | None = None) -> FastMCP:
    settings = settings or config.load_env()
    config.configure(settings)
    mcp = FastMCP("spotify-search")
    register_tools(mcp, min_query_length=settings.min_query_length)
    return mcp


def main() -> None:
    settings = config.load_env()
    # stdout carries the MCP stdio stream
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    create_server(settings).run()


if __name__ == "__main__":
    main()
