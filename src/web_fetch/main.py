"""Main entry point for the web fetch MCP server."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .config.loader import Config, load_config
from .agent.fetch_agent import FetchAgent
from .server.mcp_server import serve

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="MCP server exposing URL fetching and HTML fragment extraction tools"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (YAML or JSON)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Config not found: {config_path}", file=sys.stderr)
            return 1
        config = load_config(config_path)
    else:
        config = Config()

    # stdout carries the MCP protocol; logs go to stderr only
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    agent = FetchAgent(config)
    try:
        asyncio.run(serve(agent))
    except KeyboardInterrupt:
        return 0
    except Exception:
        logger.exception("Failed to start server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
