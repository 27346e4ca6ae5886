"""
Main Application Entry Point.

Reads settings (environment, ``.env`` and command-line flags), configures
logging and starts ``YapiMcpServer`` on the selected transport. ``--stdio``
or ``NODE_ENV=cli`` selects stdio; otherwise the HTTP/SSE transport is used.
"""

import argparse
import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from yapi_mcp.core.config import Settings
from yapi_mcp.core.logging_config import get_logger, setup_logging

from .app import YapiMcpServer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yapi-mcp", description="Expose YApi interface documentation as MCP tools.")
    parser.add_argument("--stdio", action="store_true", help="serve over stdin/stdout instead of HTTP/SSE")
    parser.add_argument("--yapi-base-url", dest="YAPI_BASE_URL", help="YApi server base URL")
    parser.add_argument("--yapi-token", dest="YAPI_TOKEN", help="YApi project token")
    parser.add_argument("--yapi-cookie", dest="YAPI_COOKIE", help="cookie string sent to YApi")
    parser.add_argument("--host", dest="YAPI_MCP_HOST", help="HTTP bind host")
    parser.add_argument("--port", dest="PORT", type=int, help="HTTP port")
    parser.add_argument("--log-level", dest="YAPI_MCP_LOG_LEVEL", help="log level (DEBUG, INFO, ...)")
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Build ``Settings`` with command-line flags overriding environment values."""
    args = build_parser().parse_args(argv)
    overrides: Dict[str, Any] = {key: value for key, value in vars(args).items() if key != "stdio" and value is not None}
    if args.stdio or os.getenv("NODE_ENV") == "cli":
        overrides["YAPI_MCP_TRANSPORT"] = "stdio"
    return Settings(**overrides)


async def run(settings: Settings) -> None:
    server = YapiMcpServer(settings.yapi)
    if settings.server.transport == "stdio":
        await server.run_stdio()
    else:
        await server.serve_http(settings.server.host, settings.server.port)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings(argv)
    except ValidationError as e:
        setup_logging(enable_file=False, settings=Settings.model_construct())
        logger.error("Invalid configuration: %s", e)
        return 1
    setup_logging(settings=settings)
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error("Failed to start server: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
