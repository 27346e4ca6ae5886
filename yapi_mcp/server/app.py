"""
MCP Server Application.

This module binds the tool registry to an MCP ``Server`` and exposes it over
one of two transports:

- stdio, for agents that spawn the server as a subprocess
- HTTP with server-sent events, served by FastAPI + uvicorn: ``GET /sse``
  opens a session stream, ``POST /messages/?session_id=...`` delivers client
  messages. Each SSE connection gets its own session.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from mcp import types
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from yapi_mcp.core.config import YApiConfig
from yapi_mcp.core.logging_config import get_logger
from yapi_mcp.tools import ToolRegistry
from yapi_mcp.yapi import YApiClient

from .api import health
from .constant import MESSAGES_PATH, PROJECT_NAME, SSE_PATH, VERSION

logger = get_logger(__name__)


class YapiMcpServer:
    """MCP server exposing the YApi tool catalog."""

    def __init__(self, config: YApiConfig, *, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.yapi = YApiClient(config, client=http_client)
        self.registry = ToolRegistry(self.yapi)
        self.server: Server = Server(PROJECT_NAME, version=VERSION)
        self._register_protocol_handlers()
        logger.info("%s %s ready with %d tools against %s", PROJECT_NAME, VERSION, len(self.registry), config.base_url)

    def _register_protocol_handlers(self) -> None:
        registry = self.registry

        @self.server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return registry.mcp_tools()

        # Arguments are validated by each tool's own schema so that invalid
        # input is reported in-band like every other failure.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
            result = await registry.call(name, arguments or {})
            return [types.TextContent(type="text", text=result.text)]

    async def aclose(self) -> None:
        await self.yapi.aclose()

    async def run_stdio(self) -> None:
        """Serve MCP over stdin/stdout until the client disconnects."""
        logger.info("Serving MCP over stdio")
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        finally:
            await self.aclose()

    def create_http_app(self) -> FastAPI:
        """Build the FastAPI application serving MCP over SSE."""
        sse = SseServerTransport(MESSAGES_PATH)

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            logger.info("Starting %s HTTP transport...", PROJECT_NAME)
            yield
            logger.info("Shutting down %s HTTP transport...", PROJECT_NAME)
            await self.aclose()

        app = FastAPI(title=PROJECT_NAME, version=VERSION, lifespan=lifespan)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        app.include_router(health.router, tags=["health"])

        async def handle_sse(request: Request) -> Response:
            logger.info("SSE session opened from %s", request.client.host if request.client else "unknown")
            async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
            logger.info("SSE session closed")
            return Response()

        app.add_route(SSE_PATH, handle_sse, methods=["GET"])
        app.mount(MESSAGES_PATH, app=sse.handle_post_message)
        return app

    async def serve_http(self, host: str, port: int) -> None:
        """Serve the SSE application with uvicorn."""
        config = uvicorn.Config(self.create_http_app(), host=host, port=port, log_config=None)
        logger.info("HTTP server listening on %s:%s", host, port)
        await uvicorn.Server(config).serve()
