import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from mcp import types

from yapi_mcp.core.config import YApiConfig
from yapi_mcp.server.app import YapiMcpServer
from yapi_mcp.server.constant import PROJECT_NAME, VERSION


@pytest.fixture
def mcp_server(yapi_config: YApiConfig, full_stub) -> YapiMcpServer:
    http = httpx.AsyncClient(transport=httpx.MockTransport(full_stub.handler))
    return YapiMcpServer(yapi_config, http_client=http)


def _call_request(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


class TestProtocolHandlers:
    @pytest.mark.asyncio
    async def test_list_tools(self, mcp_server: YapiMcpServer) -> None:
        handler = mcp_server.server.request_handlers[types.ListToolsRequest]

        result = await handler(types.ListToolsRequest(method="tools/list"))

        names = [tool.name for tool in result.root.tools]
        assert names == mcp_server.registry.names()
        assert "call_yapi" in names

    @pytest.mark.asyncio
    async def test_call_tool_returns_single_text_block(self, mcp_server: YapiMcpServer) -> None:
        handler = mcp_server.server.request_handlers[types.CallToolRequest]

        result = await handler(_call_request("get_cat_menu", {"projectId": "11"}))

        content = result.root.content
        assert len(content) == 1
        assert content[0].type == "text"
        assert json.loads(content[0].text)[0]["分类名称"] == "公共分类"

    @pytest.mark.asyncio
    async def test_tool_failure_is_a_successful_exchange(self, mcp_server: YapiMcpServer) -> None:
        handler = mcp_server.server.request_handlers[types.CallToolRequest]

        result = await handler(_call_request("get_api_desc", {}))

        assert result.root.isError is False
        assert result.root.content[0].text.startswith("获取API接口出错")


class TestHttpApp:
    @pytest.mark.asyncio
    async def test_health_and_version(self, mcp_server: YapiMcpServer) -> None:
        app = mcp_server.create_http_app()
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            health = await client.get("/health")
            version = await client.get("/version")

        assert health.status_code == 200
        assert health.json() == {"status": "ok"}
        assert version.json() == {"name": PROJECT_NAME, "version": VERSION}

    @pytest.mark.asyncio
    async def test_post_message_without_session_is_rejected(self, mcp_server: YapiMcpServer) -> None:
        app = mcp_server.create_http_app()
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            response = await client.post("/messages/", json={})

        assert response.status_code == 400

    def test_routes_registered(self, mcp_server: YapiMcpServer) -> None:
        app = mcp_server.create_http_app()
        paths = {getattr(route, "path", None) for route in app.routes}

        assert {"/sse", "/messages", "/health", "/version"} <= paths
