from __future__ import annotations

import copy
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx
import pytest

from yapi_mcp.core.config import YApiConfig
from yapi_mcp.tools import ToolRegistry
from yapi_mcp.yapi import YApiClient

BASE_URL = "http://mock"

# Sample payloads, shaped like YApi's open API responses
API_DETAIL: Dict[str, Any] = {
    "_id": 42,
    "title": "用户登录",
    "path": "/user/login",
    "method": "POST",
    "desc": "账号密码登录",
    "req_params": [],
    "req_query": [{"name": "from", "required": "0", "desc": "来源"}],
    "req_headers": [{"name": "Content-Type", "value": "application/json"}],
    "req_body_type": "json",
    "req_body_form": [],
    "res_body_type": "json",
    "res_body": '{"type":"object","properties":{"data":{"type":"string"}}}',
    "markdown": "登录接口说明",
    "project_id": 11,
    "catid": 7,
    "uid": 3,
}

PROJECT_INFO: Dict[str, Any] = {
    "_id": 11,
    "name": "用户中心",
    "desc": "账号服务",
    "basepath": "/api",
    "group_id": 2,
    "cat": [
        {"_id": 7, "name": "公共分类", "desc": "默认分类"},
        {"_id": 8, "name": "账号", "desc": None},
    ],
}

CAT_MENU: List[Dict[str, Any]] = [
    {"_id": 7, "name": "公共分类", "desc": "默认分类", "project_id": 11},
    {"_id": 8, "name": "账号", "desc": "", "project_id": 11},
]

CAT_INTERFACE_LIST: Dict[str, Any] = {
    "count": 1,
    "total": 1,
    "list": [{"_id": 42, "title": "用户登录", "type": "static", "projectId": 11, "catid": 7}],
}

INTERFACE_LIST: Dict[str, Any] = {
    "count": 2,
    "total": 12,
    "list": [
        {"_id": 42, "title": "用户登录", "method": "POST", "path": "/user/login", "project_id": 11},
        {"_id": 43, "title": "退出登录", "type": "var", "method": "GET", "path": "/user/logout", "projectId": 12},
    ],
}

INTERFACE_MENU: List[Dict[str, Any]] = [
    {
        "_id": 7,
        "name": "公共分类",
        "desc": "默认分类",
        "list": [
            {"_id": 42, "title": "用户登录", "path": "/user/login", "method": "POST"},
            {"_id": 43, "title": "退出登录", "path": "/user/logout", "method": "GET"},
        ],
    },
    {"_id": 8, "name": "账号", "desc": "", "list": []},
]

SEARCH_RESULT: Dict[str, Any] = {
    "project": [{"_id": 11, "name": "用户中心", "basepath": "/api"}],
    "interface": [{"_id": 42, "title": "用户登录", "projectId": 11}],
}


class StubYApi:
    """In-memory YApi: maps request paths to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: Dict[str, Callable[[], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def reply(
        self,
        path: str,
        data: Any = None,
        *,
        errcode: int = 0,
        errmsg: Optional[str] = "成功！",
        status_code: int = 200,
    ) -> None:
        body = {"errcode": errcode, "errmsg": errmsg, "data": copy.deepcopy(data)}
        self.routes[path] = lambda: httpx.Response(status_code, json=body)

    def reply_raw(self, path: str, status_code: int, content: bytes) -> None:
        self.routes[path] = lambda: httpx.Response(status_code, content=content)

    def fail(self, path: str, exc: Exception) -> None:
        def _raise() -> httpx.Response:
            raise exc

        self.routes[path] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"errcode": 404, "errmsg": "不存在的api"})
        return route()

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def payloads() -> Dict[str, Any]:
    """Deep copies of the sample payloads, keyed by endpoint path."""
    return copy.deepcopy(
        {
            "/api/interface/get": API_DETAIL,
            "/api/project/get": PROJECT_INFO,
            "/api/interface/getCatMenu": CAT_MENU,
            "/api/interface/list_cat": CAT_INTERFACE_LIST,
            "/api/interface/list": INTERFACE_LIST,
            "/api/interface/list_menu": INTERFACE_MENU,
            "/api/project/search": SEARCH_RESULT,
        }
    )


@pytest.fixture
def yapi_config() -> YApiConfig:
    return YApiConfig(base_url=BASE_URL, token="t0k3n", cookie="_yapi_token=abc; _yapi_uid=3")


@pytest.fixture
def stub() -> StubYApi:
    return StubYApi()


@pytest.fixture
def yapi(yapi_config: YApiConfig, stub: StubYApi) -> YApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(stub.handler))
    return YApiClient(yapi_config, client=http)


@pytest.fixture
def registry(yapi: YApiClient) -> ToolRegistry:
    return ToolRegistry(yapi)


@pytest.fixture
def full_stub(stub: StubYApi, payloads: Dict[str, Any]) -> StubYApi:
    """Stub answering every endpoint successfully."""
    for path, data in payloads.items():
        stub.reply(path, data)
    return stub


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "http://testserver",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(self._merge_url(url))
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"Blocked outbound HTTP in unit tests: {method} {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(self._merge_url(url))
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"Blocked outbound HTTP in unit tests: {method} {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async)
    yield
