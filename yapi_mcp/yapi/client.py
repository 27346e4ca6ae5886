"""YApi open API client

Overview
--------
Thin async HTTP client for the YApi open API. It is the single point of
contact with the upstream server and owns the base URL, the project token and
the cookie string. Every public method maps to exactly one YApi endpoint and
issues exactly one ``GET``.

Authentication
--------------
- ``token`` is appended as the ``token`` query parameter when non-empty.
- ``cookie`` is always sent as the ``Cookie`` header, even when empty.

Errors
------
Every response is unwrapped from the YApi envelope (``errcode``/``errmsg``/
``data``). Failures are raised as subclasses of ``YApiError``:

- ``UpstreamLogicalError`` when ``errcode != 0``
- ``UpstreamHttpError`` for non-2xx responses
- ``TransportError`` when the request could not complete
- ``InvalidEnvelopeError`` when a 2xx body is not an envelope

Nothing is cached or retried.

Usage
-----
>>> async with YApiClient(YApiConfig(base_url="http://yapi.local", token="t")) as yapi:
...     api = await yapi.get_api_interface("42")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from yapi_mcp.core.config import YApiConfig

from .errors import InvalidEnvelopeError, TransportError, UpstreamHttpError, UpstreamLogicalError
from .models import ApiInterface, ApiMenu, Category, Envelope, ListResult, ProjectInfo, SearchResult

_CATEGORIES = TypeAdapter(List[Category])
_MENUS = TypeAdapter(List[ApiMenu])


class YApiClient:
    """Async adapter over the YApi open API.

    The client keeps no per-request state, so one instance can serve any
    number of concurrent tool calls.
    """

    def __init__(
        self,
        config: YApiConfig,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.token = config.token
        self.cookie = config.cookie
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(timeout=config.timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "YApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        return {"Cookie": f"{self.cookie}"}

    def _params(self, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        query: Dict[str, Any] = dict(params or {})
        if self.token:
            query["token"] = self.token
        return query

    async def request(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        failure_message: str = "调用YApi接口失败",
    ) -> Any:
        """Issue one GET against ``endpoint`` and return the envelope's ``data``.

        Args:
            endpoint: Path under the base URL, e.g. ``/api/interface/get``.
            params: Query parameters, without the token.
            failure_message: Error text used when YApi reports a failure
                without an ``errmsg``.

        Returns:
            The raw ``data`` field of a successful envelope.

        Raises:
            UpstreamLogicalError: The envelope reports ``errcode != 0``.
            UpstreamHttpError: YApi answered with a non-2xx status.
            TransportError: The request could not complete.
            InvalidEnvelopeError: The 2xx body is not a YApi envelope.
        """
        url = f"{self.base_url}{endpoint}"
        self._logger.info("YApiClient.request: GET %s params=%s", url, sorted((params or {}).keys()))
        try:
            r = await self._http.get(url, params=self._params(params), headers=self._headers())
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _errmsg_of(e.response) or "未知错误"
            self._logger.error("%s: HTTP %s from %s: %s", failure_message, e.response.status_code, url, message)
            raise UpstreamHttpError(e.response.status_code, message) from e
        except httpx.HTTPError as e:
            self._logger.error("%s: request to %s failed: %r", failure_message, url, e)
            raise TransportError() from e

        try:
            envelope = Envelope.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            self._logger.error("%s: %s returned a non-envelope body", failure_message, url)
            raise InvalidEnvelopeError(f"{failure_message}: YApi返回了无法解析的响应") from e

        if not envelope.ok:
            self._logger.error("%s: errcode=%s errmsg=%s", failure_message, envelope.status_code, envelope.status_message)
            raise UpstreamLogicalError(envelope.status_message or failure_message, status_code=envelope.status_code)
        return envelope.data

    async def get_api_interface(self, api_id: str) -> ApiInterface:
        """Interface detail. ``GET /api/interface/get?id=``"""
        data = await self.request("/api/interface/get", {"id": api_id}, failure_message="获取API接口失败")
        return ApiInterface.model_validate(data)

    async def get_project_info(self, project_id: Optional[str] = None) -> ProjectInfo:
        """Project basic info. ``GET /api/project/get[?project_id=]``

        Without ``project_id`` YApi resolves the project from the token.
        """
        params = {"project_id": project_id} if project_id is not None else {}
        data = await self.request("/api/project/get", params, failure_message="获取项目信息失败")
        return ProjectInfo.model_validate(data)

    async def get_cat_menu(self, project_id: str) -> List[Category]:
        """Category menu of a project. ``GET /api/interface/getCatMenu?project_id=``"""
        data = await self.request(
            "/api/interface/getCatMenu", {"project_id": project_id}, failure_message="获取菜单列表失败"
        )
        return _CATEGORIES.validate_python(data or [])

    async def get_interface_list_by_cat(self, cat_id: str, page: int = 1, limit: int = 10) -> ListResult:
        """Interfaces of one category. ``GET /api/interface/list_cat?catid=&page=&limit=``"""
        data = await self.request(
            "/api/interface/list_cat",
            {"catid": cat_id, "page": page, "limit": limit},
            failure_message="获取分类接口列表失败",
        )
        return ListResult.model_validate(data)

    async def get_interface_list(self, project_id: str, page: int = 1, limit: int = 10) -> ListResult:
        """Interfaces of a project. ``GET /api/interface/list?project_id=&page=&limit=``"""
        data = await self.request(
            "/api/interface/list",
            {"project_id": project_id, "page": page, "limit": limit},
            failure_message="获取接口列表失败",
        )
        return ListResult.model_validate(data)

    async def get_interface_menu(self, project_id: str) -> List[ApiMenu]:
        """Categories with their interfaces. ``GET /api/interface/list_menu?project_id=``"""
        data = await self.request(
            "/api/interface/list_menu", {"project_id": project_id}, failure_message="获取接口菜单列表失败"
        )
        return _MENUS.validate_python(data or [])

    async def search_projects(self, q: str) -> SearchResult:
        """Keyword search over projects and interfaces. ``GET /api/project/search?q=``"""
        data = await self.request("/api/project/search", {"q": q}, failure_message="搜索项目和接口失败")
        return SearchResult.model_validate(data)


def _errmsg_of(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("errmsg") or body.get("statusMessage")
    return str(message) if message else None
