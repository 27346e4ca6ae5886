"""Dynamic dispatch for the ``call_yapi`` tool.

``call_yapi`` lets a caller pick the adapter method by name at call time. The
set of callable methods is a closed, read-only table built once per registry;
names outside it are rejected before any request is made.

Arguments are forwarded positionally, in the insertion order of the caller's
``params`` mapping. Parameter names are not matched against the method
signature, so ``{"projectId": "42", "page": 2, "limit": 5}`` for
``getInterfaceList`` becomes ``get_interface_list("42", 2, 5)``.
"""

from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping

from yapi_mcp.core.logging_config import get_logger
from yapi_mcp.yapi import YApiClient

from .definitions import CallYapiInput
from .formatters import to_plain
from .handlers import ToolHandler, ToolResult

logger = get_logger(__name__)

Endpoint = Callable[..., Awaitable[Any]]


def build_endpoint_table(yapi: YApiClient) -> Mapping[str, Endpoint]:
    """Map each public endpoint name to the bound adapter method serving it."""
    return MappingProxyType(
        {
            "getApiInterface": yapi.get_api_interface,
            "getProjectInfo": yapi.get_project_info,
            "getCatMenu": yapi.get_cat_menu,
            "getInterfaceListByCat": yapi.get_interface_list_by_cat,
            "getInterfaceList": yapi.get_interface_list,
            "getInterfaceMenu": yapi.get_interface_menu,
            "searchProjects": yapi.search_projects,
        }
    )


class CallYapiHandler(ToolHandler[CallYapiInput]):
    name = "call_yapi"
    description = "调用YApi的任意接口"
    input_schema = CallYapiInput
    error_prefix = "调用YApi接口出错"

    def __init__(self, yapi: YApiClient) -> None:
        super().__init__(yapi)
        self.endpoints = build_endpoint_table(yapi)

    async def execute(self, input_data: CallYapiInput) -> Any:
        endpoint = self.endpoints.get(input_data.endpoint)
        if endpoint is None:
            logger.warning("call_yapi: unknown endpoint %r", input_data.endpoint)
            return ToolResult.fail(f"错误: 未找到API {input_data.endpoint}")
        args = list(input_data.params.values())
        logger.debug("call_yapi: %s%s", input_data.endpoint, tuple(args))
        result = await endpoint(*args)
        return to_plain(result)
