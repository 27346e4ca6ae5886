"""Tool handlers for the YApi MCP tools.

Every handler validates its arguments, calls one ``YApiClient`` method and
reshapes the result. ``ToolHandler.__call__`` is the error boundary: whatever
happens inside, the caller receives a ``ToolResult`` and never an exception.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from yapi_mcp.core.logging_config import get_logger
from yapi_mcp.yapi import YApiClient

from . import formatters
from .definitions import (
    ApiDescInput,
    CatInterfaceListInput,
    InterfaceListInput,
    ProjectIdInput,
    SearchInput,
    ToolDefinition,
)

logger = get_logger(__name__)

InputType = TypeVar("InputType", bound=BaseModel)


class ToolResult(BaseModel):
    """Outcome of one tool call: either a payload or an error text."""

    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any) -> "ToolResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ToolResult":
        return cls(success=False, error=error)

    @property
    def text(self) -> str:
        """Serialize either branch into the single text block returned to the caller."""
        if not self.success:
            return self.error or ""
        return json.dumps(self.data, ensure_ascii=False, indent=2, default=to_jsonable_python)


class ToolHandler(ABC, Generic[InputType]):
    """Abstract base class for tool handlers.

    Subclasses declare ``name``, ``description``, ``input_schema`` and
    ``error_prefix`` and implement ``execute``.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    input_schema: ClassVar[Type[BaseModel]]
    error_prefix: ClassVar[str]

    def __init__(self, yapi: YApiClient) -> None:
        self._yapi = yapi

    @abstractmethod
    async def execute(self, input_data: InputType) -> Any:
        """Run the tool.

        Args:
            input_data: Validated input for the tool

        Returns:
            A JSON-serializable payload, or a ``ToolResult`` to return as-is
        """

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema,
            handler=self,
        )

    async def __call__(self, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Validate ``arguments``, execute, and convert any failure into an in-band error."""
        try:
            input_data = self.input_schema.model_validate(arguments or {})
            outcome = await self.execute(input_data)  # type: ignore[arg-type]
        except Exception as e:
            logger.error("Tool %s failed (arguments=%r): %s", self.name, arguments, e)
            return ToolResult.fail(f"{self.error_prefix}: {e}")
        if isinstance(outcome, ToolResult):
            return outcome
        return ToolResult.ok(outcome)


class GetApiDescHandler(ToolHandler[ApiDescInput]):
    name = "get_api_desc"
    description = "获取YApi中特定接口的详细信息"
    input_schema = ApiDescInput
    error_prefix = "获取API接口出错"

    async def execute(self, input_data: ApiDescInput) -> Any:
        api = await self._yapi.get_api_interface(input_data.api_id)
        return formatters.format_api_interface(api)


class GetProjectInfoHandler(ToolHandler[ProjectIdInput]):
    name = "get_project_info"
    description = "获取YApi项目的基本信息"
    input_schema = ProjectIdInput
    error_prefix = "获取项目信息出错"

    async def execute(self, input_data: ProjectIdInput) -> Any:
        project = await self._yapi.get_project_info(input_data.project_id)
        return formatters.format_project_info(project)


class GetCatMenuHandler(ToolHandler[ProjectIdInput]):
    name = "get_cat_menu"
    description = "获取YApi项目的菜单列表"
    input_schema = ProjectIdInput
    error_prefix = "获取菜单列表出错"

    async def execute(self, input_data: ProjectIdInput) -> Any:
        categories = await self._yapi.get_cat_menu(input_data.project_id)
        return formatters.format_cat_menu(categories)


class GetCatInterfaceListHandler(ToolHandler[CatInterfaceListInput]):
    name = "get_cat_interface_list"
    description = "获取YApi中某个分类下的接口列表"
    input_schema = CatInterfaceListInput
    error_prefix = "获取分类接口列表出错"

    async def execute(self, input_data: CatInterfaceListInput) -> Any:
        result = await self._yapi.get_interface_list_by_cat(input_data.cat_id, input_data.page, input_data.limit)
        return formatters.format_cat_interface_list(result)


class GetInterfaceListHandler(ToolHandler[InterfaceListInput]):
    name = "get_interface_list"
    description = "获取YApi项目的接口列表数据"
    input_schema = InterfaceListInput
    error_prefix = "获取接口列表出错"

    async def execute(self, input_data: InterfaceListInput) -> Any:
        result = await self._yapi.get_interface_list(input_data.project_id, input_data.page, input_data.limit)
        return formatters.format_interface_list(result)


class GetInterfaceMenuHandler(ToolHandler[ProjectIdInput]):
    name = "get_interface_menu"
    description = "获取YApi项目的接口菜单列表（包含分类及其下的接口）"
    input_schema = ProjectIdInput
    error_prefix = "获取接口菜单列表出错"

    async def execute(self, input_data: ProjectIdInput) -> Any:
        menus = await self._yapi.get_interface_menu(input_data.project_id)
        return formatters.format_interface_menu(menus)


class SearchProjectsHandler(ToolHandler[SearchInput]):
    name = "search_projects"
    description = (
        "搜索YApi项目，通常作为工作流的第一步，通过 api path 获取到实际接口 id，再调用 get_api_desc 获取接口详细信息"
    )
    input_schema = SearchInput
    error_prefix = "搜索YApi项目出错"

    async def execute(self, input_data: SearchInput) -> Any:
        result = await self._yapi.search_projects(input_data.q)
        return formatters.format_search_result(result)
