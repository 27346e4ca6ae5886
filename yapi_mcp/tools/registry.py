"""Registry of the YApi MCP tools.

The catalog is fixed: it is filled once in ``ToolRegistry.__init__`` and only
read afterwards.
"""

from typing import Any, Dict, List, Mapping, Optional

from mcp import types

from yapi_mcp.core.logging_config import get_logger
from yapi_mcp.yapi import YApiClient

from .definitions import ToolDefinition
from .dispatch import CallYapiHandler
from .handlers import (
    GetApiDescHandler,
    GetCatInterfaceListHandler,
    GetCatMenuHandler,
    GetInterfaceListHandler,
    GetInterfaceMenuHandler,
    GetProjectInfoHandler,
    SearchProjectsHandler,
    ToolHandler,
    ToolResult,
)

logger = get_logger(__name__)

HANDLER_TYPES = (
    GetApiDescHandler,
    GetProjectInfoHandler,
    GetCatMenuHandler,
    GetCatInterfaceListHandler,
    GetInterfaceListHandler,
    GetInterfaceMenuHandler,
    SearchProjectsHandler,
    CallYapiHandler,
)


class ToolRegistry:
    """Registry binding every tool handler to one ``YApiClient``."""

    def __init__(self, yapi: YApiClient) -> None:
        self._handlers: Dict[str, ToolHandler[Any]] = {}
        for handler_type in HANDLER_TYPES:
            handler = handler_type(yapi)
            if handler.name in self._handlers:
                raise ValueError(f"Duplicate tool name: {handler.name}")
            self._handlers[handler.name] = handler
            logger.debug("Registered tool handler: %s", handler.name)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def names(self) -> List[str]:
        return list(self._handlers)

    def get(self, name: str) -> Optional[ToolHandler[Any]]:
        """Get a tool handler by name, or None if not found."""
        return self._handlers.get(name)

    def definitions(self) -> List[ToolDefinition]:
        return [handler.definition() for handler in self._handlers.values()]

    def mcp_tools(self) -> List[types.Tool]:
        """Tool descriptors for an MCP ``tools/list`` response."""
        return [definition.to_mcp_tool() for definition in self.definitions()]

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run tool ``name``. Unknown names are reported in-band like any other failure."""
        handler = self.get(name)
        if handler is None:
            logger.warning("Unknown tool requested: %s", name)
            return ToolResult.fail(f"错误: 未找到工具 {name}")
        return await handler(arguments)
