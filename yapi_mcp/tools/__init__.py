"""YApi MCP Tools Module.

This module provides the tool catalog exposed over MCP: input schemas, the
handlers that call ``YApiClient``, the ``call_yapi`` dynamic dispatcher and
the registry tying them together.
"""

from .definitions import ToolDefinition
from .dispatch import CallYapiHandler, build_endpoint_table
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
from .registry import ToolRegistry

__all__ = [
    # Definitions
    "ToolDefinition",
    # Handler abstractions
    "ToolHandler",
    "ToolResult",
    # Handlers
    "GetApiDescHandler",
    "GetProjectInfoHandler",
    "GetCatMenuHandler",
    "GetCatInterfaceListHandler",
    "GetInterfaceListHandler",
    "GetInterfaceMenuHandler",
    "SearchProjectsHandler",
    "CallYapiHandler",
    "build_endpoint_table",
    # Registry
    "ToolRegistry",
]
