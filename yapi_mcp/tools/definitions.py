"""Tool definitions for the YApi MCP tools.

This module declares the input schema of every tool and the ``ToolDefinition``
model the registry publishes to MCP clients. Field aliases are the parameter
names callers send (``apiId``, ``projectId``...).
"""

from typing import Any, Callable, Dict, Optional, Type

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


class ToolInput(BaseModel):
    """Base for tool input schemas; accepts either the alias or the field name."""

    model_config = ConfigDict(populate_by_name=True)


class ApiDescInput(ToolInput):
    """Input schema for get_api_desc."""

    api_id: str = Field(..., alias="apiId", description="YApi接口的ID")


class ProjectIdInput(ToolInput):
    """Input schema for the tools keyed by a project id."""

    project_id: str = Field(..., alias="projectId", description="项目ID")


class CatInterfaceListInput(ToolInput):
    """Input schema for get_cat_interface_list."""

    cat_id: str = Field(..., alias="catId", description="分类ID")
    page: int = Field(default=1, description="页码，默认为1")
    limit: int = Field(default=10, description="每页数量，默认为10")


class InterfaceListInput(ToolInput):
    """Input schema for get_interface_list."""

    project_id: str = Field(..., alias="projectId", description="项目ID")
    page: int = Field(default=1, description="页码，默认为1")
    limit: int = Field(default=10, description="每页数量，默认为10")


class SearchInput(ToolInput):
    """Input schema for search_projects."""

    q: str = Field(..., description="搜索API关键词")


class CallYapiInput(ToolInput):
    """Input schema for call_yapi.

    ``params`` values are forwarded positionally in insertion order, so they
    must be listed in the order the target method declares its parameters.
    """

    endpoint: str = Field(..., description="YApi接口名称，如 getApiInterface")
    params: Dict[str, Any] = Field(default_factory=dict, description="接口所需的参数，按接口参数顺序提供")


class ToolDefinition(BaseModel):
    """Pydantic model for tool definitions.

    Provides a structured, validated way to describe a tool with its input
    schema and the handler that executes it.
    """

    name: str = Field(..., description="Unique identifier for the tool")
    description: str = Field(..., description="Human-readable description of what the tool does")
    input_schema: Type[BaseModel] = Field(..., description="Pydantic model class for input validation")
    handler: Optional[Callable] = Field(default=None, description="Async handler that executes the tool")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert tool definition to dictionary format.

        Returns:
            Dictionary representation of tool definition with JSON schema
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.get_input_schema_json(),
        }

    def get_input_schema_json(self) -> Dict[str, Any]:
        """Get the input schema as JSON schema, keyed by the caller-facing parameter names."""
        return self.input_schema.model_json_schema(by_alias=True)

    def to_mcp_tool(self) -> types.Tool:
        """Describe this tool for an MCP ``tools/list`` response."""
        return types.Tool(name=self.name, description=self.description, inputSchema=self.get_input_schema_json())
