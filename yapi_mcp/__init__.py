"""yapi-mcp.

This package exposes the REST API of a YApi documentation server as tools
under the Model Context Protocol (MCP), so an agent can look up interfaces,
projects, categories and menus through tool calls instead of raw HTTP.

Core subpackages
----------------

- ``yapi_mcp.yapi``: ``YApiClient``, the async adapter over the YApi open API,
  its response models and its error types.
- ``yapi_mcp.tools``: the tool catalog, the handlers reshaping adapter results,
  and the ``call_yapi`` dynamic dispatcher.
- ``yapi_mcp.server``: the MCP server, its stdio and HTTP/SSE transports, and
  the command-line entry point.
- ``yapi_mcp.core``: settings and logging configuration.

Every tool call ends as a single text block. Failures are reported in that
text rather than as protocol errors, so the calling agent always gets an
answer it can read.
"""
