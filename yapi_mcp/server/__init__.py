"""
yapi-mcp Server Package.

Subpackages/modules:
    app: ``YapiMcpServer``, the MCP server and its stdio / SSE transports.
    api: Plain HTTP endpoints (health, version) of the SSE transport.
    main: Command-line entry point.
"""
