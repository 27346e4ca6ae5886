PROJECT_NAME = "Yapi MCP Server"
VERSION = "0.1.0"

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"
