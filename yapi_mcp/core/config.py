"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class YApiConfig(BaseModel):
    """Connection details for the upstream YApi instance."""

    base_url: str = Field(
        default="http://127.0.0.1:3000", alias="YAPI_BASE_URL", description="YApi server base URL"
    )
    token: str = Field(default="", alias="YAPI_TOKEN", description="YApi project token, sent as the token query param")
    cookie: str = Field(default="", alias="YAPI_COOKIE", description="Cookie string sent with every YApi request")
    timeout: float = Field(default=10.0, alias="YAPI_TIMEOUT", description="HTTP timeout in seconds")

    model_config = {"populate_by_name": True}

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ServerConfig(BaseModel):
    """MCP server transport configuration."""

    host: str = Field(default="0.0.0.0", alias="YAPI_MCP_HOST", description="HTTP server host address")
    port: int = Field(default=3388, alias="PORT", description="HTTP server port number")
    transport: Literal["sse", "stdio"] = Field(
        default="sse", alias="YAPI_MCP_TRANSPORT", description="MCP transport type (sse or stdio)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # YApi Upstream Configuration
    # =====================================================================
    yapi_base_url: str = Field(
        default="http://127.0.0.1:3000",
        description="YApi server base URL",
        alias="YAPI_BASE_URL",
    )
    yapi_token: str = Field(
        default="",
        description="YApi project token",
        alias="YAPI_TOKEN",
    )
    yapi_cookie: str = Field(
        default="",
        description="Cookie string for YApi authentication",
        alias="YAPI_COOKIE",
    )
    yapi_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for YApi HTTP calls",
        alias="YAPI_TIMEOUT",
    )

    # =====================================================================
    # MCP Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Host address the HTTP/SSE transport binds to",
        alias="YAPI_MCP_HOST",
    )
    server_port: int = Field(
        default=3388,
        description="Port the HTTP/SSE transport listens on",
        alias="PORT",
    )
    transport: Literal["sse", "stdio"] = Field(
        default="sse",
        description="MCP transport type (sse or stdio)",
        alias="YAPI_MCP_TRANSPORT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="YAPI_MCP_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <LOG_FILE_DIR>/yapi_mcp.log",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def yapi(self) -> YApiConfig:
        """Get YApi connection configuration from environment variables."""
        return YApiConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def server(self) -> ServerConfig:
        """Get MCP server configuration from environment variables."""
        return ServerConfig.model_validate(self.model_dump(by_alias=True))


@lru_cache
def get_settings() -> Settings:
    """Settings read from the environment on first use."""
    return Settings()
