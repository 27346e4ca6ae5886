"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification of the HTTP transport.
"""

from fastapi import APIRouter

from ..constant import PROJECT_NAME, VERSION

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the MCP HTTP server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    It does not contact YApi.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the MCP server.",
    response_description="Version object.",
)
async def version():
    return {"name": PROJECT_NAME, "version": VERSION}
