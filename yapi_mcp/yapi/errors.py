"""Error types raised by the YApi adapter.

Purpose:
- Give every failure mode of an upstream call its own exception type so the
  tool layer can report it without inspecting ``httpx`` internals.
- Keep HTTP-oriented context (status code, upstream message) for diagnosis.

Usage:
- Catch ``YApiError`` for any adapter failure.
- ``UpstreamHttpError`` exposes ``status_code``; ``UpstreamLogicalError`` is
  raised when YApi answered 2xx but its envelope reports ``errcode != 0``.
"""

from __future__ import annotations

from typing import Optional


class YApiError(Exception):
    """Base error for YApi adapter failures."""


class TransportError(YApiError):
    """Raised when the HTTP call itself could not complete (DNS, refused connection, timeout...)."""

    def __init__(self, message: str = "与YApi服务器通信失败") -> None:
        super().__init__(message)


class UpstreamHttpError(YApiError):
    """Raised when YApi answered with a non-2xx status.

    Args:
        status_code: HTTP status code of the response.
        message: ``errmsg`` from the response body, or a generic fallback.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class UpstreamLogicalError(YApiError):
    """Raised when the envelope status code signals failure."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidEnvelopeError(YApiError):
    """Raised when a 2xx response body is not a YApi envelope."""
