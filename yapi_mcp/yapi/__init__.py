from .client import YApiClient
from .errors import (
    InvalidEnvelopeError,
    TransportError,
    UpstreamHttpError,
    UpstreamLogicalError,
    YApiError,
)

__all__ = [
    "YApiClient",
    "YApiError",
    "TransportError",
    "UpstreamHttpError",
    "UpstreamLogicalError",
    "InvalidEnvelopeError",
]
