"""Contratos e modelos de valor do SDK Wavius."""

from wavius.protocols.http_client import WaviusHttpClientProtocol
from wavius.protocols.models import (
    ApiResponse,
    FileAttachment,
    RequestSpec,
    ResolvedRequest,
)

__all__ = [
    "ApiResponse",
    "FileAttachment",
    "RequestSpec",
    "ResolvedRequest",
    "WaviusHttpClientProtocol",
]
