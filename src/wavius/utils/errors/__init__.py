"""Exceções compartilhadas do SDK Wavius."""

from .exceptions import (
    ApiError,
    DecodeError,
    MediaValidationError,
    MissingPathParameterError,
    RouteNotFoundError,
    TransportError,
    TransportTimeoutError,
    WaviusError,
)

__all__ = [
    "ApiError",
    "DecodeError",
    "MediaValidationError",
    "MissingPathParameterError",
    "RouteNotFoundError",
    "TransportError",
    "TransportTimeoutError",
    "WaviusError",
]
