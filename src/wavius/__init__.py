"""SDK Python para a API WhatsApp da Wavius.

Uso:
    from wavius import WaviusService, create_wavius_http_client

    async with create_wavius_http_client() as client:
        service = WaviusService(client)
        await service.send_message("5511999999999", "Olá!")
"""

from wavius._version import __version__
from wavius.config.settings import WaviusSettings, get_wavius_settings
from wavius.connectors import Session, WaviusHttpClient, create_wavius_http_client
from wavius.services import WaviusService
from wavius.utils.errors import (
    ApiError,
    DecodeError,
    TransportError,
    TransportTimeoutError,
    WaviusError,
)

__all__ = [
    "ApiError",
    "DecodeError",
    "Session",
    "TransportError",
    "TransportTimeoutError",
    "WaviusError",
    "WaviusHttpClient",
    "WaviusService",
    "WaviusSettings",
    "__version__",
    "create_wavius_http_client",
    "get_wavius_settings",
]
