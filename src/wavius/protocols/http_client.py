"""Protocolos HTTP usados pela camada de serviço.

Evita dependência direta de wavius.connectors.
"""

from __future__ import annotations

from typing import Any, Protocol


class WaviusHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP Wavius."""

    async def call(
        self,
        operation: str,
        *,
        path_params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        instance_id: str | None = None,
        file_path: str | None = None,
    ) -> dict[str, Any]: ...

    def set_token(self, token: str) -> None: ...

    def get_token(self) -> str | None: ...

    def set_instance_id(self, instance_id: str) -> None: ...

    def get_instance_id(self) -> str | None: ...
