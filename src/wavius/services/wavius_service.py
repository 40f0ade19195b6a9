"""Serviço Wavius: chamadas tipadas sobre o cliente HTTP.

Recebe o cliente por injeção no construtor. Helpers tipados cobrem o envio de
mensagens, upload e o ciclo de vida da instância; as demais operações da tabela
de rotas passam por call().

Uso:
    async with create_wavius_http_client() as client:
        service = WaviusService(client)
        await service.send_message("5511999999999", "Olá!")
        await service.call("pin_chat", path_params={"chat_id": "123"})
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from wavius.protocols.http_client import WaviusHttpClientProtocol


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Remove campos opcionais vazios (None ou string vazia)."""
    return {key: value for key, value in data.items() if value not in (None, "")}


class WaviusService:
    """Operações de alto nível da API Wavius.

    Todos os métodos aceitam `instance_id` opcional, válido só para a chamada.
    Retornam o dict decodificado da API ou propagam WaviusError.
    """

    def __init__(self, client: WaviusHttpClientProtocol) -> None:
        self._client = client

    # Sessão

    def set_token(self, token: str) -> None:
        self._client.set_token(token)

    def get_token(self) -> str | None:
        return self._client.get_token()

    def set_instance_id(self, instance_id: str) -> None:
        self._client.set_instance_id(instance_id)

    def get_instance_id(self) -> str | None:
        return self._client.get_instance_id()

    async def call(
        self,
        operation: str,
        *,
        path_params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        """Executa qualquer operação da tabela de rotas pelo nome."""
        return await self._client.call(
            operation,
            path_params=path_params,
            data=data,
            instance_id=instance_id,
        )

    # Envio de mensagens

    async def send_message(
        self, to: str, message: str, instance_id: str | None = None
    ) -> dict[str, Any]:
        return await self._client.call(
            "send_message",
            data={"to": to, "message": message},
            instance_id=instance_id,
        )

    async def send_image(
        self,
        to: str,
        image: str,
        caption: str | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        """Envia imagem por URL ou id de mídia previamente enviada."""
        return await self._client.call(
            "send_image",
            data=_compact({"to": to, "image": image, "caption": caption}),
            instance_id=instance_id,
        )

    async def send_document(
        self,
        to: str,
        document: str,
        caption: str | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._client.call(
            "send_document",
            data=_compact({"to": to, "document": document, "caption": caption}),
            instance_id=instance_id,
        )

    async def send_audio(
        self, to: str, audio: str, instance_id: str | None = None
    ) -> dict[str, Any]:
        return await self._client.call(
            "send_audio",
            data={"to": to, "audio": audio},
            instance_id=instance_id,
        )

    async def send_video(
        self,
        to: str,
        video: str,
        caption: str | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._client.call(
            "send_video",
            data=_compact({"to": to, "video": video, "caption": caption}),
            instance_id=instance_id,
        )

    async def send_location(
        self,
        to: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        data = _compact(
            {
                "to": to,
                "latitude": latitude,
                "longitude": longitude,
                "name": name,
                "address": address,
            }
        )
        return await self._client.call(
            "send_location", data=data, instance_id=instance_id
        )

    async def send_contact(
        self,
        to: str,
        contact: dict[str, Any],
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._client.call(
            "send_contact",
            data={"to": to, "contact": contact},
            instance_id=instance_id,
        )

    # Mídia

    async def upload_media(
        self,
        file_path: str | Path,
        data: dict[str, Any] | None = None,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        """Upload multipart: campo `file` com o nome base do arquivo + `data`."""
        return await self._client.call(
            "upload_media",
            data=data,
            instance_id=instance_id,
            file_path=str(file_path),
        )

    # Instância

    async def get_instance_status(
        self, instance_id: str | None = None
    ) -> dict[str, Any]:
        return await self._client.call("get_instance_status", instance_id=instance_id)

    async def connect_instance(self, instance_id: str | None = None) -> dict[str, Any]:
        return await self._client.call("connect_instance", instance_id=instance_id)

    async def disconnect_instance(
        self, instance_id: str | None = None
    ) -> dict[str, Any]:
        return await self._client.call("disconnect_instance", instance_id=instance_id)

    async def get_qr_code(self, instance_id: str | None = None) -> dict[str, Any]:
        return await self._client.call("get_qr_code", instance_id=instance_id)
