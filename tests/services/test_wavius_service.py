"""Testes para WaviusService."""

from __future__ import annotations

from typing import Any

import pytest

from wavius.services import WaviusService


class FakeClient:
    """Cliente fake que grava as chamadas."""

    def __init__(self, result: dict[str, Any] | None = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._result = result if result is not None else {"ok": True}
        self._token: str | None = None
        self._instance_id: str | None = None

    async def call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        self.calls.append((operation, kwargs))
        return self._result

    def set_token(self, token: str) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_instance_id(self, instance_id: str) -> None:
        self._instance_id = instance_id

    def get_instance_id(self) -> str | None:
        return self._instance_id


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def service(client: FakeClient) -> WaviusService:
    return WaviusService(client)


class TestSendMessages:
    """Helpers de envio."""

    @pytest.mark.asyncio
    async def test_send_message(self, service: WaviusService, client: FakeClient) -> None:
        result = await service.send_message("5511", "Olá", instance_id="i1")

        assert result == {"ok": True}
        assert client.calls == [
            ("send_message", {"data": {"to": "5511", "message": "Olá"}, "instance_id": "i1"})
        ]

    @pytest.mark.asyncio
    async def test_send_image_omits_empty_caption(
        self, service: WaviusService, client: FakeClient
    ) -> None:
        await service.send_image("5511", "https://cdn/img.jpg")
        operation, kwargs = client.calls[-1]
        assert operation == "send_image"
        assert kwargs["data"] == {"to": "5511", "image": "https://cdn/img.jpg"}

    @pytest.mark.asyncio
    async def test_send_document_with_caption(
        self, service: WaviusService, client: FakeClient
    ) -> None:
        await service.send_document("5511", "doc-1", caption="Contrato")
        assert client.calls[-1][1]["data"]["caption"] == "Contrato"

    @pytest.mark.asyncio
    async def test_send_location_keeps_zero_coordinates(
        self, service: WaviusService, client: FakeClient
    ) -> None:
        await service.send_location("5511", 0.0, -46.6, name="Sede")
        assert client.calls[-1][1]["data"] == {
            "to": "5511",
            "latitude": 0.0,
            "longitude": -46.6,
            "name": "Sede",
        }

    @pytest.mark.asyncio
    async def test_send_contact(self, service: WaviusService, client: FakeClient) -> None:
        contact = {"name": "Ana", "phone": "5511"}
        await service.send_contact("5511", contact)
        assert client.calls[-1] == (
            "send_contact",
            {"data": {"to": "5511", "contact": contact}, "instance_id": None},
        )

    @pytest.mark.asyncio
    async def test_audio_and_video(self, service: WaviusService, client: FakeClient) -> None:
        await service.send_audio("5511", "a-1")
        await service.send_video("5511", "v-1", caption="clip")
        assert [c[0] for c in client.calls] == ["send_audio", "send_video"]
        assert client.calls[1][1]["data"]["caption"] == "clip"


class TestOtherOperations:
    """Instância, upload e passthrough."""

    @pytest.mark.asyncio
    async def test_instance_lifecycle(self, service: WaviusService, client: FakeClient) -> None:
        await service.connect_instance("i1")
        await service.get_qr_code("i1")
        await service.get_instance_status("i1")
        await service.disconnect_instance("i1")
        assert [c[0] for c in client.calls] == [
            "connect_instance",
            "get_qr_code",
            "get_instance_status",
            "disconnect_instance",
        ]
        assert all(c[1]["instance_id"] == "i1" for c in client.calls)

    @pytest.mark.asyncio
    async def test_upload_media(self, service: WaviusService, client: FakeClient) -> None:
        await service.upload_media("/tmp/photo.jpg", {"caption": "hi"})
        operation, kwargs = client.calls[-1]
        assert operation == "upload_media"
        assert kwargs["file_path"] == "/tmp/photo.jpg"
        assert kwargs["data"] == {"caption": "hi"}

    @pytest.mark.asyncio
    async def test_call_passthrough(self, service: WaviusService, client: FakeClient) -> None:
        await service.call(
            "add_participants",
            path_params={"group_id": "g1"},
            data={"participants": ["5511"]},
        )
        assert client.calls[-1] == (
            "add_participants",
            {
                "path_params": {"group_id": "g1"},
                "data": {"participants": ["5511"]},
                "instance_id": None,
            },
        )


class TestSession:
    """Acessores delegam ao cliente."""

    def test_token_and_instance(self, service: WaviusService) -> None:
        service.set_token("abc")
        service.set_instance_id("i1")
        assert service.get_token() == "abc"
        assert service.get_instance_id() == "i1"
