"""Testes para a tabela de rotas."""

from __future__ import annotations

import pytest

from wavius.connectors.routes import ROUTES, Route, get_route
from wavius.utils.errors import MissingPathParameterError, RouteNotFoundError


class TestRoutingTable:
    """Pares fixos verbo + path."""

    @pytest.mark.parametrize(
        ("operation", "method", "template"),
        [
            ("send_message", "POST", "/messages/chat"),
            ("disconnect_instance", "DELETE", "/disconnect"),
            ("get_qr_code", "GET", "/qr"),
            ("update_webhook", "PUT", "/webhooks/{webhook_id}"),
            ("remove_participants", "DELETE", "/groups/{group_id}/participants"),
            ("cancel_job", "DELETE", "/queue/jobs/{job_id}"),
            ("get_product", "GET", "/business/catalog/{product_id}"),
        ],
    )
    def test_known_routes(self, operation: str, method: str, template: str) -> None:
        route = get_route(operation)
        assert route.method == method
        assert route.path_template == template

    def test_only_upload_is_multipart(self) -> None:
        multipart = [name for name, route in ROUTES.items() if route.multipart]
        assert multipart == ["upload_media"]

    def test_all_paths_are_relative_to_instance(self) -> None:
        for route in ROUTES.values():
            assert route.path_template.startswith("/")
            assert "/instances/" not in route.path_template

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ROUTES["x"] = Route("GET", "/x")  # type: ignore[index]

    def test_unknown_operation(self) -> None:
        with pytest.raises(RouteNotFoundError, match="unknown_operation: nope"):
            get_route("nope")


class TestRender:
    """Preenchimento de placeholders."""

    def test_render_fills_and_quotes(self) -> None:
        route = get_route("pin_chat")
        assert route.render(chat_id="5511@c.us") == "/chats/5511%40c.us/pin"

    def test_render_without_placeholders(self) -> None:
        assert get_route("get_chats").render() == "/chats"

    def test_missing_parameter(self) -> None:
        with pytest.raises(MissingPathParameterError, match="group_id"):
            get_route("update_group").render()

    def test_placeholders(self) -> None:
        assert get_route("get_analytics").placeholders == ("type",)
