"""Tabela estática de rotas da API Wavius.

Cada operação é um par fixo {verbo, path template}. Paths são relativos à
instância: o RequestBuilder aplica o prefixo /instances/{id} quando houver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING
from urllib.parse import quote

from wavius.utils.errors import MissingPathParameterError, RouteNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True, slots=True)
class Route:
    """Verbo HTTP + path template (ex: /chats/{chat_id}/pin)."""

    method: str
    path_template: str
    multipart: bool = False

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path_template))

    def render(self, **params: str) -> str:
        """Preenche o template com valores URL-quoted.

        Raises:
            MissingPathParameterError: Se algum placeholder ficar sem valor.
        """
        missing = [name for name in self.placeholders if not params.get(name)]
        if missing:
            raise MissingPathParameterError(
                f"missing_path_parameter: {', '.join(missing)}"
            )
        return _PLACEHOLDER.sub(
            lambda match: quote(str(params[match.group(1)]), safe=""),
            self.path_template,
        )


_ROUTES: dict[str, Route] = {
    # Envio de mensagens
    "send_message": Route("POST", "/messages/chat"),
    "send_image": Route("POST", "/messages/image"),
    "send_document": Route("POST", "/messages/document"),
    "send_audio": Route("POST", "/messages/audio"),
    "send_video": Route("POST", "/messages/video"),
    "send_location": Route("POST", "/messages/location"),
    "send_contact": Route("POST", "/messages/contact"),
    "delete_message": Route("DELETE", "/messages/delete"),
    "resend_message": Route("POST", "/messages/resend-by-id"),
    "resend_messages_by_status": Route("POST", "/messages/resend-by-status"),
    # Leitura
    "get_messages": Route("GET", "/messages"),
    "get_chats": Route("GET", "/chats"),
    "get_contacts": Route("GET", "/contacts"),
    "get_groups": Route("GET", "/groups"),
    "get_analytics": Route("GET", "/analytics/{type}"),
    "get_reports": Route("GET", "/reports/{type}"),
    "get_queue_stats": Route("GET", "/queue/stats"),
    # Ciclo de vida da instância
    "get_instance_status": Route("GET", "/status"),
    "connect_instance": Route("POST", "/connect"),
    "disconnect_instance": Route("DELETE", "/disconnect"),
    "get_qr_code": Route("GET", "/qr"),
    # Perfil comercial
    "get_business_profile": Route("GET", "/business/profile"),
    "update_business_profile": Route("PUT", "/business/profile"),
    # Webhooks
    "get_webhooks": Route("GET", "/webhooks"),
    "create_webhook": Route("POST", "/webhooks"),
    "update_webhook": Route("PUT", "/webhooks/{webhook_id}"),
    "delete_webhook": Route("DELETE", "/webhooks/{webhook_id}"),
    # Mídia
    "upload_media": Route("POST", "/media/upload", multipart=True),
    "get_media": Route("GET", "/media/{media_id}"),
    "delete_media": Route("DELETE", "/media/{media_id}"),
    # Estado de chats
    "archive_chat": Route("POST", "/chats/{chat_id}/archive"),
    "unarchive_chat": Route("POST", "/chats/{chat_id}/unarchive"),
    "pin_chat": Route("POST", "/chats/{chat_id}/pin"),
    "unpin_chat": Route("POST", "/chats/{chat_id}/unpin"),
    "delete_chat": Route("DELETE", "/chats/{chat_id}"),
    # Contatos
    "update_contact": Route("PUT", "/contacts/{contact_id}"),
    "delete_contact": Route("DELETE", "/contacts/{contact_id}"),
    # Grupos
    "create_group": Route("POST", "/groups"),
    "update_group": Route("PUT", "/groups/{group_id}"),
    "delete_group": Route("DELETE", "/groups/{group_id}"),
    "add_participants": Route("POST", "/groups/{group_id}/participants"),
    "remove_participants": Route("DELETE", "/groups/{group_id}/participants"),
    "promote_admins": Route("POST", "/groups/{group_id}/admins"),
    "demote_admins": Route("DELETE", "/groups/{group_id}/admins"),
    # Catálogo
    "get_business_catalog": Route("GET", "/business/catalog"),
    "create_business_catalog": Route("POST", "/business/catalog"),
    "get_product": Route("GET", "/business/catalog/{product_id}"),
    "update_product": Route("PUT", "/business/catalog/{product_id}"),
    "delete_product": Route("DELETE", "/business/catalog/{product_id}"),
    # Fila
    "get_job": Route("GET", "/queue/jobs/{job_id}"),
    "cancel_job": Route("DELETE", "/queue/jobs/{job_id}"),
}

ROUTES: Mapping[str, Route] = MappingProxyType(_ROUTES)


def get_route(operation: str) -> Route:
    """Retorna a rota da operação.

    Raises:
        RouteNotFoundError: Se a operação não existe.
    """
    try:
        return ROUTES[operation]
    except KeyError:
        raise RouteNotFoundError(f"unknown_operation: {operation}") from None
