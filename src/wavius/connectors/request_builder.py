"""RequestBuilder: compõe URL, headers e corpo de uma chamada lógica.

Função pura das entradas (RequestSpec, Session, WaviusSettings), sem IO.
"""

from __future__ import annotations

import json
import mimetypes
from typing import TYPE_CHECKING, Any

from wavius._version import __version__
from wavius.protocols.models import ResolvedRequest

if TYPE_CHECKING:
    from wavius.config.settings import WaviusSettings
    from wavius.connectors.session import Session
    from wavius.protocols.models import RequestSpec

INSTANCES_SEGMENT = "/instances/"
USER_AGENT = f"wavius-python/{__version__}"

# Verbos cujo payload vai na query string
_QUERY_METHODS = frozenset({"GET", "HEAD"})


def resolve_path(path: str, instance_id: str | None) -> str:
    """Aplica o prefixo /instances/{id} quando há instância e o path não o tem.

    Idempotente: um path já escopado (contém /instances/) não é alterado.
    """
    if not path.startswith("/"):
        path = f"/{path}"
    if instance_id and INSTANCES_SEGMENT not in path:
        return f"/instances/{instance_id}{path}"
    return path


def build_auth_headers(token: str | None, settings: WaviusSettings) -> dict[str, str]:
    """Header de autenticação; vazio quando não há token."""
    if not token:
        return {}
    prefix = settings.token_prefix.strip()
    value = f"{prefix} {token}" if prefix else token
    return {settings.token_header: value}


def encode_multipart_field(value: Any) -> str | None:
    """Serializa campo não-arquivo: objetos/listas/bools viram JSON, None é omitido."""
    if value is None:
        return None
    if isinstance(value, (dict, list, tuple, bool)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def build(
    spec: RequestSpec,
    session: Session,
    settings: WaviusSettings,
) -> ResolvedRequest:
    """Resolve a RequestSpec em requisição absoluta.

    URL: {api_base_url}/{api_version}{instancePrefix}{path}. A instância da RequestSpec
    (quando informada) tem precedência sobre a da sessão, só nesta chamada.
    """
    method = spec.method.upper()
    instance_id = spec.instance_id or session.get_instance_id()
    url = f"{settings.api_endpoint}{resolve_path(spec.path, instance_id)}"

    headers = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
        **build_auth_headers(session.get_token(), settings),
    }

    if spec.file is not None:
        content_type = (
            spec.file.content_type
            or mimetypes.guess_type(spec.file.filename)[0]
            or "application/octet-stream"
        )
        fields: dict[str, str] = {}
        for key, value in spec.payload.items():
            encoded = encode_multipart_field(value)
            if encoded is not None:
                fields[key] = encoded
        return ResolvedRequest(
            method=method,
            url=url,
            headers=headers,
            data=fields,
            files={"file": (spec.file.filename, spec.file.content, content_type)},
        )

    headers["Content-Type"] = "application/json"
    if method in _QUERY_METHODS:
        return ResolvedRequest(
            method=method,
            url=url,
            headers=headers,
            params=dict(spec.payload) or None,
        )
    if method == "DELETE" and not spec.payload:
        return ResolvedRequest(method=method, url=url, headers=headers)
    return ResolvedRequest(
        method=method,
        url=url,
        headers=headers,
        json=dict(spec.payload),
    )
