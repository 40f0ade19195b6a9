"""Modelos de valor do ciclo de uma chamada.

RequestSpec -> (builder) -> ResolvedRequest -> (transport) -> ApiResponse
-> (decoder) -> dict. Todos são transitórios: criados por chamada e descartados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FileAttachment:
    """Arquivo anexado a uma requisição multipart."""

    filename: str
    content: bytes
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """Chamada lógica: método, path relativo e payload.

    Attributes:
        method: Verbo HTTP (GET, POST, PUT, DELETE)
        path: Path relativo à versão da API (ex: /messages/chat)
        payload: Query (GET) ou corpo (demais verbos)
        file: Anexo opcional; quando presente o corpo vira multipart
        instance_id: Instância desta chamada; None usa a da sessão
        operation: Nome da operação (para logs)
    """

    method: str
    path: str
    payload: dict[str, Any] = field(default_factory=dict)
    file: FileAttachment | None = None
    instance_id: str | None = None
    operation: str | None = None


@dataclass(frozen=True, slots=True)
class ResolvedRequest:
    """Requisição pronta para o transporte (URL absoluta, headers e corpo)."""

    method: str
    url: str
    headers: dict[str, str]
    params: dict[str, Any] | None = None
    json: dict[str, Any] | None = None
    data: dict[str, str] | None = None
    files: dict[str, tuple[str, bytes, str]] | None = None

    @property
    def is_multipart(self) -> bool:
        return self.files is not None


@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Resposta HTTP normalizada (sem acoplamento a httpx).

    `body` é o JSON decodificado de forma tolerante (vazio se ausente ou
    inválido); o ResponseDecoder usa `text` para distinguir os dois casos.
    """

    status_code: int
    body: dict[str, Any]
    text: str

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400
