"""Taxonomia de erros do cliente Wavius.

- TransportError: falha de rede/timeout antes de obter resposta (retentada).
- ApiError: API respondeu status >= 400 (nunca retentada).
- DecodeError: resposta de sucesso com corpo JSON malformado.

Mensagens de erro nunca carregam tokens nem payloads.
"""

from __future__ import annotations


class WaviusError(Exception):
    """Base para todos os erros do SDK."""


class TransportError(WaviusError):
    """Falha de conexão antes de obter resposta HTTP."""

    def __init__(self, message: str, attempts: int = 1) -> None:
        super().__init__(message)
        self.attempts = attempts


class TransportTimeoutError(TransportError):
    """Timeout configurado excedido em todas as tentativas."""


class ApiError(WaviusError):
    """API Wavius respondeu com status >= 400."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Wavius API Error: {status_code} - {message}")
        self.status_code = status_code
        self.message = message

    @property
    def is_permanent(self) -> bool:
        """True para 4xx exceto 429 (rate limit); 5xx é transitório."""
        return self.status_code != 429 and self.status_code < 500


class DecodeError(WaviusError):
    """Resposta de sucesso com corpo que não é JSON válido."""

    def __init__(self, status_code: int, raw_body: str) -> None:
        super().__init__(f"invalid_json_response (status={status_code})")
        self.status_code = status_code
        self.raw_body = raw_body


class RouteNotFoundError(WaviusError, KeyError):
    """Operação não existe na tabela de rotas."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown_operation"


class MissingPathParameterError(WaviusError, ValueError):
    """Placeholder do path template sem valor."""


class MediaValidationError(WaviusError, ValueError):
    """Arquivo de upload ausente, grande demais ou de tipo não permitido."""
