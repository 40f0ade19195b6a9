"""TransportClient: executa a chamada HTTP com timeout e retry fixo.

- Retry apenas em falha de transporte (conexão, timeout), nunca em status HTTP.
- `retry_attempts` é o total de tentativas; espera fixa `retry_delay` entre elas.
- Sem cache e sem chave de idempotência: o chamador evita reenvio duplicado de
  operações não idempotentes (ex: send_message).
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from wavius.protocols.models import ApiResponse
from wavius.utils.errors import TransportError, TransportTimeoutError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from wavius.config.settings import WaviusSettings
    from wavius.protocols.models import ResolvedRequest

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = 30.0
    retry_attempts: int = 3
    retry_delay_seconds: float = 1.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    @classmethod
    def from_settings(cls, settings: WaviusSettings) -> HttpClientConfig:
        return cls(
            timeout_seconds=settings.request_timeout_seconds,
            retry_attempts=settings.retry_attempts,
            retry_delay_seconds=settings.retry_delay_seconds,
        )


def parse_json_body(text: str) -> dict[str, Any]:
    """Decodifica JSON de forma tolerante; {} se vazio, inválido ou não-objeto."""
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


class HttpClient:
    """Transporte assíncrono sobre httpx.AsyncClient.

    O AsyncClient pode ser injetado (testes usam httpx.MockTransport); caso
    contrário é criado sob demanda e fechado em aclose().
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client
        self._owns_client = http_client is None
        self._sleep = sleep

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def execute(self, request: ResolvedRequest) -> ApiResponse:
        """Executa a requisição, retentando falhas de transporte.

        Raises:
            TransportTimeoutError: Timeout em todas as tentativas.
            TransportError: Falha de conexão em todas as tentativas, ou erro
                de requisição não retentável (ex: Content-Encoding inválido).
        """
        attempts = max(1, self._config.retry_attempts)
        for attempt in range(1, attempts + 1):
            try:
                response = await self._send(request)
            except httpx.TimeoutException as exc:
                if attempt >= attempts:
                    logger.warning(
                        "wavius_http_transport_failed",
                        extra={"reason": "timeout", "attempts": attempt},
                    )
                    raise TransportTimeoutError(
                        "http_timeout", attempts=attempt
                    ) from exc
                await self._wait_before_retry(attempt, "timeout")
            except httpx.TransportError as exc:
                if attempt >= attempts:
                    logger.warning(
                        "wavius_http_transport_failed",
                        extra={"reason": type(exc).__name__, "attempts": attempt},
                    )
                    raise TransportError(
                        "http_connection_error", attempts=attempt
                    ) from exc
                await self._wait_before_retry(attempt, type(exc).__name__)
            except httpx.RequestError as exc:
                # DecodingError, TooManyRedirects etc.: repetir não muda o resultado
                logger.warning(
                    "wavius_http_transport_failed",
                    extra={"reason": type(exc).__name__, "attempts": attempt},
                )
                raise TransportError("http_request_error", attempts=attempt) from exc
            else:
                return ApiResponse(
                    status_code=response.status_code,
                    body=parse_json_body(response.text),
                    text=response.text,
                )
        raise TransportError("http_retry_exhausted", attempts=attempts)

    async def _send(self, request: ResolvedRequest) -> httpx.Response:
        client = self._get_http_client()
        headers = {**self._config.default_headers, **request.headers}
        return await client.request(
            request.method,
            request.url,
            headers=headers,
            params=request.params,
            json=request.json,
            data=request.data,
            files=request.files,
            timeout=self._config.timeout_seconds,
        )

    async def _wait_before_retry(self, attempt: int, reason: str) -> None:
        delay = self._config.retry_delay_seconds
        logger.info(
            "wavius_http_retry",
            extra={"attempt": attempt, "reason": reason, "delay_seconds": delay},
        )
        if delay > 0:
            await self._sleep(delay)
