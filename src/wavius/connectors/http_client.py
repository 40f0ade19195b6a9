"""Cliente HTTP Wavius.

Encadeia os estágios de uma chamada:
RequestBuilder -> HttpClient (retry) -> ResponseDecoder -> chamador.

Mantém a Session (token e instância) do cliente. Uma instância por sessão
lógica; não compartilhar entre tarefas concorrentes que alteram a sessão.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wavius.connectors import request_builder, response_decoder
from wavius.connectors.http_base import HttpClient, HttpClientConfig
from wavius.connectors.routes import get_route
from wavius.connectors.session import Session
from wavius.connectors.wavius_logging import log_api_error, log_request, log_response
from wavius.protocols.models import FileAttachment, RequestSpec
from wavius.utils.errors import ApiError, MediaValidationError

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from wavius.config.settings import WaviusSettings


class WaviusHttpClient:
    """Cliente da API Wavius com roteamento por instância.

    Tratamento:
    - Authorization só quando há token na sessão
    - Prefixo /instances/{id} quando há instância e o path não é escopado
    - Retry fixo em falha de transporte; status >= 400 vira ApiError sem retry
    - Logs de request/response controlados por settings (sem PII)
    """

    def __init__(
        self,
        settings: WaviusSettings,
        session: Session | None = None,
        transport: HttpClient | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa cliente Wavius.

        Args:
            settings: Configuração imutável
            session: Sessão inicial; padrão semeado de settings
            transport: Transporte pronto (ignora http_client)
            http_client: AsyncClient httpx a usar no transporte padrão
        """
        self._settings = settings
        self._session = session or Session.from_settings(settings)
        self._transport = transport or HttpClient(
            HttpClientConfig.from_settings(settings),
            http_client=http_client,
        )

    @property
    def settings(self) -> WaviusSettings:
        return self._settings

    @property
    def session(self) -> Session:
        return self._session

    # Sessão

    def set_token(self, token: str) -> None:
        self._session.set_token(token)

    def get_token(self) -> str | None:
        return self._session.get_token()

    def set_instance_id(self, instance_id: str) -> None:
        self._session.set_instance_id(instance_id)

    def get_instance_id(self) -> str | None:
        return self._session.get_instance_id()

    # Verbos

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            RequestSpec("GET", path, dict(params or {}), instance_id=instance_id)
        )

    async def post(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        *,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            RequestSpec("POST", path, dict(data or {}), instance_id=instance_id)
        )

    async def put(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        *,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            RequestSpec("PUT", path, dict(data or {}), instance_id=instance_id)
        )

    async def delete(
        self,
        path: str,
        data: dict[str, Any] | None = None,
        *,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            RequestSpec("DELETE", path, dict(data or {}), instance_id=instance_id)
        )

    async def upload(
        self,
        path: str,
        file_path: str | Path,
        data: dict[str, Any] | None = None,
        *,
        instance_id: str | None = None,
    ) -> dict[str, Any]:
        """Envia um único corpo multipart: campo `file` + campos extras.

        Raises:
            MediaValidationError: Arquivo ausente, grande demais ou tipo proibido.
        """
        attachment = self._load_attachment(Path(file_path))
        return await self._request(
            RequestSpec(
                "POST",
                path,
                dict(data or {}),
                file=attachment,
                instance_id=instance_id,
            )
        )

    async def call(
        self,
        operation: str,
        *,
        path_params: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        instance_id: str | None = None,
        file_path: str | Path | None = None,
    ) -> dict[str, Any]:
        """Executa uma operação da tabela de rotas.

        Args:
            operation: Nome da operação (ex: "pin_chat")
            path_params: Valores dos placeholders do path
            data: Query (GET) ou corpo (demais verbos)
            instance_id: Instância só desta chamada
            file_path: Arquivo para operações multipart

        Raises:
            RouteNotFoundError: Operação desconhecida.
            MissingPathParameterError: Placeholder sem valor.
        """
        route = get_route(operation)
        path = route.render(**(path_params or {}))
        attachment = None
        if route.multipart:
            if file_path is None:
                raise MediaValidationError("file_path é obrigatório para upload")
            attachment = self._load_attachment(Path(file_path))
        return await self._request(
            RequestSpec(
                route.method,
                path,
                dict(data or {}),
                file=attachment,
                instance_id=instance_id,
                operation=operation,
            )
        )

    # Ciclo de vida

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> WaviusHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # Internos

    async def _request(self, spec: RequestSpec) -> dict[str, Any]:
        operation = spec.operation or f"{spec.method} {spec.path}"
        resolved = request_builder.build(spec, self._session, self._settings)
        log_request(
            self._settings,
            operation,
            resolved.method,
            spec.path,
            spec.instance_id or self._session.get_instance_id(),
        )
        response = await self._transport.execute(resolved)
        log_response(self._settings, operation, response)
        try:
            return response_decoder.decode(response)
        except ApiError as exc:
            log_api_error(exc, operation, resolved.method)
            raise

    def _load_attachment(self, file_path: Path) -> FileAttachment:
        if not file_path.is_file():
            raise MediaValidationError(f"arquivo não encontrado: {file_path.name}")

        size = file_path.stat().st_size
        if size > self._settings.media_max_size_bytes:
            raise MediaValidationError(
                f"arquivo excede {self._settings.media_max_size_bytes} bytes"
            )

        content_type = mimetypes.guess_type(file_path.name)[0]
        allowed = self._settings.media_allowed_types
        if content_type and allowed and content_type not in allowed:
            raise MediaValidationError(f"tipo de mídia não permitido: {content_type}")

        return FileAttachment(
            filename=file_path.name,
            content=file_path.read_bytes(),
            content_type=content_type,
        )


def create_wavius_http_client(
    settings: WaviusSettings | None = None,
) -> WaviusHttpClient:
    """Factory para criar cliente Wavius com config padrão.

    Args:
        settings: WaviusSettings opcional. Se None, carrega do ambiente.
    """
    from wavius.config.settings import get_wavius_settings

    return WaviusHttpClient(settings or get_wavius_settings())
