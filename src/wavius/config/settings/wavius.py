"""Settings do cliente Wavius.

Valor imutável criado uma vez na inicialização e compartilhado (somente leitura)
por todas as requisições. Carregado de variáveis de ambiente WAVIUS_*.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API Wavius
WAVIUS_API_BASE_URL: str = "https://api.wavius.co"
WAVIUS_API_VERSION: str = "v1"

DEFAULT_ALLOWED_MEDIA_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "video/mp4",
    "video/3gpp",
    "audio/mp3",
    "audio/mpeg",
    "audio/ogg",
    "audio/wav",
    "audio/x-wav",
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

_VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class WaviusSettings:
    """Configurações do cliente Wavius.

    Attributes:
        api_base_url: URL base da API (sem versão)
        api_version: Versão da API (ex: v1)
        request_timeout_seconds: Timeout por tentativa HTTP
        retry_attempts: Total de tentativas em falha de transporte
        retry_delay_ms: Espera fixa entre tentativas
        token: Bearer token padrão (vazio = sem Authorization)
        token_header: Nome do header de autenticação
        token_prefix: Prefixo do token no header (ex: Bearer)
        default_instance_id: Instância padrão (vazio = sem escopo)
        connection_timeout_seconds: Timeout sugerido para conectar instância
        webhook_enabled: Webhooks de entrada habilitados
        webhook_secret: Secret HMAC dos webhooks
        webhook_verify_signature: Exige assinatura válida nos webhooks
        logging_enabled: Liga logs de request/response
        log_level: Nível usado nos logs de request/response
        log_requests: Loga cada request (sem payload)
        log_responses: Loga cada response (sem corpo)
        cache_ttl_seconds: TTL de cache do host (não usado pelo cliente)
        media_max_size_bytes: Tamanho máximo de upload
        media_allowed_types: MIME types aceitos em upload
    """

    # API
    api_base_url: str = WAVIUS_API_BASE_URL
    api_version: str = WAVIUS_API_VERSION

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    retry_attempts: int = 3
    retry_delay_ms: int = 1000

    # Autenticação
    token: str = ""
    token_header: str = "Authorization"
    token_prefix: str = "Bearer"

    # Instância
    default_instance_id: str = ""
    connection_timeout_seconds: int = 60

    # Webhook
    webhook_enabled: bool = False
    webhook_secret: str = ""
    webhook_verify_signature: bool = True

    # Logging
    logging_enabled: bool = True
    log_level: str = "info"
    log_requests: bool = False
    log_responses: bool = False

    # Cache (responsabilidade do host)
    cache_ttl_seconds: int = 3600

    # Media upload
    media_max_size_bytes: int = 16 * 1024 * 1024  # 16MB
    media_allowed_types: tuple[str, ...] = DEFAULT_ALLOWED_MEDIA_TYPES

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version.strip('/')}"

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("WAVIUS_API_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("WAVIUS_API_TIMEOUT deve ser > 0")

        if self.retry_attempts < 1:
            errors.append("WAVIUS_API_RETRY_ATTEMPTS deve ser >= 1")

        if self.retry_delay_ms < 0:
            errors.append("WAVIUS_API_RETRY_DELAY deve ser >= 0")

        if self.log_level.lower() not in _VALID_LOG_LEVELS:
            errors.append(
                "WAVIUS_LOG_LEVEL deve ser um de: "
                + ", ".join(sorted(_VALID_LOG_LEVELS))
            )

        if (
            self.webhook_enabled
            and self.webhook_verify_signature
            and not self.webhook_secret
        ):
            errors.append("WAVIUS_WEBHOOK_SECRET não configurado")

        return errors


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _load_from_env() -> WaviusSettings:
    """Carrega WaviusSettings a partir de variáveis de ambiente."""
    return WaviusSettings(
        api_base_url=os.getenv("WAVIUS_API_BASE_URL", WAVIUS_API_BASE_URL),
        api_version=os.getenv("WAVIUS_API_VERSION", WAVIUS_API_VERSION),
        request_timeout_seconds=float(os.getenv("WAVIUS_API_TIMEOUT", "30")),
        retry_attempts=int(os.getenv("WAVIUS_API_RETRY_ATTEMPTS", "3")),
        retry_delay_ms=int(os.getenv("WAVIUS_API_RETRY_DELAY", "1000")),
        token=os.getenv("WAVIUS_API_TOKEN", ""),
        token_header=os.getenv("WAVIUS_TOKEN_HEADER", "Authorization"),
        token_prefix=os.getenv("WAVIUS_TOKEN_PREFIX", "Bearer"),
        default_instance_id=os.getenv("WAVIUS_DEFAULT_INSTANCE_ID", ""),
        connection_timeout_seconds=int(os.getenv("WAVIUS_CONNECTION_TIMEOUT", "60")),
        webhook_enabled=_env_bool("WAVIUS_WEBHOOK_ENABLED", False),
        webhook_secret=os.getenv("WAVIUS_WEBHOOK_SECRET", ""),
        webhook_verify_signature=_env_bool("WAVIUS_VERIFY_WEBHOOK_SIGNATURE", True),
        logging_enabled=_env_bool("WAVIUS_LOGGING_ENABLED", True),
        log_level=os.getenv("WAVIUS_LOG_LEVEL", "info").lower(),
        log_requests=_env_bool("WAVIUS_LOG_REQUESTS", False),
        log_responses=_env_bool("WAVIUS_LOG_RESPONSES", False),
        cache_ttl_seconds=int(os.getenv("WAVIUS_CACHE_TTL", "3600")),
        media_max_size_bytes=int(
            os.getenv("WAVIUS_MAX_FILE_SIZE", str(16 * 1024 * 1024))
        ),
    )


@lru_cache(maxsize=1)
def get_wavius_settings() -> WaviusSettings:
    """Retorna instância cacheada de WaviusSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
