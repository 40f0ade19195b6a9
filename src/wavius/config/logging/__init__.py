"""Logging estruturado do SDK Wavius.

Uso:
    from wavius.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação host
    configure_logging(level="INFO")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("wavius_api_request", extra={"operation": "send_message"})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from wavius.config.logging.config import (
    configure_logging,
    get_logger,
    resolve_log_level,
)
from wavius.config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from wavius.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "resolve_log_level",
]
