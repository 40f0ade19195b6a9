"""Configuração centralizada de logging.

O SDK nunca configura o root logger sozinho: a aplicação host chama
configure_logging() uma vez (ou usa a própria configuração). Os módulos do SDK
apenas obtêm loggers via get_logger(__name__).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wavius.config.logging.filters import CorrelationIdFilter, RedactSecretsFilter
from wavius.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "wavius"


def resolve_log_level(level: str) -> int:
    """Converte nome de nível (case-insensitive) em constante do logging.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return logging.getLevelName(level_upper)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar da aplicação host).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    numeric_level = resolve_log_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(RedactSecretsFilter())

    root = logging.getLogger()
    root.setLevel(numeric_level)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
