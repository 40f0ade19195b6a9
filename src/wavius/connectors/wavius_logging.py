"""Helpers de logging de chamadas Wavius (sem PII).

Nunca loga token, payload ou corpo de resposta; apenas metadados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wavius.config.logging import resolve_log_level

if TYPE_CHECKING:
    from wavius.config.settings import WaviusSettings
    from wavius.protocols.models import ApiResponse
    from wavius.utils.errors import ApiError

logger = logging.getLogger(__name__)


def _level(settings: WaviusSettings) -> int:
    try:
        return resolve_log_level(settings.log_level)
    except ValueError:
        return logging.INFO


def log_request(
    settings: WaviusSettings,
    operation: str,
    method: str,
    path: str,
    instance_id: str | None,
) -> None:
    """Loga a requisição quando logging_enabled e log_requests."""
    if not (settings.logging_enabled and settings.log_requests):
        return
    logger.log(
        _level(settings),
        "wavius_api_request",
        extra={
            "operation": operation,
            "method": method,
            "path": path,
            "instance_id": instance_id,
        },
    )


def log_response(
    settings: WaviusSettings,
    operation: str,
    response: ApiResponse,
) -> None:
    """Loga a resposta quando logging_enabled e log_responses."""
    if not (settings.logging_enabled and settings.log_responses):
        return
    logger.log(
        _level(settings),
        "wavius_api_response",
        extra={
            "operation": operation,
            "status_code": response.status_code,
            "body_size": len(response.text),
        },
    )


def log_api_error(error: ApiError, operation: str, method: str) -> None:
    """Loga erro da API sem expor a mensagem bruta."""
    logger.warning(
        "wavius_api_error",
        extra={
            "operation": operation,
            "method": method,
            "status_code": error.status_code,
            "is_permanent": error.is_permanent,
        },
    )
