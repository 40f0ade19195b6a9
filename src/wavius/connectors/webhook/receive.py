"""Parse e validação inicial do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .signature import SignatureResult, verify_webhook_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wavius.config.settings import WaviusSettings


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    settings: WaviusSettings,
) -> tuple[dict[str, Any], SignatureResult | None]:
    """Valida assinatura (se exigida) e parseia JSON do webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        settings: Settings com webhook_secret e webhook_verify_signature

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        (payload dict, SignatureResult ou None quando a verificação está desligada)
    """
    signature_result = None
    if settings.webhook_verify_signature:
        signature_result = verify_webhook_signature(
            raw_body, headers, settings.webhook_secret
        )
        if not signature_result.valid:
            raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload, signature_result
