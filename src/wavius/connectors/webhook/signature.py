"""Validação de assinatura HMAC-SHA256 dos webhooks Wavius."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "X-Wavius-Signature"
_SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação (error é um código curto, sem PII)."""

    valid: bool
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verify_webhook_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Verifica o header X-Wavius-Signature (`sha256=<hex>` ou hex puro).

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (busca case-insensitive)
        secret: Secret configurado
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    expected = signature.strip()
    if expected.lower().startswith(_SIGNATURE_PREFIX):
        expected = expected[len(_SIGNATURE_PREFIX) :]

    computed = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    # bytes: header pode trazer caracteres não-ASCII
    if not hmac.compare_digest(
        computed.encode("ascii"), expected.lower().encode("utf-8", "replace")
    ):
        return SignatureResult(valid=False, error="invalid_signature")
    return SignatureResult(valid=True)
