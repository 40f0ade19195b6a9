"""Webhook Wavius: assinatura HMAC e parsing seguro."""

from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from .signature import SIGNATURE_HEADER, SignatureResult, verify_webhook_signature

__all__ = [
    "SIGNATURE_HEADER",
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_webhook_signature",
]
