import hashlib
import hmac
import json

import pytest

from wavius.config.settings import WaviusSettings
from wavius.connectors.webhook import (
    SIGNATURE_HEADER,
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)

SETTINGS = WaviusSettings(webhook_enabled=True, webhook_secret="secret")


def _sign(payload: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def test_parse_webhook_request_ok() -> None:
    body = json.dumps({"event": "message.received"}).encode("utf-8")
    headers = {SIGNATURE_HEADER: _sign(body, "secret")}

    payload, result = parse_webhook_request(body, headers, SETTINGS)

    assert payload == {"event": "message.received"}
    assert result is not None
    assert result.valid is True


def test_parse_webhook_request_invalid_signature() -> None:
    body = json.dumps({"event": "x"}).encode("utf-8")
    headers = {SIGNATURE_HEADER: "sha256=deadbeef"}

    with pytest.raises(InvalidSignatureError, match="invalid_signature"):
        parse_webhook_request(body, headers, SETTINGS)


def test_parse_webhook_request_invalid_json() -> None:
    body = b"{invalid}"
    headers = {SIGNATURE_HEADER: _sign(body, "secret")}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, SETTINGS)


def test_parse_webhook_request_not_object() -> None:
    body = b"[1, 2]"
    headers = {SIGNATURE_HEADER: _sign(body, "secret")}

    with pytest.raises(InvalidJsonError, match="payload_not_object"):
        parse_webhook_request(body, headers, SETTINGS)


def test_parse_webhook_request_without_verification() -> None:
    settings = WaviusSettings(webhook_verify_signature=False)

    payload, result = parse_webhook_request(b'{"a": 1}', {}, settings)

    assert payload == {"a": 1}
    assert result is None


def test_parse_webhook_request_empty_body() -> None:
    settings = WaviusSettings(webhook_verify_signature=False)
    payload, _ = parse_webhook_request(b"", {}, settings)
    assert payload == {}


def test_parse_webhook_request_invalid_utf8() -> None:
    settings = WaviusSettings(webhook_verify_signature=False)

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(b'{"a": "\xff"}', {}, settings)
