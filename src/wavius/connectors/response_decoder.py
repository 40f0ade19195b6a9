"""ResponseDecoder: converte ApiResponse em dict ou erro tipado."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from wavius.utils.errors import ApiError, DecodeError

if TYPE_CHECKING:
    from wavius.protocols.models import ApiResponse


def extract_error_message(response: ApiResponse) -> str:
    """Campo `message` do JSON quando presente (mesmo vazio); senão o corpo bruto."""
    if response.body.get("message") is not None:
        return str(response.body["message"])
    return response.text


def decode(response: ApiResponse) -> dict[str, Any]:
    """Decodifica a resposta.

    Returns:
        Mapping decodificado; {} para corpo vazio (ex: 204). JSON válido que
        não é objeto (ex: lista) é devolvido como {"data": valor}.

    Raises:
        ApiError: Status >= 400.
        DecodeError: Status < 400 com corpo que não é JSON.
    """
    if response.is_error:
        raise ApiError(response.status_code, extract_error_message(response))

    if response.body:
        return response.body

    text = response.text.strip()
    if not text:
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        raise DecodeError(response.status_code, response.text) from None
    if isinstance(data, dict):
        return data
    return {"data": data}
