"""Conector Wavius - único ponto de IO do SDK.

Responsabilidades:
- Montagem de requisições (URL, instância, auth, multipart)
- Transporte HTTP com timeout e retry fixo
- Decodificação de respostas e erros tipados
- Tabela de rotas da API
- Assinatura de webhooks
"""

from .http_base import HttpClient, HttpClientConfig
from .http_client import WaviusHttpClient, create_wavius_http_client
from .request_builder import build, resolve_path
from .response_decoder import decode
from .routes import ROUTES, Route, get_route
from .session import Session
from .webhook import SignatureResult, parse_webhook_request, verify_webhook_signature

__all__ = [
    "ROUTES",
    "HttpClient",
    "HttpClientConfig",
    "Route",
    "Session",
    "SignatureResult",
    "WaviusHttpClient",
    "build",
    "create_wavius_http_client",
    "decode",
    "get_route",
    "parse_webhook_request",
    "resolve_path",
    "verify_webhook_signature",
]
