"""Configuração do pytest para o SDK Wavius."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from wavius.config.settings import WaviusSettings  # noqa: E402


@pytest.fixture
def settings() -> WaviusSettings:
    """Settings determinísticas (sem token/instância, retry sem espera real)."""
    return WaviusSettings(
        api_base_url="https://api.test",
        api_version="v1",
        request_timeout_seconds=5.0,
        retry_attempts=3,
        retry_delay_ms=1000,
    )
