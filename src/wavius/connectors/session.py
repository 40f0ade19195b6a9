"""Estado mutável por cliente: token e instância correntes.

Dois campos opcionais independentes; qualquer combinação é válida a qualquer
momento. Não é thread-safe: um cliente por sessão lógica, ou lock externo em
volta de setter + requisição.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wavius.config.settings import WaviusSettings


@dataclass
class Session:
    """Token bearer e instance id usados nas próximas requisições."""

    token: str | None = None
    instance_id: str | None = None

    @classmethod
    def from_settings(cls, settings: WaviusSettings) -> Session:
        """Semeia a sessão com token e instância padrão (vazio = não definido)."""
        return cls(
            token=settings.token or None,
            instance_id=settings.default_instance_id or None,
        )

    def set_token(self, token: str) -> None:
        self.token = token or None

    def get_token(self) -> str | None:
        return self.token

    def set_instance_id(self, instance_id: str) -> None:
        self.instance_id = instance_id or None

    def get_instance_id(self) -> str | None:
        return self.instance_id
