"""Serviços de alto nível do SDK Wavius."""

from wavius.services.wavius_service import WaviusService

__all__ = ["WaviusService"]
