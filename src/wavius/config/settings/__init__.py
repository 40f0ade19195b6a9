"""Agregador de settings do SDK Wavius."""

from __future__ import annotations

from wavius.config.settings.wavius import (
    DEFAULT_ALLOWED_MEDIA_TYPES,
    WAVIUS_API_BASE_URL,
    WAVIUS_API_VERSION,
    WaviusSettings,
    get_wavius_settings,
)

__all__ = [
    "DEFAULT_ALLOWED_MEDIA_TYPES",
    "WAVIUS_API_BASE_URL",
    "WAVIUS_API_VERSION",
    "WaviusSettings",
    "get_wavius_settings",
]
