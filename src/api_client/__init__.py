"""API client package root exports with lazy imports to keep import time low."""

from __future__ import annotations

from typing import Any

__all__ = ["ApiClient", "ApiResponse", "PersonClient", "Settings", "get_settings", "build_uri", "format_url"]


def __getattr__(name: str) -> Any:
    if name == "ApiClient":
        from api_client.clients.api_service import ApiClient

        return ApiClient
    if name == "ApiResponse":
        from api_client.clients.response import ApiResponse

        return ApiResponse
    if name == "PersonClient":
        from api_client.clients.person_client import PersonClient

        return PersonClient
    if name == "Settings":
        from api_client.settings import Settings

        return Settings
    if name == "get_settings":
        from api_client.settings import get_settings

        return get_settings
    if name in ("build_uri", "format_url"):
        from api_client.utils import uri

        return getattr(uri, name)
    raise AttributeError(f"module 'api_client' has no attribute '{name}'")
