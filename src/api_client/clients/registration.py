"""Factory helpers wiring clients from application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import requests
from loguru import logger as default_logger

from api_client.clients.api_service import ApiClient
from api_client.clients.person_client import PersonClient
from api_client.clients.transport import RequestsTransport
from api_client.settings import Settings

if TYPE_CHECKING:  # pragma: no cover
    from loguru import Logger

_DEFAULT = object()


def build_transport(settings: Settings, session: Optional[requests.Session] = None) -> RequestsTransport:
    return RequestsTransport(settings.api_base_url, session=session, timeout=settings.api_timeout_seconds)


def build_person_client(
    settings: Settings,
    *,
    session: Optional[requests.Session] = None,
    logger: "Logger | None | object" = _DEFAULT,
) -> PersonClient:
    """
    Build a ``PersonClient`` from settings.

    The global loguru logger is used unless ``logger`` is given; pass ``None`` to
    silence the client.
    """

    resolved_logger = default_logger if logger is _DEFAULT else logger
    api = ApiClient(
        settings.person_endpoint,
        build_transport(settings, session),
        api_key=settings.api_key,
        logger=resolved_logger,  # type: ignore[arg-type]
        name="people",
    )
    return PersonClient(api)
