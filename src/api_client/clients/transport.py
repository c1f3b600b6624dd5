"""HTTP transport used by API clients to dispatch requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, MutableMapping, Optional, Protocol
from urllib.parse import urlparse

import requests

from api_client.clients.base import ConfigurationError
from api_client.utils.uri import format_url

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass
class ApiRequest:
    """A single outgoing request: verb, resolved URL and optional JSON body."""

    verb: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


class HttpTransport(Protocol):
    """Anything able to execute an ``ApiRequest`` and hand back a ``requests.Response``."""

    headers: MutableMapping[str, str]

    def send(self, request: ApiRequest) -> requests.Response:
        ...


class RequestsTransport:
    """Transport backed by a ``requests.Session`` with a fixed base address."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float | None = 10.0,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ConfigurationError("Transport base URL must be a non-empty string")
        self.base_url = base_url.strip().rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def headers(self) -> MutableMapping[str, str]:
        return self._session.headers

    def resolve(self, url: str) -> str:
        """Return an absolute URL, anchoring relative ones on the base address."""

        if urlparse(url).scheme:
            return url
        path, sep, query = url.partition("?")
        return f"{self.base_url}/{format_url(path).lstrip('/')}{sep}{query}"

    def send(self, request: ApiRequest) -> requests.Response:
        return self._session.request(
            request.verb,
            self.resolve(request.url),
            data=request.body,
            headers=request.headers or None,
            timeout=self._timeout,
        )
