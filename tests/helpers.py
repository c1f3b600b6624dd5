"""Dummy collaborators shared by the client tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.structures import CaseInsensitiveDict

from api_client.clients.transport import ApiRequest


def make_response(status: int, body: bytes = b"", url: str = "https://myurl/people") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.url = url
    response.encoding = "utf-8"
    response.reason = "Test"
    return response


class DummyTransport:
    """Records outgoing requests and replays a canned response or error."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None) -> None:
        self.headers: Dict[str, str] = {}
        self.requests: List[ApiRequest] = []
        self._response = response
        self._error = error

    def send(self, request: ApiRequest) -> requests.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


class DummySession:
    def __init__(self, response: Optional[requests.Response] = None) -> None:
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self.calls: List[Dict[str, Any]] = []
        self._response = response or make_response(200, b"{}")

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self._response


def log_lines(records: List[Dict[str, Any]]) -> List[Tuple[str, str]]:
    return [(record["level"].name, record["message"]) for record in records]
