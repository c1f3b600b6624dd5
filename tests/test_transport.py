"""Tests for the requests-backed transport."""

import pytest

from api_client.clients.api_service import ApiClient
from api_client.clients.base import ConfigurationError
from api_client.clients.transport import ApiRequest, RequestsTransport
from helpers import DummySession, make_response


def test_resolve_relative_and_absolute_urls() -> None:
    transport = RequestsTransport("https://myurl/", session=DummySession())  # type: ignore[arg-type]

    assert transport.resolve("/people/1") == "https://myurl/people/1"
    assert transport.resolve("//people//1") == "https://myurl/people/1"
    assert transport.resolve("people?q=1") == "https://myurl/people?q=1"
    assert transport.resolve("https://other.host/x") == "https://other.host/x"


def test_send_uses_session_with_timeout_and_body() -> None:
    response = make_response(201, b'{"id": 1}')
    session = DummySession(response)
    transport = RequestsTransport("https://myurl", session=session, timeout=2.5)  # type: ignore[arg-type]

    result = transport.send(
        ApiRequest(verb="POST", url="/people", body=b"{}", headers={"Content-Type": "application/json"})
    )

    assert result is response
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://myurl/people"
    assert call["data"] == b"{}"
    assert call["timeout"] == 2.5
    assert call["headers"] == {"Content-Type": "application/json"}


def test_headers_are_the_session_defaults() -> None:
    session = DummySession()
    transport = RequestsTransport("https://myurl", session=session)  # type: ignore[arg-type]

    transport.headers["Authorization"] = "token"

    assert session.headers["authorization"] == "token"


@pytest.mark.parametrize("base_url", ["", "   "])
def test_blank_base_url_rejected(base_url: str) -> None:
    with pytest.raises(ConfigurationError):
        RequestsTransport(base_url)


def test_query_values_keep_their_slashes_on_the_wire() -> None:
    session = DummySession(make_response(200, b"{}"))
    transport = RequestsTransport("https://myurl", session=session)  # type: ignore[arg-type]
    client = ApiClient("/people", transport)

    result = client.get(dict, "1", "next=https://other.host/x")

    assert result.success
    assert session.calls[0]["url"] == "https://myurl/people/1?next=https://other.host/x"
    assert transport.resolve("//people//1?a=b//c") == "https://myurl/people/1?a=b//c"
