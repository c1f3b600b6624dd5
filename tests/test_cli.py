"""CLI tests."""

import orjson
import pytest

from api_client import cli
from api_client.clients.person_client import PersonClient
from api_client.settings import get_settings
from helpers import DummyTransport, make_response


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("API_BASE_URL", "https://myurl")
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def use_transport(monkeypatch: pytest.MonkeyPatch, transport: DummyTransport) -> None:
    monkeypatch.setattr(cli, "build_person_client", lambda settings: PersonClient.create(transport))


def test_check_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.run(["check-config"]) == 0

    out = capsys.readouterr().out
    assert "Base URL: https://myurl" in out
    assert "API key configured: False" in out


def test_get_person_prints_envelope(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    transport = DummyTransport(make_response(200, b'{"id": 1, "firstName": "Enrico"}'))
    use_transport(monkeypatch, transport)

    assert cli.run(["get-person", "1"]) == 0

    payload = orjson.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["data"]["firstName"] == "Enrico"
    assert transport.requests[0].url == "/people/1"


def test_add_person_failure_exit_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    transport = DummyTransport(make_response(400, b'{"errorMessage": "bad"}'))
    use_transport(monkeypatch, transport)

    assert cli.run(["add-person", "--first-name", "Enrico", "--last-name", "Rossini"]) == 1

    payload = orjson.loads(capsys.readouterr().out)
    assert payload["success"] is False
    assert payload["httpStatusCode"] == 400
    assert payload["data"]["errorMessage"] == "bad"


def test_update_person_sends_put(monkeypatch: pytest.MonkeyPatch) -> None:
    transport = DummyTransport(make_response(204))
    use_transport(monkeypatch, transport)

    assert cli.run(["update-person", "2", "--first-name", "Ada", "--inactive"]) == 0

    sent = transport.requests[0]
    assert sent.verb == "PUT"
    assert sent.url == "/people/2"
    assert orjson.loads(sent.body) == {"id": 2, "firstName": "Ada", "isActive": False}
