"""Generic JSON REST client: URL building, verb dispatch, (de)serialization and outcome logging."""

from __future__ import annotations

import time
import traceback
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional, Protocol, Type, TypeVar

import orjson
import requests
from pydantic import TypeAdapter

from api_client.clients.base import BaseClient, ConfigurationError
from api_client.clients.response import ApiResponse
from api_client.clients.transport import JSON_CONTENT_TYPE, ApiRequest, HttpTransport
from api_client.utils.uri import build_uri

if TYPE_CHECKING:  # pragma: no cover
    from loguru import Logger

TResponse = TypeVar("TResponse")

NO_PAYLOAD_MESSAGE = "No valid payload."
INVALID_URL_MESSAGE = "Url non valid"
NO_RESPONSE_STATUS = 0


@dataclass(frozen=True)
class JsonOptions:
    """
    Serialization knobs applied to request payloads and response bodies.

    by_alias: write field aliases (``firstName``) instead of attribute names.
    exclude_none: drop null fields from request payloads.
    strict: disable type coercion when validating response bodies.
    """

    by_alias: bool = True
    exclude_none: bool = False
    strict: bool = False


DEFAULT_JSON_OPTIONS = JsonOptions()


class ApiTransport(Protocol):
    """Verb-level contract resource clients are composed with."""

    def get(
        self,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        ...

    def post(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        ...

    def put(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        ...

    def patch(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        ...


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _tag(key: str, value: Any = "") -> str:
    text = "" if value is None else str(value)
    return f"[{key}: {text}]" if text else f"[{key}]"


class ApiClient(BaseClient):
    """
    Single-attempt JSON client bound to one base endpoint.

    Every call returns an ``ApiResponse``; transport, timeout, status and body
    conversion failures are logged and folded into the envelope instead of
    being raised.
    """

    def __init__(
        self,
        base_endpoint: str,
        transport: HttpTransport,
        *,
        api_key: str | None = None,
        logger: Optional["Logger"] = None,
        name: str = "api",
        debug: bool = True,
    ) -> None:
        super().__init__(name, logger, {"endpoint": base_endpoint})
        if not base_endpoint:
            raise ConfigurationError("base_endpoint must be a non-empty string")
        if api_key is not None:
            if not api_key.strip():
                raise ConfigurationError("api_key was supplied but is empty")
            transport.headers["Authorization"] = api_key
        self.base_endpoint = base_endpoint
        self._transport = transport
        self._debug = debug

    # Verbs ------------------------------------------------------------------------

    def get(
        self,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        """Fetch ``<base>/<path>?<query>`` and decode the body as ``response_type``."""

        return self._execute("GET", response_type, path, query, options=options, function=function)

    def post(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        return self._execute(
            "POST", response_type, path, query, payload=payload, has_body=True, options=options, function=function
        )

    def put(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        return self._execute(
            "PUT", response_type, path, query, payload=payload, has_body=True, options=options, function=function
        )

    def patch(
        self,
        payload: Any,
        response_type: Type[TResponse],
        path: str | None = None,
        query: str | None = None,
        options: JsonOptions | None = None,
        *,
        function: str = "",
    ) -> ApiResponse[TResponse]:
        return self._execute(
            "PATCH", response_type, path, query, payload=payload, has_body=True, options=options, function=function
        )

    # Pipeline ---------------------------------------------------------------------

    def _execute(
        self,
        verb: str,
        response_type: Any,
        path: str | None,
        query: str | None,
        *,
        payload: Any = None,
        has_body: bool = False,
        options: JsonOptions | None = None,
        function: str = "",
    ) -> ApiResponse[Any]:
        options = options or DEFAULT_JSON_OPTIONS

        if has_body and payload is None:
            return ApiResponse.failure(NO_PAYLOAD_MESSAGE)

        url = build_uri(self.base_endpoint, path, query)
        if not url:
            return ApiResponse.failure(INVALID_URL_MESSAGE)

        request = ApiRequest(verb=verb, url=url)
        if has_body:
            try:
                request.body = self._serialize(payload, options)
            except Exception as exc:
                return ApiResponse.failure(f"Payload serialization failed: {exc}")
            request.headers["Content-Type"] = JSON_CONTENT_TYPE

        return self._send(request, response_type, options, function)

    def _send(
        self, request: ApiRequest, response_type: Any, options: JsonOptions, function: str = ""
    ) -> ApiResponse[Any]:
        verb, url = request.verb, request.url
        response: Optional[requests.Response] = None
        started = time.perf_counter()

        try:
            response = self._transport.send(request)
            response.raise_for_status()
        except requests.HTTPError as exc:
            response = exc.response if exc.response is not None else response
            status = response.status_code if response is not None else NO_RESPONSE_STATUS
            body_text = ""
            data = None
            if response is not None:
                try:
                    body_text = response.text
                    data = self._deserialize(response.content, response_type, options)
                except Exception as conversion_exc:
                    self._write_log(
                        verb, url, function, status, conversion_exc, description="HttpError Json Conversion"
                    )
            self._write_log(verb, url, function, status, exc, http_stream=body_text)
            return ApiResponse(success=False, http_status_code=status, data=data)
        except requests.Timeout as exc:
            status = self._status_of(exc, response)
            self._write_log(verb, url, function, status, exc)
            return ApiResponse.failure(status_code=status)
        except Exception as exc:
            status = self._status_of(exc, response)
            self._write_log(verb, url, function, status, exc)
            return ApiResponse.failure(status_code=status)

        status = response.status_code
        if not 200 <= status < 300:
            duration = int((time.perf_counter() - started) * 1000)
            self._write_log(verb, url, function, status, None, duration=duration)
            return ApiResponse.failure(status_code=status)

        data = None
        try:
            data = self._deserialize(response.content, response_type, options)
        except Exception as exc:
            self._write_log(verb, url, function, status, exc, description="Json Conversion")

        self._write_log(verb, url, function, status, None, level="INFO")
        return ApiResponse(success=True, http_status_code=status, data=data)

    # Helpers ----------------------------------------------------------------------

    @staticmethod
    def _serialize(payload: Any, options: JsonOptions) -> bytes:
        plain = _adapter(type(payload)).dump_python(
            payload,
            mode="json",
            by_alias=options.by_alias,
            exclude_none=options.exclude_none,
        )
        return orjson.dumps(plain)

    @staticmethod
    def _deserialize(content: bytes | None, response_type: Any, options: JsonOptions) -> Any:
        if not content or not content.strip():
            return None
        raw = orjson.loads(content)
        if response_type is None:
            return raw
        return _adapter(response_type).validate_python(raw, strict=options.strict)

    @staticmethod
    def _status_of(exc: BaseException, response: Optional[requests.Response]) -> int:
        attached = getattr(exc, "response", None)
        if attached is not None:
            return attached.status_code
        if response is not None:
            return response.status_code
        return NO_RESPONSE_STATUS

    def _write_log(
        self,
        verb: str,
        url: str,
        function: str,
        status: int,
        exc: Optional[BaseException],
        *,
        description: str = "",
        duration: int | None = None,
        http_stream: str = "",
        level: str = "ERROR",
    ) -> None:
        if not self.logging_enabled:
            return
        line = _tag("DBG") if self._debug else ""
        line += _tag("HttpVerb", verb) + _tag("URL", url)
        if function:
            line += _tag("Funz", function)
        line += _tag("HttpCode", status)
        if description:
            line += _tag("Description", description)
        if duration is not None:
            line += _tag("Duration", duration)
        if exc is not None:
            stack = "".join(traceback.format_tb(exc.__traceback__)).strip()
            line += _tag("Error", exc) + _tag("ErrSource", type(exc).__module__) + _tag("ErrStack", stack)
        if http_stream:
            line += _tag("HttpStream", http_stream)
        self._log(level, line, exc)
