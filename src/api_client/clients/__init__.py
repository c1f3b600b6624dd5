"""Generic REST client building blocks and the demo people client."""

from api_client.clients.api_service import ApiClient, ApiTransport, JsonOptions
from api_client.clients.base import APIClientError, ConfigurationError
from api_client.clients.person_client import PersonClient
from api_client.clients.response import ApiResponse
from api_client.clients.transport import ApiRequest, HttpTransport, RequestsTransport

__all__ = [
    "ApiClient",
    "ApiTransport",
    "JsonOptions",
    "ApiResponse",
    "ApiRequest",
    "HttpTransport",
    "RequestsTransport",
    "PersonClient",
    "APIClientError",
    "ConfigurationError",
]
