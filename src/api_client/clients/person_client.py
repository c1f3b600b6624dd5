"""Demo client for the ``/people`` resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from api_client.clients.api_service import ApiClient, ApiTransport, JsonOptions
from api_client.clients.response import ApiResponse
from api_client.clients.transport import HttpTransport
from api_client.models import PersonModel, UpdatePersonResponse

if TYPE_CHECKING:  # pragma: no cover
    from loguru import Logger

PERSON_JSON_OPTIONS = JsonOptions(exclude_none=True)


class PersonClient:
    """Reads and writes people through any ``ApiTransport`` bound to the people endpoint."""

    def __init__(self, api: ApiTransport) -> None:
        self._api = api

    @classmethod
    def create(
        cls,
        transport: HttpTransport,
        *,
        api_key: str | None = None,
        logger: Optional["Logger"] = None,
        endpoint: str = "/people",
    ) -> "PersonClient":
        """Build the client on top of a fresh ``ApiClient`` for ``endpoint``."""

        return cls(ApiClient(endpoint, transport, api_key=api_key, logger=logger, name="people"))

    def get_person_by_id(self, person_id: int | str) -> ApiResponse[PersonModel]:
        return self._api.get(PersonModel, str(person_id))

    def add_person(self, person: PersonModel) -> ApiResponse[UpdatePersonResponse]:
        return self._api.post(person, UpdatePersonResponse, options=PERSON_JSON_OPTIONS)

    def update_person(self, person_id: int | str, person: PersonModel) -> ApiResponse[UpdatePersonResponse]:
        return self._api.put(person, UpdatePersonResponse, f"/{person_id}", options=PERSON_JSON_OPTIONS)

    def patch_person(self, person_id: int | str, changes: Dict[str, Any]) -> ApiResponse[UpdatePersonResponse]:
        """Send a partial update; ``changes`` uses the API's camelCase field names."""

        return self._api.patch(changes, UpdatePersonResponse, f"/{person_id}", options=PERSON_JSON_OPTIONS)
