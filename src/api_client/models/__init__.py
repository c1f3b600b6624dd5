"""Data shapes exchanged with the demo people API."""

from api_client.models.person import BaseResponse, PersonModel, UpdatePersonResponse

__all__ = ["BaseResponse", "PersonModel", "UpdatePersonResponse"]
