"""Person resource models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseResponse(BaseModel):
    """Fields shared by every write response of the people API."""

    model_config = ConfigDict(populate_by_name=True)

    error_message: Optional[str] = Field(None, alias="errorMessage")


class PersonModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(0, alias="id")
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    is_active: bool = Field(True, alias="isActive")


class UpdatePersonResponse(BaseResponse):
    id: Optional[int] = Field(None, alias="id")
