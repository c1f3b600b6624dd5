"""Envelope returned by every API client call."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Outcome of a single request: success flag, status code, payload and error text."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, arbitrary_types_allowed=True)

    data: Optional[T] = Field(None, alias="data")
    error_message: Optional[str] = Field(None, alias="message")
    http_status_code: int = Field(200, alias="httpStatusCode")
    success: bool = Field(False, alias="success")

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of the envelope; ``data`` and ``message`` are dropped when null."""

        payload = self.model_dump(mode="json", by_alias=True)
        for key in ("data", "message"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload

    def to_json(self, *, indent: bool = False) -> bytes:
        option = orjson.OPT_INDENT_2 if indent else None
        return orjson.dumps(self.to_dict(), option=option, default=str)

    @classmethod
    def failure(cls, message: str | None = None, status_code: int = 200, data: Any = None) -> "ApiResponse[Any]":
        return cls(success=False, error_message=message, http_status_code=status_code, data=data)
