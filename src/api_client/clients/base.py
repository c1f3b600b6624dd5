"""Shared infrastructure for API clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:  # pragma: no cover
    from loguru import Logger


class APIClientError(Exception):
    """Raised when a client-level error occurs."""


class ConfigurationError(APIClientError, ValueError):
    """Raised when a client is constructed with an unusable configuration."""


class BaseClient:
    """Base functionality for API client implementations."""

    def __init__(
        self,
        name: str,
        logger: Optional["Logger"] = None,
        extra_context: Mapping[str, Any] | None = None,
    ) -> None:
        self.name = name
        self._context = dict(extra_context or {})
        self._logger = logger.bind(client=name, **self._context) if logger is not None else None

    @property
    def logging_enabled(self) -> bool:
        return self._logger is not None

    def _log(self, level: str, message: str, exc: Optional[BaseException] = None) -> None:
        """Emit a message on the injected logger, or do nothing when none was given."""

        if self._logger is None:
            return
        self._logger.opt(exception=exc).log(level, message)
