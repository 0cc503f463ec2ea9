"""Infrastructure errors – storage and network failures raised by sinks."""

from __future__ import annotations

from typing import Any

from scribe.kernel.errors.base import ScribeError


class InfrastructureError(ScribeError):
    """Infrastructure / I/O failure inside a sink collaborator."""

    default_code = "infrastructure_error"


class StorageError(InfrastructureError):
    """A file store could not read or write a path."""

    default_code = "storage_error"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        if path is not None:
            kwargs.setdefault("detail", {"path": path})
        super().__init__(message, **kwargs)
        self.path = path


class StorageNotFoundError(StorageError):
    """The requested path does not exist in the store."""

    default_code = "storage_not_found"

    def __init__(self, path: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"No such file: '{path}'", path=path, **kwargs)


class TimeoutError(InfrastructureError):  # noqa: A001
    """A network call exceeded the transport's deadline."""

    default_code = "transport_timeout"


class ExternalServiceError(InfrastructureError):
    """An external endpoint could not be reached or misbehaved."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"service": service, "status_code": status_code})
        super().__init__(message or f"Request to '{service}' failed", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "StorageError",
    "StorageNotFoundError",
    "TimeoutError",
]
