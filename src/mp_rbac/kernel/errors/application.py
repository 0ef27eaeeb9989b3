"""Application-layer errors — raised by adapters acting on a decision."""

from __future__ import annotations

from typing import Any

from mp_rbac.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No identity is available for the current request."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The identity was evaluated and denied the required permission."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
