"""Kernel – framework-agnostic building blocks shared by the RBAC engine."""

from mp_rbac.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "UnauthorizedError",
]
