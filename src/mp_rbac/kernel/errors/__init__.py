"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    │   ├── UnauthorizedError
    │   └── ForbiddenError
    └── InfrastructureError  (infrastructure.py)

RBAC-specific errors subclass these in :mod:`mp_rbac.rbac.errors`.
"""

from mp_rbac.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from mp_rbac.kernel.errors.base import BaseError
from mp_rbac.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvariantViolationError,
    NotFoundError,
)
from mp_rbac.kernel.errors.infrastructure import InfrastructureError

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
