"""Domain errors — malformed role data and broken graph invariants."""

from __future__ import annotations

from typing import Any

from mp_rbac.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a role-model rule or invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural invariant of the role model was violated."""

    default_code = "invariant_violation"


class NotFoundError(DomainError):
    """A named item (role, assertion, ...) does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = [
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
]
