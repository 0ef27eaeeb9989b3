"""RBAC errors — configuration and data defects, never a plain deny.

A legitimate "no permission" outcome is always ``False``. Everything here
signals that the role data or the assertion wiring is broken and must reach
the caller as a failure.
"""

from __future__ import annotations

from typing import Any

from mp_rbac.kernel.errors import (
    ApplicationError,
    ConflictError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
)


class DuplicateRoleError(ConflictError):
    """A role with the same name is already in the graph."""

    default_code = "duplicate_role"

    def __init__(self, role_name: str, **kwargs: Any) -> None:
        super().__init__(f"Role '{role_name}' already exists", **kwargs)
        self.role_name = role_name


class RoleNotFoundError(NotFoundError):
    """A role name could not be resolved in the graph."""

    default_code = "role_not_found"

    def __init__(self, role_name: str, **kwargs: Any) -> None:
        super().__init__("Role", role_name, **kwargs)
        self.role_name = role_name


class CyclicRoleGraphError(InvariantViolationError):
    """Adding an edge or role would make a role its own transitive child."""

    default_code = "cyclic_role_graph"

    def __init__(self, path: list[str], **kwargs: Any) -> None:
        super().__init__(
            "Role hierarchy cycle: " + " -> ".join(path),
            detail={"path": list(path)},
            **kwargs,
        )
        self.path = list(path)


class RoleProviderError(InfrastructureError):
    """A role provider could not supply the requested roles."""

    default_code = "role_provider_error"

    def __init__(
        self,
        message: str,
        *,
        missing: frozenset[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.missing = missing or frozenset()


class AssertionNotFoundError(NotFoundError):
    """No assertion is registered under a key, or its identifier did not resolve."""

    default_code = "assertion_not_found"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__("Assertion", key, **kwargs)
        self.key = key


class AssertionNotCallableError(ApplicationError):
    """An assertion resolved to an object that cannot be invoked."""

    default_code = "assertion_not_callable"

    def __init__(self, key: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Assertion '{key}' resolved to non-callable {type(value).__name__}",
            **kwargs,
        )
        self.key = key
        self.value = value


__all__ = [
    "AssertionNotCallableError",
    "AssertionNotFoundError",
    "CyclicRoleGraphError",
    "DuplicateRoleError",
    "RoleNotFoundError",
    "RoleProviderError",
]
