"""RBAC – identity providers and the identity role resolver."""

from __future__ import annotations

from typing import Iterable, Protocol, Union, runtime_checkable

from mp_rbac.kernel.security import SecurityContext
from mp_rbac.rbac.role import Role

RoleNameOrRef = Union[str, Role]


@runtime_checkable
class Identity(Protocol):
    """Anything exposing the roles it holds (names or :class:`Role` objects)."""

    @property
    def roles(self) -> Iterable[RoleNameOrRef]: ...


class IdentityProvider(Protocol):
    """Port: return the identity of the current caller, or ``None``."""

    def get_identity(self) -> Identity | None: ...


class ContextIdentityProvider:
    """Read the current principal from :class:`SecurityContext`."""

    def get_identity(self) -> Identity | None:
        return SecurityContext.get_current()


class StaticIdentityProvider:
    """Always return the same identity (tests, CLIs, background jobs)."""

    def __init__(self, identity: Identity | None = None) -> None:
        self.identity = identity

    def get_identity(self) -> Identity | None:
        return self.identity


class IdentityRoleResolver:
    """Turn the current identity into the list of roles it holds.

    Anonymous callers and identities without roles resolve to ``[]``.
    Duplicates are removed; first occurrence wins.
    """

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def get_identity(self) -> Identity | None:
        return self._identity_provider.get_identity()

    def get_identity_roles(self, identity: Identity | None = None) -> list[RoleNameOrRef]:
        if identity is None:
            identity = self.get_identity()
        if identity is None:
            return []
        roles = getattr(identity, "roles", None)
        if not roles:
            return []
        if isinstance(roles, (str, Role)):
            roles = [roles]

        result: list[RoleNameOrRef] = []
        seen: set[str] = set()
        for role in roles:
            name = role.name if isinstance(role, Role) else role
            if name in seen:
                continue
            seen.add(name)
            result.append(role)
        return result


__all__ = [
    "ContextIdentityProvider",
    "Identity",
    "IdentityProvider",
    "IdentityRoleResolver",
    "RoleNameOrRef",
    "StaticIdentityProvider",
]
