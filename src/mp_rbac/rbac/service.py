"""RBAC – AuthorizationService.

The façade an application talks to. One instance is meant to live for a single
request: it holds the "loaded" latch and its own role graph, while the
identity comes from a request-scoped :class:`IdentityProvider`.

Decision flow for :meth:`AuthorizationService.is_granted`:

1. Resolve the identity's roles. None → ``False`` without loading anything.
2. Load every role from the provider into the graph, once (``UNINITIALIZED``
   → ``LOADED``).
3. Grant if any identity role, or one of its descendants, holds the permission.
4. A deny is final. A grant is refined by the matching assertion, if any.

Configuration defects (unknown role names, broken assertions, provider
failures) raise; they are never reported as a deny.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from mp_rbac.observability.logging.audit import AuditLogger, AuditOutcome
from mp_rbac.rbac.assertions import Assertion, AssertionFactory, AssertionRegistry
from mp_rbac.rbac.graph import RoleGraph
from mp_rbac.rbac.identity import (
    Identity,
    IdentityProvider,
    IdentityRoleResolver,
    RoleNameOrRef,
)
from mp_rbac.rbac.providers import RoleProvider
from mp_rbac.rbac.role import Role

if TYPE_CHECKING:
    from mp_rbac.config.settings import RbacSettings

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"


class AuthorizationService:
    """Answer "is the current identity granted this permission?".

    Parameters
    ----------
    role_provider:
        Source of the roles making up the graph; queried once per load.
    identity_provider:
        Returns the identity for the current request (``None`` if anonymous).
    assertions:
        Registry of dynamic assertions. A fresh empty registry by default.
    graph:
        Graph to populate on load. It is cleared before every load and on
        :meth:`invalidate`.
    audit_logger:
        When given, every decision is recorded as an audit entry.
    """

    def __init__(
        self,
        role_provider: RoleProvider,
        identity_provider: IdentityProvider,
        assertions: AssertionRegistry | None = None,
        *,
        graph: RoleGraph | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._role_provider = role_provider
        self._resolver = IdentityRoleResolver(identity_provider)
        self._assertions = assertions if assertions is not None else AssertionRegistry()
        self._graph = graph if graph is not None else RoleGraph()
        self._audit = audit_logger
        self._state = LoadState.UNINITIALIZED

    @classmethod
    def from_settings(
        cls,
        settings: RbacSettings,
        role_provider: RoleProvider,
        identity_provider: IdentityProvider,
        assertion_factory: AssertionFactory | None = None,
    ) -> AuthorizationService:
        """Build a service whose registry and auditing follow *settings*."""
        audit_logger = None
        if settings.audit_decisions:
            audit_logger = AuditLogger(service=settings.audit_service_name)
        return cls(
            role_provider,
            identity_provider,
            AssertionRegistry(assertion_factory, global_key=settings.global_assertion_key),
            audit_logger=audit_logger,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def graph(self) -> RoleGraph:
        return self._graph

    @property
    def assertions(self) -> AssertionRegistry:
        return self._assertions

    def invalidate(self) -> None:
        """Drop loaded roles; the next decision reloads from the provider."""
        self._graph.clear()
        self._state = LoadState.UNINITIALIZED
        logger.debug("rbac.service_invalidated")

    def _load(self) -> None:
        if self._state is LoadState.LOADED:
            return
        roles = self._role_provider.get_all_roles()
        self._graph.clear()
        # Providers may hand out shared instances; the graph owns its copies.
        self._graph.add_roles(role.copy() for role in roles.values())
        self._state = LoadState.LOADED
        logger.info("rbac.roles_loaded count=%d", len(self._graph))

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def get_identity(self) -> Identity | None:
        return self._resolver.get_identity()

    def get_identity_roles(self) -> list[RoleNameOrRef]:
        return self._resolver.get_identity_roles()

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def register_assertion(self, key: str, assertion: str | Assertion) -> None:
        self._assertions.register(key, assertion)

    def has_assertion(self, key: str) -> bool:
        return self._assertions.has(key)

    def get_assertion(self, key: str) -> Assertion:
        return self._assertions.get(key)

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    def is_granted(
        self,
        permission: str,
        context: Any = None,
        *,
        assertion: Assertion | None = None,
    ) -> bool:
        """Return whether the current identity holds *permission*.

        *context* is handed to the assertion as its third argument. An inline
        *assertion* replaces any registered one for this call only.
        """
        identity = self._resolver.get_identity()
        roles = self._resolver.get_identity_roles(identity)
        if not roles:
            self._record(identity, permission, False, reason="no_roles")
            return False

        self._load()

        if not any(self._role_grants(role, permission) for role in roles):
            self._record(identity, permission, False, reason="no_role_grants")
            return False

        if assertion is None:
            assertion = self._assertions.for_permission(permission)
        if assertion is None:
            self._record(identity, permission, True)
            return True

        granted = bool(assertion(self, identity, context))
        self._record(identity, permission, granted, reason="assertion")
        return granted

    def has_role(self, roles: str | Iterable[str]) -> bool:
        """Return whether the identity holds any of *roles*, directly or by inheritance.

        An identity holding ``admin`` matches ``member`` when ``member`` is a
        descendant of ``admin``.
        """
        wanted = {roles} if isinstance(roles, str) else set(roles)
        identity_roles = self._resolver.get_identity_roles()
        if not identity_roles or not wanted:
            return False

        self._load()

        for role in identity_roles:
            name = role.name if isinstance(role, Role) else role
            if name in wanted:
                return True
            if isinstance(role, Role) and name not in self._graph:
                reachable = set(role.children).union(
                    *(self._graph.descendants(child) for child in role.children)
                )
            else:
                reachable = self._graph.descendants(name)
            if reachable & wanted:
                return True
        return False

    def _role_grants(self, role: RoleNameOrRef, permission: str) -> bool:
        if isinstance(role, Role):
            if role.has_permission(permission):
                return True
            if role.name in self._graph:
                return self._graph.role_has_permission(role.name, permission)
            return any(
                self._graph.role_has_permission(child, permission) for child in role.children
            )
        return self._graph.role_has_permission(role, permission)

    def _record(
        self,
        identity: Identity | None,
        permission: str,
        granted: bool,
        **extra: Any,
    ) -> None:
        if self._audit is None:
            return
        self._audit.log_access(
            identity if identity is not None else "anonymous",
            resource="rbac",
            action=permission,
            outcome=AuditOutcome.GRANTED if granted else AuditOutcome.DENIED,
            **extra,
        )


__all__ = ["AuthorizationService", "LoadState"]
