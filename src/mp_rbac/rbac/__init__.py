"""RBAC – role graph, providers, assertions and the authorization service."""
from mp_rbac.rbac.assertions import (
    GLOBAL_ASSERTION_KEY,
    Assertion,
    AssertionFactory,
    AssertionRegistry,
    MappingAssertionFactory,
    Resolved,
    Unresolved,
)
from mp_rbac.rbac.decorators import require_permission
from mp_rbac.rbac.errors import (
    AssertionNotCallableError,
    AssertionNotFoundError,
    CyclicRoleGraphError,
    DuplicateRoleError,
    RoleNotFoundError,
    RoleProviderError,
)
from mp_rbac.rbac.graph import RoleGraph
from mp_rbac.rbac.identity import (
    ContextIdentityProvider,
    Identity,
    IdentityProvider,
    IdentityRoleResolver,
    RoleNameOrRef,
    StaticIdentityProvider,
)
from mp_rbac.rbac.providers import (
    CallableRoleProvider,
    ChainRoleProvider,
    InMemoryRoleProvider,
    RoleProvider,
)
from mp_rbac.rbac.role import Role
from mp_rbac.rbac.service import AuthorizationService, LoadState

__all__ = [
    "GLOBAL_ASSERTION_KEY",
    "Assertion",
    "AssertionFactory",
    "AssertionNotCallableError",
    "AssertionNotFoundError",
    "AssertionRegistry",
    "AuthorizationService",
    "CallableRoleProvider",
    "ChainRoleProvider",
    "ContextIdentityProvider",
    "CyclicRoleGraphError",
    "DuplicateRoleError",
    "Identity",
    "IdentityProvider",
    "IdentityRoleResolver",
    "InMemoryRoleProvider",
    "LoadState",
    "MappingAssertionFactory",
    "Resolved",
    "Role",
    "RoleGraph",
    "RoleNameOrRef",
    "RoleNotFoundError",
    "RoleProvider",
    "RoleProviderError",
    "StaticIdentityProvider",
    "Unresolved",
    "require_permission",
]
