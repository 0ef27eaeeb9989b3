"""Testing fixtures – a small role hierarchy and services built on it."""
from __future__ import annotations

from typing import Any

import pytest

from mp_rbac.rbac.identity import StaticIdentityProvider
from mp_rbac.rbac.service import AuthorizationService
from mp_rbac.testing.fakes import CountingRoleProvider

#: ``admin`` ⊇ ``member`` ⊇ ``guest``.
DEFAULT_ROLE_CONFIG: dict[str, Any] = {
    "admin": {"permissions": ["delete"], "children": ["member"]},
    "member": {"permissions": ["write"], "children": ["guest"]},
    "guest": {"permissions": ["read"]},
}


@pytest.fixture
def role_provider() -> CountingRoleProvider:
    return CountingRoleProvider(DEFAULT_ROLE_CONFIG)


@pytest.fixture
def identity_provider() -> StaticIdentityProvider:
    """Anonymous until the test sets ``identity_provider.identity``."""
    return StaticIdentityProvider()


@pytest.fixture
def authorization_service(role_provider, identity_provider) -> AuthorizationService:
    return AuthorizationService(role_provider, identity_provider)


__all__ = [
    "DEFAULT_ROLE_CONFIG",
    "authorization_service",
    "identity_provider",
    "role_provider",
]
