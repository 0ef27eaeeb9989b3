"""Testing fixtures – pytest fixtures for RBAC doubles.

Register them in your ``conftest.py``::

    from mp_rbac.testing.fixtures import authorization_service, role_provider  # noqa: F401
"""
from mp_rbac.testing.fixtures.principal import fake_principal, security_context
from mp_rbac.testing.fixtures.rbac import (
    DEFAULT_ROLE_CONFIG,
    authorization_service,
    identity_provider,
    role_provider,
)

__all__ = [
    "DEFAULT_ROLE_CONFIG",
    "authorization_service",
    "fake_principal",
    "identity_provider",
    "role_provider",
    "security_context",
]
