"""Shared pytest fixtures."""

from mp_rbac.testing.fixtures import (  # noqa: F401
    authorization_service,
    fake_principal,
    identity_provider,
    role_provider,
    security_context,
)
