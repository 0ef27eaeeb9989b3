"""Unit tests for RBAC test fakes and fixtures."""

from __future__ import annotations

from mp_rbac.rbac import AuthorizationService, StaticIdentityProvider
from mp_rbac.testing.fakes import CountingRoleProvider, RecordingAssertion
from mp_rbac.testing.fixtures import DEFAULT_ROLE_CONFIG


class TestCountingRoleProvider:
    def test_counts_fetches(self) -> None:
        provider = CountingRoleProvider({"guest": ["read"]})
        provider.get_all_roles()
        provider.get_roles(["guest"])
        assert provider.calls == 2


class TestRecordingAssertion:
    def test_records_and_returns_result(self) -> None:
        assertion = RecordingAssertion(result=False)
        assert assertion(None, "identity", {"k": 1}) is False
        assert assertion.calls == [("identity", {"k": 1})]


class TestFixtures:
    def test_default_hierarchy(self, role_provider) -> None:
        roles = role_provider.get_all_roles()
        assert set(roles) == set(DEFAULT_ROLE_CONFIG)
        assert roles["admin"].children == frozenset({"member"})

    def test_service_starts_anonymous(self, authorization_service, identity_provider) -> None:
        assert isinstance(authorization_service, AuthorizationService)
        assert isinstance(identity_provider, StaticIdentityProvider)
        assert authorization_service.get_identity() is None
        assert authorization_service.get_identity_roles() == []

    def test_fake_principal_is_guest(self, fake_principal) -> None:
        assert fake_principal.roles == frozenset({"guest"})
