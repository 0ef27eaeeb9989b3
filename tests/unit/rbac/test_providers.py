"""Unit tests for role providers."""

from __future__ import annotations

import pytest

from mp_rbac.rbac import (
    CallableRoleProvider,
    ChainRoleProvider,
    InMemoryRoleProvider,
    Role,
    RoleProviderError,
)


class TestInMemoryRoleProvider:
    def test_builds_roles_from_mapping(self) -> None:
        provider = InMemoryRoleProvider(
            {
                "admin": {"permissions": ["delete"], "children": ["member"]},
                "member": ["write"],
                "guest": "read",
            }
        )
        roles = provider.get_all_roles()
        assert set(roles) == {"admin", "member", "guest"}
        assert roles["admin"].children == frozenset({"member"})
        assert roles["member"].permissions == frozenset({"write"})
        assert roles["guest"].permissions == frozenset({"read"})

    def test_children_only_roles_are_materialised(self) -> None:
        provider = InMemoryRoleProvider({"admin": {"children": ["auditor"]}})
        roles = provider.get_all_roles()
        assert roles["auditor"] == Role("auditor")

    def test_get_roles_subset(self) -> None:
        provider = InMemoryRoleProvider({"admin": [], "guest": []})
        assert set(provider.get_roles(["guest"])) == {"guest"}

    def test_get_roles_unknown_name_raises(self) -> None:
        provider = InMemoryRoleProvider({"guest": []})
        with pytest.raises(RoleProviderError) as exc_info:
            provider.get_roles({"guest", "ghost"})
        assert exc_info.value.missing == frozenset({"ghost"})


class TestCallableRoleProvider:
    def test_returns_loader_roles(self) -> None:
        provider = CallableRoleProvider(lambda: [Role("guest", {"read"})])
        assert provider.get_all_roles()["guest"].has_permission("read")

    def test_loader_failure_is_wrapped(self) -> None:
        def _boom() -> list[Role]:
            raise OSError("database unavailable")

        provider = CallableRoleProvider(_boom, name="sql")
        with pytest.raises(RoleProviderError) as exc_info:
            provider.get_all_roles()
        assert isinstance(exc_info.value.__cause__, OSError)
        assert "sql" in exc_info.value.message

    def test_duplicate_from_loader_raises(self) -> None:
        provider = CallableRoleProvider(lambda: [Role("guest"), Role("guest")])
        with pytest.raises(RoleProviderError):
            provider.get_all_roles()


class TestChainRoleProvider:
    def test_unions_providers(self) -> None:
        chain = ChainRoleProvider(
            [
                InMemoryRoleProvider({"guest": ["read"]}),
                CallableRoleProvider(lambda: [Role("admin", {"delete"})]),
            ]
        )
        assert set(chain.get_all_roles()) == {"guest", "admin"}
        assert len(chain.providers) == 2

    def test_duplicate_across_providers_raises(self) -> None:
        chain = ChainRoleProvider(
            [
                InMemoryRoleProvider({"guest": ["read"]}),
                InMemoryRoleProvider({"guest": ["write"]}),
            ]
        )
        with pytest.raises(RoleProviderError, match="guest"):
            chain.get_all_roles()

    def test_unknown_name_raises(self) -> None:
        chain = ChainRoleProvider([InMemoryRoleProvider({"guest": []})])
        with pytest.raises(RoleProviderError):
            chain.get_roles(["admin"])

    def test_empty_chain(self) -> None:
        assert ChainRoleProvider([]).get_all_roles() == {}
