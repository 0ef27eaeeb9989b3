"""Unit tests for kernel and RBAC error hierarchies."""

from __future__ import annotations

import json

import pytest

from mp_rbac.config import ConfigError, InvalidSettingValueError
from mp_rbac.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
)
from mp_rbac.rbac.errors import (
    AssertionNotCallableError,
    AssertionNotFoundError,
    CyclicRoleGraphError,
    DuplicateRoleError,
    RoleNotFoundError,
    RoleProviderError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "rbac_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='rbac_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error", "parent"),
        [
            (DuplicateRoleError("admin"), ConflictError),
            (RoleNotFoundError("admin"), NotFoundError),
            (CyclicRoleGraphError(["a", "b", "a"]), InvariantViolationError),
            (RoleProviderError("down"), InfrastructureError),
            (AssertionNotFoundError("edit"), NotFoundError),
            (AssertionNotCallableError("edit", 1), ApplicationError),
            (ForbiddenError(), ApplicationError),
            (UnauthorizedError("anon"), ApplicationError),
            (InvalidSettingValueError("x", 1, "bad"), ConfigError),
        ],
    )
    def test_parents(self, error: BaseError, parent: type) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, BaseError)

    def test_domain_errors_are_domain(self) -> None:
        assert issubclass(NotFoundError, DomainError)
        assert issubclass(ConflictError, DomainError)


class TestRbacErrors:
    def test_role_not_found_message(self) -> None:
        err = RoleNotFoundError("ghost")
        assert err.message == "Role 'ghost' not found"
        assert err.role_name == "ghost"
        assert err.code == "role_not_found"

    def test_cycle_path_in_detail(self) -> None:
        err = CyclicRoleGraphError(["a", "b", "a"])
        assert err.message == "Role hierarchy cycle: a -> b -> a"
        assert err.detail == {"path": ["a", "b", "a"]}

    def test_provider_error_missing(self) -> None:
        err = RoleProviderError("unknown", missing=frozenset({"x"}))
        assert err.missing == frozenset({"x"})
        assert RoleProviderError("down").missing == frozenset()

    def test_assertion_not_callable_mentions_type(self) -> None:
        err = AssertionNotCallableError("edit", 42)
        assert "int" in err.message
        assert err.key == "edit"

    def test_forbidden_permission(self) -> None:
        err = ForbiddenError(permission="delete")
        assert err.message == "Access denied"
        assert err.permission == "delete"
