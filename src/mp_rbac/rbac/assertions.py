"""RBAC – dynamic assertions.

An assertion is a predicate that can veto a permission the role graph already
granted. Assertions are registered either as ready callables or as string
identifiers that a pluggable factory turns into callables the first time they
are needed::

    registry = AssertionRegistry(MappingAssertionFactory({"owns_post": OwnsPost}))
    registry.register("post:edit", "owns_post")      # not instantiated yet
    registry.register("post:delete", lambda svc, identity, ctx: ctx.is_draft)
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Mapping, Protocol, Union

from mp_rbac.rbac.errors import AssertionNotCallableError, AssertionNotFoundError

logger = logging.getLogger(__name__)

GLOBAL_ASSERTION_KEY = "*"

Assertion = Callable[[Any, Any, Any], bool]


class AssertionFactory(Protocol):
    """Port: build an assertion from its registered identifier."""

    def create(self, identifier: str) -> Any: ...


class MappingAssertionFactory:
    """Resolve identifiers through a mapping of classes, instances or factories.

    Classes in *mapping* are instantiated with no arguments; any other value is
    returned as-is, so a plain function is taken to be the predicate itself.
    Zero-argument callables that *build* an assertion go in *factories* (or
    through :meth:`add_factory`) and are called on resolution::

        MappingAssertionFactory(
            {"owns_post": OwnsPost, "is_draft": is_draft},
            factories={"in_tenant": lambda: InTenant(tenant_repo)},
        )
    """

    def __init__(
        self,
        mapping: Mapping[str, Any] | None = None,
        *,
        factories: Mapping[str, Callable[[], Any]] | None = None,
    ) -> None:
        self._mapping = dict(mapping or {})
        self._factories = dict(factories or {})

    def add(self, identifier: str, target: Any) -> None:
        self._factories.pop(identifier, None)
        self._mapping[identifier] = target

    def add_factory(self, identifier: str, factory: Callable[[], Any]) -> None:
        self._mapping.pop(identifier, None)
        self._factories[identifier] = factory

    def create(self, identifier: str) -> Any:
        if identifier in self._factories:
            return self._factories[identifier]()
        target = self._mapping[identifier]
        if isinstance(target, type):
            return target()
        return target


@dataclasses.dataclass(frozen=True)
class Unresolved:
    """Identifier waiting to be resolved through the factory."""
    identifier: str


@dataclasses.dataclass(frozen=True)
class Resolved:
    """Ready-to-call predicate."""
    predicate: Assertion


AssertionEntry = Union[Unresolved, Resolved]


class AssertionRegistry:
    """Map permission names (or the global key) to assertions."""

    def __init__(
        self,
        factory: AssertionFactory | None = None,
        *,
        global_key: str = GLOBAL_ASSERTION_KEY,
    ) -> None:
        self._factory = factory
        self._entries: dict[str, AssertionEntry] = {}
        self.global_key = global_key

    def register(self, key: str, assertion: str | Assertion) -> None:
        """Store *assertion* under *key*; identifiers are resolved lazily."""
        if isinstance(assertion, str):
            self._entries[key] = Unresolved(assertion)
        else:
            self._entries[key] = Resolved(assertion)

    def register_many(self, assertions: Mapping[str, str | Assertion]) -> None:
        for key, assertion in assertions.items():
            self.register(key, assertion)

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Assertion:
        """Return the predicate for *key*, resolving and memoising identifiers."""
        entry = self._entries.get(key)
        if entry is None:
            raise AssertionNotFoundError(key)
        if isinstance(entry, Resolved):
            return entry.predicate

        value = self._resolve(key, entry.identifier)
        if not callable(value):
            raise AssertionNotCallableError(key, value)
        self._entries[key] = Resolved(value)
        logger.debug("rbac.assertion_resolved key=%s identifier=%s", key, entry.identifier)
        return value

    def for_permission(self, permission: str) -> Assertion | None:
        """Permission-specific assertion first, then the global one, else ``None``."""
        if permission in self._entries:
            return self.get(permission)
        if self.global_key in self._entries:
            return self.get(self.global_key)
        return None

    def _resolve(self, key: str, identifier: str) -> Any:
        if self._factory is None:
            raise AssertionNotFoundError(
                key, detail={"identifier": identifier, "reason": "no assertion factory"}
            )
        try:
            return self._factory.create(identifier)
        except AssertionNotFoundError:
            raise
        except Exception as exc:
            raise AssertionNotFoundError(
                key, detail={"identifier": identifier}, cause=exc
            ) from exc

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "GLOBAL_ASSERTION_KEY",
    "Assertion",
    "AssertionEntry",
    "AssertionFactory",
    "AssertionRegistry",
    "MappingAssertionFactory",
    "Resolved",
    "Unresolved",
]
