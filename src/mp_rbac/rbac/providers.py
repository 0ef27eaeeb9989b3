"""RBAC – role providers.

A provider supplies :class:`~mp_rbac.rbac.role.Role` objects to populate a
:class:`~mp_rbac.rbac.graph.RoleGraph`. Persistence lives behind the provider;
retries, if any, belong there as well.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

from mp_rbac.rbac.errors import RoleProviderError
from mp_rbac.rbac.role import Role

logger = logging.getLogger(__name__)


class RoleProvider(abc.ABC):
    """Port: supply roles by name."""

    @abc.abstractmethod
    def get_all_roles(self) -> dict[str, Role]:
        """Return every role this provider knows, keyed by name."""

    def get_roles(self, names: Iterable[str]) -> dict[str, Role]:
        """Return the requested roles; raise :class:`RoleProviderError` if any is unknown."""
        wanted = set(names)
        available = self.get_all_roles()
        missing = wanted - available.keys()
        if missing:
            raise RoleProviderError(
                f"Unknown role(s): {', '.join(sorted(missing))}",
                missing=frozenset(missing),
            )
        return {name: available[name] for name in wanted}


class InMemoryRoleProvider(RoleProvider):
    """Roles declared in a plain mapping (typically loaded from configuration).

    Each value is either a list of permissions or a dict with optional
    ``permissions`` and ``children`` lists::

        InMemoryRoleProvider({
            "admin": {"permissions": ["delete"], "children": ["member"]},
            "member": {"permissions": ["write"], "children": ["guest"]},
            "guest": ["read"],
        })

    Roles only mentioned as children are materialised without permissions.
    """

    def __init__(self, config: Mapping[str, Any]) -> None:
        self._roles: dict[str, Role] = {}
        for name, spec in config.items():
            if isinstance(spec, Mapping):
                permissions = spec.get("permissions", ())
                children = spec.get("children", ())
            elif isinstance(spec, str):
                permissions, children = (spec,), ()
            else:
                permissions = spec or ()
                children = ()
            self._roles[name] = Role(name, permissions=permissions, children=children)
        for role in list(self._roles.values()):
            for child in role.children:
                self._roles.setdefault(child, Role(child))

    def get_all_roles(self) -> dict[str, Role]:
        return dict(self._roles)


class CallableRoleProvider(RoleProvider):
    """Wrap a zero-argument loader returning an iterable of roles.

    This is the seam for ORM or remote stores: any exception raised by the
    loader is reported as :class:`RoleProviderError`.
    """

    def __init__(self, loader: Callable[[], Iterable[Role]], *, name: str = "callable") -> None:
        self._loader = loader
        self._name = name

    def get_all_roles(self) -> dict[str, Role]:
        try:
            roles = list(self._loader())
        except RoleProviderError:
            raise
        except Exception as exc:
            raise RoleProviderError(
                f"Role provider '{self._name}' failed: {exc}", cause=exc
            ) from exc
        result: dict[str, Role] = {}
        for role in roles:
            if role.name in result:
                raise RoleProviderError(
                    f"Role provider '{self._name}' returned '{role.name}' twice"
                )
            result[role.name] = role
        return result


class ChainRoleProvider(RoleProvider):
    """Union several providers into a single virtual provider.

    A role name supplied by more than one provider is an error.
    """

    def __init__(self, providers: Sequence[RoleProvider]) -> None:
        self._providers = list(providers)

    @property
    def providers(self) -> list[RoleProvider]:
        return list(self._providers)

    def get_all_roles(self) -> dict[str, Role]:
        merged: dict[str, Role] = {}
        for provider in self._providers:
            roles = provider.get_all_roles()
            clash = merged.keys() & roles.keys()
            if clash:
                raise RoleProviderError(
                    f"Role(s) defined by more than one provider: {', '.join(sorted(clash))}"
                )
            merged.update(roles)
        logger.debug(
            "rbac.chain_provider_merged providers=%d roles=%d",
            len(self._providers),
            len(merged),
        )
        return merged


__all__ = [
    "CallableRoleProvider",
    "ChainRoleProvider",
    "InMemoryRoleProvider",
    "RoleProvider",
]
