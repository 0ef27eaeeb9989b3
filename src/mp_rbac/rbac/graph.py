"""RBAC – RoleGraph.

An arena of :class:`~mp_rbac.rbac.role.Role` objects addressed by name. Child
edges are stored as names on each role and validated acyclic whenever a role
or an edge is added.

A parent role effectively holds every permission of its descendants::

    graph = RoleGraph()
    graph.add_role(Role("guest", permissions={"read"}))
    graph.add_role(Role("member", permissions={"write"}, children={"guest"}))
    graph.role_has_permission("member", "read")   # True
    graph.role_has_permission("guest", "write")   # False
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from mp_rbac.rbac.errors import CyclicRoleGraphError, DuplicateRoleError, RoleNotFoundError
from mp_rbac.rbac.role import Role

logger = logging.getLogger(__name__)


class RoleGraph:
    """Directed acyclic graph of roles keyed by name."""

    def __init__(self, roles: Iterable[Role] = ()) -> None:
        self._roles: dict[str, Role] = {}
        self._closures: dict[str, frozenset[str]] = {}
        self.add_roles(roles)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_role(self, role: Role) -> None:
        """Insert *role*; its children may reference roles added later."""
        if role.name in self._roles:
            raise DuplicateRoleError(role.name)
        self._roles[role.name] = role
        # The new node may close a loop through roles that already named it.
        path = self._find_path(role.name, role.name)
        if path is not None:
            del self._roles[role.name]
            raise CyclicRoleGraphError(path)
        self._invalidate()

    def add_roles(self, roles: Iterable[Role]) -> None:
        for role in roles:
            self.add_role(role)

    def add_child(self, parent: str, child: str) -> None:
        """Make *child* a child of *parent*; both must already exist."""
        parent_role = self.get_role(parent)
        self.get_role(child)
        if parent == child:
            raise CyclicRoleGraphError([parent, child])
        back = self._find_path(child, parent)
        if back is not None:
            raise CyclicRoleGraphError([parent, *back])
        parent_role.add_child(child)
        self._invalidate()

    def add_permission(self, role_name: str, permission: str) -> None:
        self.get_role(role_name).add_permission(permission)
        self._invalidate()

    def clear(self) -> None:
        self._roles.clear()
        self._invalidate()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_role(self, name: str) -> Role:
        try:
            return self._roles[name]
        except KeyError:
            raise RoleNotFoundError(name) from None

    def has_role(self, name: str) -> bool:
        return name in self._roles

    @property
    def roles(self) -> list[Role]:
        return list(self._roles.values())

    def role_has_permission(self, role_name: str, permission: str) -> bool:
        """Return ``True`` if *role_name* or any descendant grants *permission*.

        Raises :class:`RoleNotFoundError` when *role_name*, or a child it
        references, is not in the graph.
        """
        cached = self._closures.get(role_name)
        if cached is not None:
            return permission in cached

        visited: set[str] = set()
        stack = [role_name]
        while stack:
            name = stack.pop()
            if name in visited:
                continue
            visited.add(name)
            role = self.get_role(name)
            if role.has_permission(permission):
                return True
            stack.extend(role.children - visited)
        return False

    def effective_permissions(self, role_name: str) -> frozenset[str]:
        """Return the role's own permissions plus those of all its descendants."""
        cached = self._closures.get(role_name)
        if cached is None:
            permissions: set[str] = set(self.get_role(role_name).permissions)
            for name in self.descendants(role_name):
                permissions |= self._roles[name].permissions
            cached = frozenset(permissions)
            self._closures[role_name] = cached
        return cached

    def descendants(self, role_name: str) -> frozenset[str]:
        """Names of every role reachable through child edges (excluding itself)."""
        seen: set[str] = set()
        stack = list(self.get_role(role_name).children)
        while stack:
            name = stack.pop()
            if name in seen:
                continue
            seen.add(name)
            stack.extend(self.get_role(name).children - seen)
        seen.discard(role_name)
        return frozenset(seen)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_path(self, start: str, target: str) -> list[str] | None:
        """Return a child-edge path from *start* down to *target*, if any.

        The path has at least one edge, so ``_find_path(x, x)`` detects loops.
        Dangling child references are skipped.
        """
        stack: list[tuple[str, list[str]]] = [(start, [start])]
        visited: set[str] = set()
        while stack:
            name, path = stack.pop()
            role = self._roles.get(name)
            if role is None:
                continue
            for child in role.children:
                if child == target:
                    return [*path, child]
                if child not in visited:
                    visited.add(child)
                    stack.append((child, [*path, child]))
        return None

    def _invalidate(self) -> None:
        if self._closures:
            logger.debug("rbac.graph_closures_dropped count=%d", len(self._closures))
        self._closures.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._roles.values()))

    def __len__(self) -> int:
        return len(self._roles)

    def __repr__(self) -> str:
        return f"RoleGraph(roles={sorted(self._roles)!r})"


__all__ = ["RoleGraph"]
