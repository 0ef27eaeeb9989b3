"""RBAC – Role."""

from __future__ import annotations

from typing import Iterable

from mp_rbac.rbac.errors import CyclicRoleGraphError


class Role:
    """A named role owning a set of permissions and child role references.

    Children are stored as *names*; the :class:`~mp_rbac.rbac.graph.RoleGraph`
    resolves them and enforces acyclicity. Mutating a role that is already in a
    graph should go through the graph so cached permission closures are dropped.

    Example::

        admin = Role("admin", permissions={"users:delete"}, children={"member"})
    """

    __slots__ = ("name", "_permissions", "_children")

    def __init__(
        self,
        name: str,
        permissions: Iterable[str] = (),
        children: Iterable[str] = (),
    ) -> None:
        if not name:
            raise ValueError("Role name must be a non-empty string")
        self.name = name
        self._permissions: set[str] = set(permissions)
        self._children: set[str] = set()
        for child in children:
            self.add_child(child)

    @property
    def permissions(self) -> frozenset[str]:
        return frozenset(self._permissions)

    @property
    def children(self) -> frozenset[str]:
        return frozenset(self._children)

    def add_permission(self, permission: str) -> None:
        self._permissions.add(permission)

    def copy(self) -> Role:
        """Return an independent role with the same name, permissions and children."""
        return Role(self.name, self._permissions, self._children)

    def has_permission(self, permission: str) -> bool:
        """Check this role's own permissions only (no inheritance)."""
        return permission in self._permissions

    def add_child(self, child: str | Role) -> None:
        name = child.name if isinstance(child, Role) else child
        if name == self.name:
            raise CyclicRoleGraphError([self.name, self.name])
        self._children.add(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return (
            self.name == other.name
            and self._permissions == other._permissions
            and self._children == other._children
        )

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return (
            f"Role(name={self.name!r}, permissions={sorted(self._permissions)!r}, "
            f"children={sorted(self._children)!r})"
        )

    def __str__(self) -> str:
        return self.name


__all__ = ["Role"]
