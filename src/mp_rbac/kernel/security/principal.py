"""Kernel security – Principal."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity.

    ``roles`` holds role *names*; they are looked up in the role graph when a
    permission is checked.
    """
    subject: str
    roles: frozenset[str] = frozenset()
    tenant_id: str | None = None
    claims: dict[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        # Accept any iterable of names (list, tuple, set) for convenience.
        if not isinstance(self.roles, frozenset):
            object.__setattr__(self, "roles", frozenset(self.roles))

    def __str__(self) -> str:
        return self.subject


__all__ = ["Principal"]
