"""Testing generators – Hypothesis strategies for role hierarchies.

Requires the ``hypothesis`` package:

    pip install "mp-rbac[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_rbac.rbac.role import Role

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def permission_strategy() -> "SearchStrategy[str]":
    """Permission names shaped like ``resource:action``."""
    st = _require_hypothesis()
    part = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=6)
    return st.builds(lambda r, a: f"{r}:{a}", part, part)


def role_dag_strategy(max_roles: int = 8) -> "SearchStrategy[list[Role]]":
    """Lists of roles forming an acyclic hierarchy.

    Roles are named ``r0``..``rN`` and a role may only have children with a
    higher index, which rules out cycles by construction.
    """
    st = _require_hypothesis()

    @st.composite
    def _dag(draw: Any) -> list[Role]:
        count = draw(st.integers(min_value=1, max_value=max_roles))
        roles: list[Role] = []
        for index in range(count):
            later = [f"r{j}" for j in range(index + 1, count)]
            children = draw(st.lists(st.sampled_from(later), unique=True)) if later else []
            permissions = draw(st.sets(permission_strategy(), max_size=3))
            roles.append(Role(f"r{index}", permissions=permissions, children=children))
        return roles

    return _dag()


__all__ = ["permission_strategy", "role_dag_strategy"]
