"""Testing generators – property-based strategies."""
from mp_rbac.testing.generators.strategies import permission_strategy, role_dag_strategy

__all__ = ["permission_strategy", "role_dag_strategy"]
