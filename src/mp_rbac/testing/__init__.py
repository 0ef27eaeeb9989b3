"""Testing support – fakes, fixtures and generators for RBAC tests.

Import in your ``conftest.py``::

    from mp_rbac.testing.fixtures import authorization_service, role_provider  # noqa: F401
"""

from mp_rbac.testing.fakes import CountingRoleProvider, RecordingAssertion
from mp_rbac.testing.generators import permission_strategy, role_dag_strategy

__all__ = [
    "CountingRoleProvider",
    "RecordingAssertion",
    "permission_strategy",
    "role_dag_strategy",
]
