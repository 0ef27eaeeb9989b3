"""Testing fakes – in-memory doubles for RBAC collaborators."""
from mp_rbac.testing.fakes.rbac import CountingRoleProvider, RecordingAssertion

__all__ = ["CountingRoleProvider", "RecordingAssertion"]
