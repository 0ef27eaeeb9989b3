"""Kernel security – Principal, SecurityContext, ProtectionPolicy."""
from mp_rbac.kernel.security.principal import Principal
from mp_rbac.kernel.security.policy import ProtectionPolicy, resolve_unmatched
from mp_rbac.kernel.security.security_context import SecurityContext

__all__ = [
    "Principal",
    "ProtectionPolicy",
    "SecurityContext",
    "resolve_unmatched",
]
