"""Kernel security – ProtectionPolicy."""
from __future__ import annotations

from enum import Enum


class ProtectionPolicy(str, Enum):
    """Default decision applied by adapters when no explicit rule matches."""
    ALLOW = "ALLOW"
    DENY = "DENY"


def resolve_unmatched(policy: ProtectionPolicy | str) -> bool:
    """Return the decision for a request that no guard rule covers."""
    if not isinstance(policy, ProtectionPolicy):
        policy = ProtectionPolicy(policy.upper())
    return policy is ProtectionPolicy.ALLOW


__all__ = ["ProtectionPolicy", "resolve_unmatched"]
