"""Config settings – RbacSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_rbac.config.settings.base import Settings
from mp_rbac.config.validation import InvalidSettingValueError
from mp_rbac.kernel.security.policy import ProtectionPolicy
from mp_rbac.rbac.assertions import GLOBAL_ASSERTION_KEY


@dataclasses.dataclass
class RbacSettings(Settings):
    """Settings consumed by the authorization service and its adapters.

    ``protection_policy`` is not used by the decision itself; guards apply it
    when no rule covers a request.
    """

    _prefix: ClassVar[str] = "RBAC"

    protection_policy: ProtectionPolicy = ProtectionPolicy.DENY
    audit_decisions: bool = False
    audit_service_name: str = "rbac"
    global_assertion_key: str = GLOBAL_ASSERTION_KEY

    def _validate(self) -> None:
        if not isinstance(self.protection_policy, ProtectionPolicy):
            try:
                self.protection_policy = ProtectionPolicy(str(self.protection_policy).upper())
            except ValueError:
                raise InvalidSettingValueError(
                    "protection_policy", self.protection_policy, "expected ALLOW or DENY"
                ) from None
        if not self.global_assertion_key:
            raise InvalidSettingValueError(
                "global_assertion_key", self.global_assertion_key, "must not be empty"
            )


__all__ = ["RbacSettings"]
