"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

import structlog


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    GRANTED = "granted"
    DENIED = "denied"
    ERROR = "error"


class AuditLogger:
    """Dedicated structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog logger. Defaults to ``structlog.get_logger("audit")``.
    """

    def __init__(
        self,
        service: str = "unknown",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else structlog.get_logger("audit")

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.GRANTED,
        **extra: Any,
    ) -> None:
        """Record an access decision.

        Parameters
        ----------
        principal:
            The identity the decision was made for. Uses ``principal.subject``
            or ``principal.id`` when present, otherwise ``str(principal)``.
        resource:
            The protected area (e.g. ``"rbac"`` or ``"document:42"``).
        action:
            The permission that was checked.
        outcome:
            :class:`AuditOutcome` or plain string.
        **extra:
            Additional structured fields to include in the audit entry.
        """
        entry: dict[str, Any] = {
            "service": self._service,
            "principal_id": _principal_id(principal),
            "resource": resource,
            "action": action,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        self._log.warning("audit.access", **entry)


def _principal_id(principal: Any) -> str:
    for attr in ("subject", "id"):
        value = getattr(principal, attr, None)
        if value:
            return str(value)
    return str(principal)


__all__ = ["AuditLogger", "AuditOutcome"]
