"""Observability – structured logging and decision auditing."""

from mp_rbac.observability.logging import AuditLogger, AuditOutcome, JsonLoggerFactory, get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "get_logger",
]
