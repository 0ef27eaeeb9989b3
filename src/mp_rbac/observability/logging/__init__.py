"""Observability – structured logging helpers."""
from mp_rbac.observability.logging.audit import AuditLogger, AuditOutcome
from mp_rbac.observability.logging.factory import JsonLoggerFactory
from mp_rbac.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "get_logger",
]
