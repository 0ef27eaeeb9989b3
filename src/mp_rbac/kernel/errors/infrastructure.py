"""Infrastructure errors — failures of backing stores and collaborators."""

from __future__ import annotations

from mp_rbac.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A backing store or external collaborator failed."""

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
