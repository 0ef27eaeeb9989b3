"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextvars

from mp_rbac.kernel.errors import UnauthorizedError
from mp_rbac.kernel.security.principal import Principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_security_context", default=None
)


class SecurityContext:
    """Store and retrieve the current :class:`Principal` via :mod:`contextvars`.

    Each request (thread or asyncio task) sees its own value, so one request's
    identity can never leak into another's authorization decision.
    """

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if anonymous."""
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal | None) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> Principal:
        """Return the current principal or raise ``UnauthorizedError``."""
        principal = _VAR.get()
        if principal is None:
            raise UnauthorizedError("No authenticated principal in context")
        return principal


__all__ = ["SecurityContext"]
