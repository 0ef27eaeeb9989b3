"""RBAC – @require_permission decorator for handlers and use cases."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from mp_rbac.kernel.errors import ForbiddenError, UnauthorizedError
from mp_rbac.rbac.service import AuthorizationService

F = TypeVar("F", bound=Callable[..., Any])


def _check(
    service: AuthorizationService,
    permission: str,
    context_arg: str | None,
    kwargs: dict[str, Any],
) -> None:
    if service.get_identity() is None:
        raise UnauthorizedError("No authenticated identity in context")
    context = kwargs.get(context_arg) if context_arg else None
    if not service.is_granted(permission, context):
        raise ForbiddenError(
            f"Permission '{permission}' denied",
            permission=permission,
        )


def require_permission(
    service: AuthorizationService,
    permission: str,
    *,
    context_arg: str | None = None,
) -> Callable[[F], F]:
    """Decorator that enforces *permission* through *service*.

    Works on both async and sync callables. Raises :class:`UnauthorizedError`
    when there is no identity and :class:`ForbiddenError` when the decision is
    ``False``. Configuration errors (unknown roles, broken assertions) are not
    caught, so the caller can map them to an internal error instead of a 403.

    *context_arg* names a keyword argument of the wrapped callable to pass to
    assertions as their context.

    Example::

        @require_permission(authz, "orders:cancel", context_arg="order")
        async def cancel_order(*, order: Order) -> None:
            ...
    """

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                _check(service, permission, context_arg, kwargs)
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            _check(service, permission, context_arg, kwargs)
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["require_permission"]
