"""Session-scoped access to the active InterceptorManager."""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

from .primitives.exceptions import InterceptorManagerNotConfiguredError

if TYPE_CHECKING:
    from .interceptor.manager import InterceptorManager

_manager_var: ContextVar[InterceptorManager | None] = ContextVar(
    "interceptor_manager", default=None
)


def get_interceptor_manager() -> InterceptorManager:
    """Get the manager bound to the current context.

    Raises :class:`InterceptorManagerNotConfiguredError` when the session
    bootstrap never called :func:`set_interceptor_manager`.
    """
    manager = _manager_var.get()
    if manager is None:
        raise InterceptorManagerNotConfiguredError
    return manager


def set_interceptor_manager(manager: InterceptorManager) -> None:
    """Bind *manager* to the current context (and tasks spawned from it)."""
    _manager_var.set(manager)


def reset_interceptor_manager() -> None:
    """Unbind the current manager (testing utility)."""
    _manager_var.set(None)
