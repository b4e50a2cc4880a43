"""Exceptions for agent-interceptors.

Handler faults and blocks are never raised to callers of the pipelines;
these types cover the few places where the package itself refuses to
proceed.
"""

from __future__ import annotations


class InterceptorError(Exception):
    """Root exception for the entire agent-interceptors package."""


class InterceptorManagerNotConfiguredError(InterceptorError):
    """Raised when no manager is bound to the current context.

    Usage: call :func:`~agent_interceptors.scope.set_interceptor_manager`
    while bootstrapping a session before resolving the manager elsewhere.
    """

    def __init__(self) -> None:
        super().__init__(
            "No InterceptorManager is bound to the current context; "
            "call set_interceptor_manager() first"
        )
