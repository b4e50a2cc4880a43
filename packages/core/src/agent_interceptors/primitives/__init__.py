"""Primitive building blocks shared across the package."""

from .exceptions import (
    InterceptorError,
    InterceptorManagerNotConfiguredError,
)

__all__ = [
    "InterceptorError",
    "InterceptorManagerNotConfiguredError",
]
