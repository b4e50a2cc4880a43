"""Data passed to and returned from interceptor handlers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..utils import default_metadata_factory


@dataclass
class InterceptorContext:
    """Context information about one pipeline invocation.

    A single context is built per run.  Before each handler call the
    ``metadata`` attribute is replaced with a copy of everything earlier
    handlers contributed during that run.
    """

    session_id: str
    timestamp: datetime
    model: str | None = None
    metadata: dict[str, Any] = field(default_factory=default_metadata_factory)


@dataclass
class InputData:
    """User input on its way to the agent."""

    message: Any
    is_retry: bool | None = None


@dataclass
class OutputData:
    """A stream event on its way from the agent to the display."""

    event: Any


@dataclass(frozen=True)
class InputInterceptorResult:
    """What an input handler may ask for.

    ``message`` replaces the running message unless it is ``None``.
    ``blocked`` stops the pipeline; a blocking result's ``message`` is
    ignored.  ``metadata`` is merged into what later handlers observe.
    """

    message: Any = None
    blocked: bool = False
    block_reason: str | None = None
    metadata: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class OutputInterceptorResult:
    """What an output handler may ask for (no block reason on output)."""

    event: Any = None
    blocked: bool = False
    metadata: Mapping[str, Any] | None = None


InputHandlerReturn = InputInterceptorResult | Mapping[str, Any] | None
OutputHandlerReturn = OutputInterceptorResult | Mapping[str, Any] | None

InputInterceptor = Callable[
    [InputData, InterceptorContext],
    InputHandlerReturn | Awaitable[InputHandlerReturn],
]
"""Signature of an input handler; may be sync or async."""

OutputInterceptor = Callable[
    [OutputData, InterceptorContext],
    OutputHandlerReturn | Awaitable[OutputHandlerReturn],
]
"""Signature of an output handler; may be sync or async."""
