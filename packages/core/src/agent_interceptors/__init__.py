"""agent-interceptors — observe, rewrite or block agent traffic.

Interceptors are registered on an :class:`InterceptorManager` and run in
priority order over user input (before it reaches the agent) and over each
streamed output event (before it reaches the display).
"""

from __future__ import annotations

from .builtin import create_content_filter_interceptor, create_logging_interceptor
from .domain import StreamEvent, StreamEventType
from .interceptor import (
    InputData,
    InputInterceptor,
    InputInterceptorResult,
    InputPipelineResult,
    InterceptorConfig,
    InterceptorContext,
    InterceptorManager,
    OutputData,
    OutputInterceptor,
    OutputInterceptorResult,
    OutputPipelineResult,
)
from .primitives.exceptions import (
    InterceptorError,
    InterceptorManagerNotConfiguredError,
)
from .scope import (
    get_interceptor_manager,
    reset_interceptor_manager,
    set_interceptor_manager,
)

__all__ = [
    "InputData",
    "InputInterceptor",
    "InputInterceptorResult",
    "InputPipelineResult",
    "InterceptorConfig",
    "InterceptorContext",
    "InterceptorError",
    "InterceptorManager",
    "InterceptorManagerNotConfiguredError",
    "OutputData",
    "OutputInterceptor",
    "OutputInterceptorResult",
    "OutputPipelineResult",
    "StreamEvent",
    "StreamEventType",
    "create_content_filter_interceptor",
    "create_logging_interceptor",
    "get_interceptor_manager",
    "reset_interceptor_manager",
    "set_interceptor_manager",
]
