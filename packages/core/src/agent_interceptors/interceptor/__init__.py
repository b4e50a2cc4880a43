"""Interceptor registry and the input/output pipelines."""

from .definition import InterceptorConfig
from .manager import InterceptorManager
from .response import InputPipelineResult, OutputPipelineResult
from .types import (
    InputData,
    InputInterceptor,
    InputInterceptorResult,
    InterceptorContext,
    OutputData,
    OutputInterceptor,
    OutputInterceptorResult,
)

__all__ = [
    "InputData",
    "InputInterceptor",
    "InputInterceptorResult",
    "InputPipelineResult",
    "InterceptorConfig",
    "InterceptorContext",
    "InterceptorManager",
    "OutputData",
    "OutputInterceptor",
    "OutputInterceptorResult",
    "OutputPipelineResult",
]
