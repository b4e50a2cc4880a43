"""Ready-made interceptors."""

from .content_filter import (
    CONTENT_FILTER_ID,
    contains_sensitive_info,
    create_content_filter_interceptor,
    redact_sensitive_info,
)
from .logging import LOGGING_INTERCEPTOR_ID, create_logging_interceptor

__all__ = [
    "CONTENT_FILTER_ID",
    "LOGGING_INTERCEPTOR_ID",
    "contains_sensitive_info",
    "create_content_filter_interceptor",
    "create_logging_interceptor",
    "redact_sensitive_info",
]
