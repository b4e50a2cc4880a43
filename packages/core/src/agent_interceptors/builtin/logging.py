"""Transcript logging — records every input and output of a session."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from ..domain.events import StreamEvent
from ..interceptor.definition import InterceptorConfig

if TYPE_CHECKING:
    from ..interceptor.types import InputData, InterceptorContext, OutputData

_log = logging.getLogger("agent_interceptors.transcript")

LOGGING_INTERCEPTOR_ID = "logging-interceptor"


def _describe(value: object) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str, indent=2)


def create_logging_interceptor(
    logger: logging.Logger | None = None,
) -> InterceptorConfig:
    """Build an interceptor that logs user input and agent output.

    Runs at priority ``0`` so it sees messages after higher-priority
    interceptors have rewritten them.  Never modifies or blocks anything.
    """
    log = logger or _log

    async def on_input(data: InputData, context: InterceptorContext) -> None:
        log.info(
            "[%s] USER INPUT session=%s model=%s retry=%s\n%s",
            context.timestamp.isoformat(),
            context.session_id,
            context.model or "unknown",
            bool(data.is_retry),
            _describe(data.message),
        )

    async def on_output(data: OutputData, context: InterceptorContext) -> None:
        event = data.event
        if isinstance(event, StreamEvent):
            event_type = event.type.value
            body = _describe(event.value)
        else:
            event_type = type(event).__name__
            body = _describe(event)
        log.info(
            "[%s] AGENT OUTPUT session=%s model=%s type=%s\n%s",
            context.timestamp.isoformat(),
            context.session_id,
            context.model or "unknown",
            event_type,
            body,
        )

    return InterceptorConfig(
        id=LOGGING_INTERCEPTOR_ID,
        name="Logging Interceptor",
        description="Logs all input and output for debugging purposes",
        priority=0,
        on_input=on_input,
        on_output=on_output,
    )
