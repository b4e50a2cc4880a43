"""Content filter — blocks or redacts secrets in either direction."""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING

from ..domain.events import StreamEvent, StreamEventType
from ..interceptor.definition import InterceptorConfig
from ..interceptor.types import InputInterceptorResult, OutputInterceptorResult

if TYPE_CHECKING:
    from ..interceptor.types import InputData, InterceptorContext, OutputData

logger = logging.getLogger(__name__)

CONTENT_FILTER_ID = "content-filter-interceptor"

BLOCK_REASON = (
    "Your message contains sensitive information (passwords, API keys, etc.). "
    "Please remove it and try again."
)

REDACTION = "[REDACTED]"

SENSITIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"password\s*[:=]\s*\S+", re.IGNORECASE),
    re.compile(r"api[_-]?key\s*[:=]\s*\S+", re.IGNORECASE),
    re.compile(r"secret\s*[:=]\s*\S+", re.IGNORECASE),
    re.compile(r"token\s*[:=]\s*\S+", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9._-]+", re.IGNORECASE),
    re.compile(r"sk-[a-zA-Z0-9]{20,}", re.IGNORECASE),  # OpenAI-style keys
    re.compile(r"AIza[a-zA-Z0-9_-]{35}", re.IGNORECASE),  # Google API keys
)


def contains_sensitive_info(text: str) -> bool:
    return any(pattern.search(text) for pattern in SENSITIVE_PATTERNS)


def redact_sensitive_info(text: str) -> str:
    for pattern in SENSITIVE_PATTERNS:
        text = pattern.sub(REDACTION, text)
    return text


def _as_text(message: object) -> str:
    if isinstance(message, str):
        return message
    return json.dumps(message, default=str)


def create_content_filter_interceptor(
    *,
    block_sensitive_input: bool = True,
    block_sensitive_output: bool = False,
    redact_instead_of_block: bool = False,
) -> InterceptorConfig:
    """Build an interceptor that filters passwords, API keys and tokens.

    Parameters
    ----------
    block_sensitive_input:
        Act on user input containing secrets.  Default ``True``.
    block_sensitive_output:
        Act on agent content events containing secrets.  Default ``False``.
    redact_instead_of_block:
        Replace matches with ``[REDACTED]`` instead of blocking.  Input is
        only redacted when the message is a plain string; other message
        shapes are blocked.
    """

    def on_input(
        data: InputData, context: InterceptorContext
    ) -> InputInterceptorResult | None:
        if not block_sensitive_input:
            return None
        if not contains_sensitive_info(_as_text(data.message)):
            return None

        if redact_instead_of_block and isinstance(data.message, str):
            logger.warning("Redacted sensitive information from input")
            return InputInterceptorResult(message=redact_sensitive_info(data.message))

        logger.warning("Blocked input containing sensitive information")
        return InputInterceptorResult(blocked=True, block_reason=BLOCK_REASON)

    def on_output(
        data: OutputData, context: InterceptorContext
    ) -> OutputInterceptorResult | None:
        if not block_sensitive_output:
            return None

        # Only plain-text content events are inspected.
        event = data.event
        if not isinstance(event, StreamEvent):
            return None
        if event.type is not StreamEventType.CONTENT:
            return None
        if not isinstance(event.value, str):
            return None
        if not contains_sensitive_info(event.value):
            return None

        if redact_instead_of_block:
            logger.warning("Redacted sensitive information from output")
            return OutputInterceptorResult(
                event=event.model_copy(
                    update={"value": redact_sensitive_info(event.value)}
                )
            )

        logger.warning("Blocked output containing sensitive information")
        return OutputInterceptorResult(blocked=True)

    return InterceptorConfig(
        id=CONTENT_FILTER_ID,
        name="Content Filter Interceptor",
        description="Filters or redacts sensitive information from messages",
        priority=100,
        on_input=on_input,
        on_output=on_output,
    )
