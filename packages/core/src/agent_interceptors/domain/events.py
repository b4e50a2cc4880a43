"""Agent stream events as seen by the display layer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class StreamEventType(str, Enum):
    """Kinds of event an agent runtime emits while answering a turn."""

    CONTENT = "content"
    THOUGHT = "thought"
    TOOL_CALL_REQUEST = "tool_call_request"
    TOOL_CALL_RESPONSE = "tool_call_response"
    ERROR = "error"
    FINISHED = "finished"


class StreamEvent(BaseModel):
    """A single event of the agent's output stream.

    The interceptor pipelines treat events as opaque values; this model only
    exists so that bundled interceptors can look at ``type`` and ``value``.
    Events are immutable, so interceptors that rewrite content return a copy
    (see :meth:`pydantic.BaseModel.model_copy`).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: StreamEventType
    value: Any = None
