"""Domain models for the agent stream."""

from .events import StreamEvent, StreamEventType

__all__ = ["StreamEvent", "StreamEventType"]
