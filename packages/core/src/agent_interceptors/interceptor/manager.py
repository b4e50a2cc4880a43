"""InterceptorManager — registration and execution of interceptors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from .response import InputPipelineResult, OutputPipelineResult
from .types import (
    InputData,
    InputInterceptorResult,
    InterceptorContext,
    OutputData,
    OutputInterceptorResult,
)

if TYPE_CHECKING:
    from .definition import InterceptorConfig

_log = logging.getLogger(__name__)


class InterceptorManager:
    """Keyed store of interceptors plus the two pipelines that run them.

    Registrations are keyed by ``id``; registering the same id again
    replaces the previous entry.  Each pipeline run selects the enabled
    handlers for its direction, orders them by ``priority`` (descending,
    stable for ties) and calls them one after another.

    A handler that raises is logged and skipped; the pipeline never raises
    because of a handler.  A handler that returns ``blocked`` stops the run.

    The manager does no locking.  Use it from a single event loop.
    """

    def __init__(self, session_id: str, logger: logging.Logger | None = None) -> None:
        self._session_id = session_id
        self._interceptors: dict[str, InterceptorConfig] = {}
        self._log = logger or _log

    @property
    def session_id(self) -> str:
        return self._session_id

    # ── Registration ─────────────────────────────────────────────

    def register(self, config: InterceptorConfig) -> None:
        """Register an interceptor, replacing any entry with the same id."""
        if config.id in self._interceptors:
            self._log.debug(
                "[InterceptorManager] Replacing existing interceptor: %s", config.id
            )
        self._interceptors[config.id] = config
        self._log.debug(
            "[InterceptorManager] Registered interceptor: %s (%s)",
            config.id,
            config.name,
        )

    def unregister(self, interceptor_id: str) -> bool:
        """Remove an interceptor.  Returns ``False`` if it was not registered."""
        removed = self._interceptors.pop(interceptor_id, None) is not None
        if removed:
            self._log.debug(
                "[InterceptorManager] Unregistered interceptor: %s", interceptor_id
            )
        return removed

    # ── Retrieval ────────────────────────────────────────────────

    def get(self, interceptor_id: str) -> InterceptorConfig | None:
        return self._interceptors.get(interceptor_id)

    def get_all(self) -> list[InterceptorConfig]:
        """Return a snapshot of all registrations in registration order."""
        return list(self._interceptors.values())

    def __len__(self) -> int:
        return len(self._interceptors)

    def __contains__(self, interceptor_id: object) -> bool:
        return interceptor_id in self._interceptors

    # ── Cleanup ──────────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all registrations."""
        self._interceptors.clear()
        self._log.debug("[InterceptorManager] Cleared all interceptors")

    # ── Execution ────────────────────────────────────────────────

    async def execute_input_interceptors(
        self,
        message: Any,
        model: str | None = None,
        is_retry: bool | None = None,
    ) -> InputPipelineResult:
        """Run input interceptors in priority order.

        Returns the (possibly replaced) message, or the message as it stood
        when a handler blocked it together with that handler's reason.
        """
        interceptors = self._sorted_input_interceptors()
        if not interceptors:
            return InputPipelineResult(message=message, blocked=False)

        current_message = message
        metadata: dict[str, Any] = {}
        context = self._new_context(model)

        for interceptor in interceptors:
            handler = interceptor.on_input
            if handler is None:
                continue

            self._log.debug(
                "[InterceptorManager] Executing input interceptor: %s", interceptor.id
            )
            context.metadata = dict(metadata)
            try:
                data = InputData(message=current_message, is_retry=is_retry)
                raw = handler(data, context)
                if isawaitable(raw):
                    raw = await raw
                result = _coerce(raw, InputInterceptorResult)
            except Exception as exc:
                self._log.exception(
                    "[InterceptorManager] Error in input interceptor %s: %s",
                    interceptor.id,
                    exc,
                )
                continue

            if result is None:
                continue

            if result.blocked:
                self._log.debug(
                    "[InterceptorManager] Input blocked by interceptor: %s",
                    interceptor.id,
                )
                return InputPipelineResult(
                    message=current_message,
                    blocked=True,
                    block_reason=result.block_reason,
                )

            if result.message is not None:
                current_message = result.message
                self._log.debug(
                    "[InterceptorManager] Input modified by interceptor: %s",
                    interceptor.id,
                )

            if result.metadata:
                metadata = {**metadata, **result.metadata}

        return InputPipelineResult(message=current_message, blocked=False)

    async def execute_output_interceptors(
        self,
        event: Any,
        model: str | None = None,
    ) -> OutputPipelineResult:
        """Run output interceptors in priority order."""
        interceptors = self._sorted_output_interceptors()
        if not interceptors:
            return OutputPipelineResult(event=event, blocked=False)

        current_event = event
        metadata: dict[str, Any] = {}
        context = self._new_context(model)

        for interceptor in interceptors:
            handler = interceptor.on_output
            if handler is None:
                continue

            self._log.debug(
                "[InterceptorManager] Executing output interceptor: %s",
                interceptor.id,
            )
            context.metadata = dict(metadata)
            try:
                raw = handler(OutputData(event=current_event), context)
                if isawaitable(raw):
                    raw = await raw
                result = _coerce(raw, OutputInterceptorResult)
            except Exception as exc:
                self._log.exception(
                    "[InterceptorManager] Error in output interceptor %s: %s",
                    interceptor.id,
                    exc,
                )
                continue

            if result is None:
                continue

            if result.blocked:
                self._log.debug(
                    "[InterceptorManager] Output blocked by interceptor: %s",
                    interceptor.id,
                )
                return OutputPipelineResult(event=current_event, blocked=True)

            if result.event is not None:
                current_event = result.event
                self._log.debug(
                    "[InterceptorManager] Output modified by interceptor: %s",
                    interceptor.id,
                )

            if result.metadata:
                metadata = {**metadata, **result.metadata}

        return OutputPipelineResult(event=current_event, blocked=False)

    # ── Helpers ──────────────────────────────────────────────────

    def _new_context(self, model: str | None) -> InterceptorContext:
        return InterceptorContext(
            session_id=self._session_id,
            timestamp=datetime.now(timezone.utc),
            model=model,
        )

    def _sorted_input_interceptors(self) -> list[InterceptorConfig]:
        """Enabled interceptors with an input handler, highest priority first."""
        return sorted(
            (
                i
                for i in self._interceptors.values()
                if i.enabled and i.on_input is not None
            ),
            key=lambda i: i.priority,
            reverse=True,
        )

    def _sorted_output_interceptors(self) -> list[InterceptorConfig]:
        """Enabled interceptors with an output handler, highest priority first."""
        return sorted(
            (
                i
                for i in self._interceptors.values()
                if i.enabled and i.on_output is not None
            ),
            key=lambda i: i.priority,
            reverse=True,
        )


def _coerce(raw: object, result_cls: type[Any]) -> Any:
    """Accept ``None``, a result instance, or a mapping of its fields."""
    if raw is None:
        return None
    if isinstance(raw, result_cls):
        result = raw
    elif isinstance(raw, Mapping):
        result = result_cls(**raw)
    else:
        msg = (
            f"Interceptor returned {type(raw).__name__}, "
            f"expected {result_cls.__name__}"
        )
        raise TypeError(msg)
    if result.metadata is not None and not isinstance(result.metadata, Mapping):
        msg = (
            f"Interceptor metadata must be a mapping, "
            f"got {type(result.metadata).__name__}"
        )
        raise TypeError(msg)
    return result
