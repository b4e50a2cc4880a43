"""InterceptorConfig — registration record for an interceptor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import InputInterceptor, OutputInterceptor


class InterceptorConfig(BaseModel):
    """Configuration for an interceptor.

    An interceptor provides an input handler, an output handler, or both.
    ``priority`` orders execution: higher values run earlier, equal values
    keep registration order.  Registrations are immutable; to change one,
    register a new config under the same ``id``.

    Example::

        manager.register(
            InterceptorConfig(
                id="shout",
                name="Shout",
                on_input=lambda data, ctx: {"message": data.message.upper()},
            )
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    name: str
    description: str | None = None
    on_input: InputInterceptor | None = None
    on_output: OutputInterceptor | None = None
    enabled: bool = True
    priority: int | float = Field(
        default=0, description="Higher runs earlier; no bound."
    )
