"""Results returned by the input and output pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InputPipelineResult:
    """Outcome of running the input interceptors.

    When ``blocked`` is true, ``message`` is the value as it stood when the
    blocking handler was called.
    """

    message: Any
    blocked: bool = False
    block_reason: str | None = None


@dataclass(frozen=True)
class OutputPipelineResult:
    """Outcome of running the output interceptors."""

    event: Any
    blocked: bool = False
