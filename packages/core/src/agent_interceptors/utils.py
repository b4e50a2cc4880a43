"""Common utility functions and helpers."""

from __future__ import annotations

from typing import Any


def default_metadata_factory() -> dict[str, Any]:
    """Factory for the mutable metadata dict on dataclass fields."""
    return {}
