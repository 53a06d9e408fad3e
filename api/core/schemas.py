"""
Field types shared by the request schemas.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator


def _normalize_text(value: Any) -> Any:
    # "", 0, false and null all mean "not provided"
    if not value:
        return None
    # Truthy scalars are stored as text: 3 -> "3", true -> "true".
    if isinstance(value, bool):
        return "true"
    if isinstance(value, (int, float)):
        return str(value)
    return value


OptionalText = Annotated[str | None, BeforeValidator(_normalize_text)]
