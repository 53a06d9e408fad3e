"""
Payload rules shared by the resource services.

Both checks are presence/truthiness only: no type, length or format checks.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence


def missing_fields(payload: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    return [field for field in required if not payload.get(field)]


def merge_update(
    current: Mapping[str, Any],
    payload: Mapping[str, Any],
    fields: Sequence[str],
) -> dict[str, Any]:
    """
    Take each field from the payload when truthy, else keep the stored value.

    A falsy payload value ("", 0, False, None) never overwrites stored data.
    """
    return {field: payload.get(field) or current[field] for field in fields}
