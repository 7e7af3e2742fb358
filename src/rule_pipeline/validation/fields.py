"""
Field lookup helpers shared by the built-in stages.

Inputs may be mappings (parsed JSON, request dicts) or objects (pydantic
models, dataclasses). Paths are dotted: "applicant.email".
"""

from collections.abc import Mapping
from typing import Any


class _Missing:
    """Sentinel for a field that is not present."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def resolve_field(value: Any, path: str) -> Any:
    """
    Look up a dotted path in a mapping or object graph.

    Each segment is tried as a mapping key first, then as an attribute.

    Args:
        value: Root input value
        path: Dotted field path

    Returns:
        The field value, or MISSING if any segment is absent
    """
    current = value
    for segment in path.split("."):
        if current is None:
            return MISSING
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif hasattr(current, segment):
            current = getattr(current, segment)
        else:
            return MISSING
    return current


def is_blank(field_value: Any) -> bool:
    """True for MISSING, None, and empty/whitespace-only strings."""
    if field_value is MISSING or field_value is None:
        return True
    return isinstance(field_value, str) and not field_value.strip()
