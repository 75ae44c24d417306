"""Attribute serialization."""

from __future__ import annotations

from typing import Any, List, Mapping

from .errors import ValidationError
from .escape import escape, scalar_to_str
from .names import is_valid_attribute_name


def serialize_attrs(props: Mapping[str, Any]) -> str:
    """Render ``props`` as ``' name="value"'`` pairs in insertion order.

    Keys whose value is ``None`` or ``False`` are skipped and ``True`` renders
    the bare attribute name. Every other value is stringified and escaped.
    """
    if not isinstance(props, Mapping):
        raise TypeError(f"props must be a mapping, got {type(props).__name__}")
    parts: List[str] = []
    for name, value in props.items():
        if value is None or value is False:
            continue
        if not is_valid_attribute_name(name):
            raise ValidationError(f"Illegal attribute name: {name}")
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(scalar_to_str(value))}"')
    return "".join(parts)


__all__ = ["serialize_attrs"]
