"""Render element trees to JSON-compatible data."""

from __future__ import annotations

from typing import Any

from .elements import (
    ComponentNode,
    Element,
    classify,
    destructure,
    is_fragment_marker,
    is_node,
)
from .errors import ValidationError
from .render import DEFAULT_MAX_DEPTH


def render_to_json(element: Element, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Resolve components in ``element`` and return plain nested data.

    Tag nodes come back as ``[tag, props, *children]`` with props untouched
    (no escaping, no ``rawHtml`` checks); props are left out when the input
    node had none. Fragments and non-node values are returned as given.
    """
    try:
        return _to_json(element, max_depth)
    except RecursionError as exc:
        raise ValidationError("Maximum element depth exceeded") from exc


def _to_json(element: Element, depth_left: int) -> Any:
    if not is_node(element):
        return element
    if depth_left <= 0:
        raise ValidationError("Maximum element depth exceeded")

    parsed = destructure(element)
    if is_fragment_marker(parsed.tag):
        return element
    if isinstance(parsed.tag, str):
        children = [_to_json(child, depth_left - 1) for child in parsed.children]
        if parsed.explicit_props:
            return [parsed.tag, parsed.props, *children]
        return [parsed.tag, *children]
    node = classify(parsed)
    if isinstance(node, ComponentNode):
        return _to_json(node.component(node.call_props()), depth_left - 1)
    raise AssertionError(f"unhandled node type: {node!r}")


__all__ = ["render_to_json"]
