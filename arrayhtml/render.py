"""Render element trees to HTML strings."""

from __future__ import annotations

from typing import List, Sequence

from .attrs import serialize_attrs
from .elements import (
    ComponentNode,
    Element,
    FragmentNode,
    TagNode,
    is_node,
    parse_node,
)
from .errors import ValidationError
from .escape import escape, scalar_to_str
from .names import VOID_TAGS, is_valid_tag_name

DEFAULT_MAX_DEPTH = 128


def render(element: Element, *, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render ``element`` to an HTML string.

    Strings are escaped, numbers and ``True`` are written literally, ``None``
    and ``False`` render nothing. Lists and tuples are nodes of the form
    ``[tag, props?, *children]`` where ``tag`` is an HTML tag name, a
    component callable, or a fragment marker (``""`` or ``[]``).

    Raises ``ValidationError`` for malformed trees; nothing is rendered
    partially. A tree deeper than the interpreter stack allows fails the same
    way as one deeper than ``max_depth``.
    """
    try:
        return _render(element, max_depth)
    except RecursionError as exc:
        raise ValidationError("Maximum element depth exceeded") from exc


def render_document(
    element: Element, *, doctype: str = "html", max_depth: int = DEFAULT_MAX_DEPTH
) -> str:
    return f"<!DOCTYPE {doctype}>" + render(element, max_depth=max_depth)


def _render(element: Element, depth_left: int) -> str:
    if element is None or element is False:
        return ""
    if isinstance(element, str):
        return escape(element)
    if element is True or isinstance(element, (int, float)):
        return scalar_to_str(element)
    if not is_node(element):
        raise ValidationError(
            f"Cannot render element of type {type(element).__name__}"
        )
    if depth_left <= 0:
        raise ValidationError("Maximum element depth exceeded")

    node = parse_node(element)
    if isinstance(node, TagNode):
        return _render_tag(node, depth_left - 1)
    if isinstance(node, ComponentNode):
        return _render(node.component(node.call_props()), depth_left - 1)
    if isinstance(node, FragmentNode):
        if node.props.raw_html is not None:
            if node.children:
                raise ValidationError("'rawHtml' and children must not be used together")
            return node.props.raw_html
        return _render_children(node.children, depth_left - 1)
    raise AssertionError(f"unhandled node type: {node!r}")


def _render_children(children: Sequence[Element], depth_left: int) -> str:
    parts: List[str] = [_render(child, depth_left) for child in children]
    return "".join(parts)


def _render_tag(node: TagNode, depth_left: int) -> str:
    tag = node.tag
    if not is_valid_tag_name(tag):
        raise ValidationError(f"Invalid tag name: {tag}")
    raw_html = node.props.raw_html
    open_tag = f"<{tag}{serialize_attrs(node.props.attrs)}>"

    if tag in VOID_TAGS:
        if node.children:
            raise ValidationError(f"Void tag can't have children: {tag}")
        if raw_html is not None:
            raise ValidationError(f"Void tag can't have a 'rawHtml' prop: {tag}")
        return open_tag

    if raw_html is not None:
        if node.children:
            raise ValidationError("'rawHtml' and children must not be used together")
        # Raw HTML insertion assumes content is trusted.
        return f"{open_tag}{raw_html}</{tag}>"

    return f"{open_tag}{_render_children(node.children, depth_left)}</{tag}>"


__all__ = ["DEFAULT_MAX_DEPTH", "render", "render_document"]
