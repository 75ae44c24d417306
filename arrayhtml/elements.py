"""Element model: destructuring raw node sequences into typed nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from .errors import ValidationError

RAW_HTML_KEY = "rawHtml"
CHILDREN_KEY = "children"

Element = Any
"""None, False, str, int, float, True, or a node list/tuple."""


class Component(Protocol):
    def __call__(self, props: Dict[str, Any]) -> Element: ...


@dataclass(frozen=True)
class ParsedElement:
    tag: Any
    props: Mapping[str, Any]
    children: Tuple[Element, ...]
    explicit_props: bool = False


@dataclass(frozen=True)
class ElementProps:
    """Props with the reserved ``rawHtml`` key pulled out of the attributes."""

    attrs: Dict[str, Any]
    raw_html: Optional[str] = None


@dataclass(frozen=True)
class TagNode:
    tag: str
    props: ElementProps
    children: Tuple[Element, ...]


@dataclass(frozen=True)
class ComponentNode:
    component: Component
    props: Dict[str, Any]
    children: Tuple[Element, ...]

    def call_props(self) -> Dict[str, Any]:
        """Props passed to the component, with ``children`` merged in."""
        if CHILDREN_KEY in self.props:
            if self.children:
                raise ValidationError("Include children within or after 'props' but not both")
            return dict(self.props)
        return {**self.props, CHILDREN_KEY: list(self.children)}


@dataclass(frozen=True)
class FragmentNode:
    props: ElementProps
    children: Tuple[Element, ...]


Node = Union[TagNode, ComponentNode, FragmentNode]


def is_node(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_fragment_marker(value: Any) -> bool:
    return value == "" or (is_node(value) and len(value) == 0)


def destructure(node: Sequence[Element]) -> ParsedElement:
    """Split ``[tag, props?, *children]`` into its parts.

    The second entry is taken as props only when it is a mapping; otherwise
    props are empty and every entry after the tag is a child.
    """
    if not is_node(node) or len(node) == 0:
        raise ValidationError("element must be a non-empty list or tuple")
    tag = node[0]
    if len(node) > 1 and isinstance(node[1], Mapping):
        return ParsedElement(
            tag=tag, props=node[1], children=tuple(node[2:]), explicit_props=True
        )
    return ParsedElement(tag=tag, props={}, children=tuple(node[1:]))


def split_props(props: Mapping[str, Any]) -> ElementProps:
    attrs: Dict[str, Any] = {}
    raw_html = None
    for key, value in props.items():
        if key == RAW_HTML_KEY:
            raw_html = value
        else:
            attrs[key] = value
    if raw_html is not None and not isinstance(raw_html, str):
        raise ValidationError(f"'{RAW_HTML_KEY}' must be a string")
    return ElementProps(attrs=attrs, raw_html=raw_html)


def classify(parsed: ParsedElement) -> Node:
    """Resolve a parsed element into a tag, component, or fragment node."""
    tag = parsed.tag
    if isinstance(tag, str) and tag:
        return TagNode(tag=tag, props=split_props(parsed.props), children=parsed.children)
    if is_fragment_marker(tag):
        props = split_props(parsed.props)
        if props.attrs:
            raise ValidationError("Fragment must not have any props")
        return FragmentNode(props=props, children=parsed.children)
    if callable(tag):
        return ComponentNode(component=tag, props=dict(parsed.props), children=parsed.children)
    raise ValidationError("element[0] must be a string, function, or fragment marker")


def parse_node(node: Sequence[Element]) -> Node:
    return classify(destructure(node))


__all__ = [
    "CHILDREN_KEY",
    "Component",
    "ComponentNode",
    "Element",
    "ElementProps",
    "FragmentNode",
    "Node",
    "ParsedElement",
    "RAW_HTML_KEY",
    "TagNode",
    "classify",
    "destructure",
    "is_fragment_marker",
    "is_node",
    "parse_node",
    "split_props",
]
