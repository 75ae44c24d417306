"""Render lightweight array-shaped element trees to escaped HTML."""

__version__ = "0.1.0"

from .attrs import serialize_attrs
from .elements import (
    Component,
    ComponentNode,
    ElementProps,
    FragmentNode,
    ParsedElement,
    TagNode,
    classify,
    destructure,
)
from .errors import ValidationError
from .escape import escape
from .names import VOID_TAGS, is_valid_attribute_name, is_valid_tag_name
from .render import DEFAULT_MAX_DEPTH, render, render_document
from .render_json import render_to_json

__all__ = [
    "Component",
    "ComponentNode",
    "DEFAULT_MAX_DEPTH",
    "ElementProps",
    "FragmentNode",
    "ParsedElement",
    "TagNode",
    "VOID_TAGS",
    "ValidationError",
    "classify",
    "destructure",
    "escape",
    "is_valid_attribute_name",
    "is_valid_tag_name",
    "render",
    "render_document",
    "render_to_json",
    "serialize_attrs",
]
