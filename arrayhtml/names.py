"""Tag and attribute name rules."""

from __future__ import annotations

import re

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

_ILLEGAL_ATTRIBUTE_CHARS = re.compile(
    "[ \"'>/=\\\\\u0000-\u001f\ufdd0-\ufdef\ufffe\uffff]"
)

_NORMAL_TAG = re.compile(r"[A-Za-z][A-Za-z0-9]*")

# PCENChar from the HTML custom elements definition.
_PCEN_CHAR = (
    "\\-._0-9a-z\u00b7\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u037d\u037f-\u1fff"
    "\u200c-\u200d\u203f-\u2040\u2070-\u218f\u2c00-\u2fef\u3001-\ud7ff"
    "\uf900-\ufdcf\ufdf0-\ufffd\U00010000-\U000effff"
)
_CUSTOM_ELEMENT = re.compile(f"[a-z][{_PCEN_CHAR}]*-[{_PCEN_CHAR}]*")


def is_valid_attribute_name(name: str) -> bool:
    if not isinstance(name, str):
        raise TypeError(f"attribute name must be a string, got {type(name).__name__}")
    return bool(name) and _ILLEGAL_ATTRIBUTE_CHARS.search(name) is None


def is_valid_tag_name(name: str) -> bool:
    """True for plain ASCII tag names and for valid custom element names."""
    if not isinstance(name, str):
        raise TypeError(f"tag name must be a string, got {type(name).__name__}")
    return bool(_NORMAL_TAG.fullmatch(name) or _CUSTOM_ELEMENT.fullmatch(name))


__all__ = ["VOID_TAGS", "is_valid_attribute_name", "is_valid_tag_name"]
