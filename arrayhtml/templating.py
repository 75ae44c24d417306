"""Jinja2 integration for embedding rendered elements in page layouts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .elements import Element
from .render import DEFAULT_MAX_DEPTH, render


def element_markup(element: Element, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Markup:
    """Render ``element`` and mark the result safe for autoescaping templates."""
    return Markup(render(element, max_depth=max_depth))


def make_environment(template_dir: Path) -> Environment:
    """Return a strict, autoescaping environment that knows about elements.

    Templates can use ``{{ node | element }}`` or ``{{ render_element(node) }}``.
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
    )
    env.filters["element"] = element_markup
    env.globals["render_element"] = element_markup
    return env


def render_template(
    template_path: Path,
    element: Element,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    **context: Any,
) -> str:
    env = make_environment(template_path.parent)
    template = env.get_template(template_path.name)
    body = element_markup(element, max_depth=max_depth)
    return template.render(body=body, **context)


__all__ = ["element_markup", "make_environment", "render_template"]
