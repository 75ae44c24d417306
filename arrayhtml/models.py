"""Pydantic models for render configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .render import DEFAULT_MAX_DEPTH


class RenderOptions(BaseModel):
    """Options accepted by ``arrayhtml render`` and its YAML config file."""

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        alias="maxDepth",
        description="Deepest node or component nesting allowed before rendering fails.",
    )
    output: Literal["html", "json"] = Field(
        "html", description="Whether to emit an HTML string or resolved JSON data."
    )
    doctype: Optional[str] = Field(
        None, description="Doctype to prefix HTML output with (e.g. 'html')."
    )
    json_indent: Optional[int] = Field(
        2,
        ge=0,
        alias="jsonIndent",
        description="Indentation for JSON output; null writes a single line.",
    )
    template: Optional[Path] = Field(
        None,
        description="Jinja2 layout rendered with the element HTML bound to 'body'.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_render_options(path: Path) -> RenderOptions:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return RenderOptions.model_validate(data)


__all__ = ["RenderOptions", "load_render_options"]
