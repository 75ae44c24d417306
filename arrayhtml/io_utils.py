"""Utility helpers for element IO and diagnostics."""

from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Any, Union

import yaml

from .elements import Element

PathLike = Union[str, Path]


def stable_json_dumps(obj: object, *, indent: int | None = 2) -> str:
    """Serialize JSON with a trailing newline, keeping mapping order.

    Keys are not sorted: attribute order in props is significant.
    """
    return json.dumps(obj, ensure_ascii=False, indent=indent) + "\n"


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_element(path: Path) -> Element:
    """Load an element tree from a ``.json``, ``.yaml`` or ``.yml`` file."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return read_json(path)
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    raise ValueError(f"Unsupported element file type: {path}")


def import_object(reference: str) -> Any:
    """Import ``package.module:attribute``."""
    module_name, _, attr_path = reference.partition(":")
    if not module_name or not attr_path:
        raise ValueError(f"Expected 'module:attribute', got {reference!r}")
    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def load_element_source(source: str) -> Element:
    """Load an element from a file path or a ``module:attribute`` reference.

    A callable attribute is treated as a component and wrapped as ``[attr]``.
    """
    path = Path(source)
    if path.exists():
        return read_element(path)
    if ":" in source:
        obj = import_object(source)
        return [obj] if callable(obj) else obj
    raise FileNotFoundError(f"Element source not found: {source}")


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = [
    "import_object",
    "load_element_source",
    "read_element",
    "read_json",
    "stable_json_dumps",
    "warn",
    "write_text",
]
