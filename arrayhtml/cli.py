"""Command-line interface for arrayhtml."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pydantic
import yaml
from jinja2 import TemplateError

from . import __version__
from .elements import Element
from .errors import ValidationError
from .io_utils import load_element_source, stable_json_dumps, warn, write_text
from .models import RenderOptions, load_render_options
from .names import is_valid_attribute_name, is_valid_tag_name
from .render import render, render_document
from .render_json import render_to_json
from .templating import render_template


def _resolve_options(args: argparse.Namespace) -> RenderOptions:
    """Merge the optional YAML config with flags given on the command line."""
    data: Dict[str, Any] = {}
    try:
        if args.config:
            data = load_render_options(Path(args.config)).model_dump()
        overrides = {
            "max_depth": args.max_depth,
            "output": "json" if args.json else None,
            "doctype": "html" if args.doctype else None,
            "template": args.template,
        }
        data.update({key: value for key, value in overrides.items() if value is not None})
        return RenderOptions.model_validate(data)
    except pydantic.ValidationError as exc:
        raise SystemExit(f"Invalid render options: {exc}") from exc
    except (OSError, yaml.YAMLError) as exc:
        raise SystemExit(f"Cannot read config {args.config}: {exc}") from exc


def _render_output(element: Element, options: RenderOptions) -> str:
    if options.output == "json":
        data = render_to_json(element, max_depth=options.max_depth)
        return stable_json_dumps(data, indent=options.json_indent)
    if options.template is not None:
        return render_template(options.template, element, max_depth=options.max_depth)
    if options.doctype:
        return render_document(element, doctype=options.doctype, max_depth=options.max_depth)
    return render(element, max_depth=options.max_depth)


def _handle_render(args: argparse.Namespace) -> None:
    options = _resolve_options(args)
    if args.app_dir and ":" in args.source and not Path(args.source).exists():
        app_dir = str(Path(args.app_dir).resolve())
        if app_dir not in sys.path:
            sys.path.insert(0, app_dir)

    try:
        element = load_element_source(args.source)
    except (OSError, ValueError, ImportError, AttributeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Cannot load element from {args.source}: {exc}") from exc

    try:
        output = _render_output(element, options)
    except (ValidationError, TypeError) as exc:
        raise SystemExit(f"Render failed: {exc}") from exc
    except TemplateError as exc:
        raise SystemExit(f"Template error in {options.template}: {exc}") from exc

    if args.out:
        write_text(args.out, output)
    else:
        sys.stdout.write(output)


def _handle_check_name(args: argparse.Namespace) -> None:
    if args.attribute:
        valid = is_valid_attribute_name(args.name)
        kind = "attribute"
    else:
        valid = is_valid_tag_name(args.name)
        kind = "tag"
    if not valid:
        warn(f"Invalid {kind} name: {args.name}")
        raise SystemExit(1)
    print(f"Valid {kind} name: {args.name}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arrayhtml",
        description="Render array-shaped element trees to HTML or JSON.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"arrayhtml {__version__}",
        help="Show the arrayhtml version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render an element tree.",
        description=(
            "Render an element tree loaded from a JSON/YAML file or a "
            "'module:attribute' reference."
        ),
    )
    render_parser.add_argument(
        "source",
        help="Path to a .json/.yaml file, or module:attribute (callables become [attribute]).",
    )
    render_parser.add_argument(
        "--out",
        default=None,
        help="File to write the output to (defaults to stdout).",
    )
    render_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit resolved JSON data instead of HTML.",
    )
    render_parser.add_argument(
        "--doctype",
        action="store_true",
        help="Prefix the HTML output with <!DOCTYPE html>.",
    )
    render_parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Jinja2 layout to render with the element HTML bound to 'body'.",
    )
    render_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum element nesting depth.",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help="YAML file with render options.",
    )
    render_parser.add_argument(
        "--app-dir",
        default=".",
        help="Directory added to the import path for module:attribute sources.",
    )
    render_parser.set_defaults(func=_handle_render)

    check_parser = subparsers.add_parser(
        "check-name",
        help="Check whether a tag or attribute name is valid.",
        description="Exit with status 1 when the name would be rejected at render time.",
    )
    check_parser.add_argument("name", help="Name to check.")
    check_parser.add_argument(
        "--attribute",
        action="store_true",
        help="Check an attribute name instead of a tag name.",
    )
    check_parser.set_defaults(func=_handle_check_name)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
