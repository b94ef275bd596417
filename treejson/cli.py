"""Command-line interface: convert one XML document to JSON on stdout."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional

import yaml
from pydantic import ValidationError

from .content import classify_content
from .errors import InputUnavailableError
from .io_utils import warn
from .models import ConvertOptions, load_options
from .node_model import element_children
from .transducer import transduce
from .tree_builder import load_document
from .writer import dump


class _ArgumentParser(argparse.ArgumentParser):
    """Argument errors exit with status 1 instead of argparse's 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(prog="treejson", description="Convert an XML document to JSON")
    parser.add_argument("path", type=Path, help="XML document to convert")
    parser.add_argument("--config", type=Path, help="YAML file with converter options")
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument("--indent", type=int, help="Spaces per nesting level (default 3)")
    layout.add_argument("--compact", action="store_true", help="Write the JSON on a single line")
    parser.add_argument("--ascii", action="store_true", help="Escape non-ASCII characters")
    parser.add_argument(
        "--strip-text", action="store_true", help="Trim surrounding whitespace from text values"
    )
    return parser.parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> ConvertOptions:
    options = ConvertOptions()
    if args.config:
        try:
            options = load_options(args.config)
        except OSError as exc:
            raise SystemExit(f"Could not read config {args.config}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SystemExit(f"Invalid YAML in {args.config}: {exc}") from exc
        except ValidationError as exc:
            raise SystemExit(f"Invalid options in {args.config}: {exc}") from exc

    overrides: dict[str, object] = {}
    if args.compact:
        overrides["indent"] = None
    elif args.indent is not None:
        overrides["indent"] = args.indent
    if args.ascii:
        overrides["ensure_ascii"] = True
    if args.strip_text:
        overrides["strip_text"] = True
    if not overrides:
        return options
    try:
        return ConvertOptions.model_validate({**options.model_dump(), **overrides})
    except ValidationError as exc:
        raise SystemExit(f"Invalid options: {exc}") from exc


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    options = _resolve_options(args)

    try:
        document = load_document(args.path)
    except InputUnavailableError as exc:
        warn(f"error: {exc}")
        return 1

    for root in element_children(document):
        if classify_content(root) == "null":
            warn(f"[treejson] root element <{root.name}> is empty in {args.path}")

    value = transduce(document, options)
    dump(value, sys.stdout, indent=options.indent, ensure_ascii=options.ensure_ascii)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
