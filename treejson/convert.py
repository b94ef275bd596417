"""One-call conversion helpers on top of the builder, transducer and writer."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .models import ConvertOptions
from .transducer import transduce
from .tree_builder import load_document, parse_document
from .writer import dumps


def convert_string(markup: Union[bytes, str], options: ConvertOptions | None = None) -> str:
    options = options or ConvertOptions()
    value = transduce(parse_document(markup), options)
    return dumps(value, indent=options.indent, ensure_ascii=options.ensure_ascii)


def convert_file(path: Path, options: ConvertOptions | None = None) -> str:
    options = options or ConvertOptions()
    value = transduce(load_document(path), options)
    return dumps(value, indent=options.indent, ensure_ascii=options.ensure_ascii)
