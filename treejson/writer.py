"""Stream intermediate JSON values as escaped, indented text."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, replace
from typing import Optional, TextIO

from .values import JsonArray, JsonObject, JsonValue


@dataclass(frozen=True)
class SerializationContext:
    depth: int = 0
    indent: Optional[int] = 3
    ensure_ascii: bool = False

    def nested(self) -> "SerializationContext":
        return replace(self, depth=self.depth + 1)

    def line_break(self) -> str:
        if self.indent is None:
            return ""
        return "\n" + " " * (self.indent * self.depth)


def escape_string(text: str, *, ensure_ascii: bool = False) -> str:
    """Quote text for JSON: quotes, backslashes and control characters are escaped."""
    return json.dumps(text, ensure_ascii=ensure_ascii)


def write_value(value: JsonValue, out: TextIO, ctx: SerializationContext) -> None:
    if value is None:
        out.write("null")
    elif isinstance(value, str):
        out.write(escape_string(value, ensure_ascii=ctx.ensure_ascii))
    elif isinstance(value, JsonObject):
        _write_object(value, out, ctx)
    elif isinstance(value, JsonArray):
        _write_array(value, out, ctx)
    else:
        raise TypeError(f"Unsupported value type: {type(value)!r}")


def _write_object(value: JsonObject, out: TextIO, ctx: SerializationContext) -> None:
    if not value.members:
        out.write("{}")
        return
    inner = ctx.nested()
    out.write("{")
    for index, (key, member) in enumerate(value.members):
        if index:
            out.write(",")
        out.write(inner.line_break())
        out.write(escape_string(key, ensure_ascii=ctx.ensure_ascii))
        out.write(": ")
        write_value(member, out, inner)
    out.write(ctx.line_break())
    out.write("}")


def _write_array(value: JsonArray, out: TextIO, ctx: SerializationContext) -> None:
    if not value.items:
        out.write("[]")
        return
    inner = ctx.nested()
    out.write("[")
    for index, item in enumerate(value.items):
        if index:
            out.write(",")
        out.write(inner.line_break())
        write_value(item, out, inner)
    out.write(ctx.line_break())
    out.write("]")


def dump(
    value: JsonValue,
    out: TextIO,
    *,
    indent: Optional[int] = 3,
    ensure_ascii: bool = False,
) -> None:
    """Write value followed by a trailing newline."""
    write_value(value, out, SerializationContext(indent=indent, ensure_ascii=ensure_ascii))
    out.write("\n")


def dumps(value: JsonValue, *, indent: Optional[int] = 3, ensure_ascii: bool = False) -> str:
    buffer = io.StringIO()
    dump(value, buffer, indent=indent, ensure_ascii=ensure_ascii)
    return buffer.getvalue()
