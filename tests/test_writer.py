import io
import json

import pytest

from treejson.values import JsonArray, JsonObject
from treejson.writer import SerializationContext, dump, dumps, escape_string, write_value


def test_escapes_reserved_characters() -> None:
    raw = 'quote " backslash \\ newline \n tab \t bell \x07'
    escaped = escape_string(raw)
    assert "\n" not in escaped
    assert "\x07" not in escaped
    assert escaped == '"quote \\" backslash \\\\ newline \\n tab \\t bell \\u0007"'
    assert json.loads(escaped) == raw


def test_keys_are_escaped_too() -> None:
    value = JsonObject(members=(('we"ird', "x"),))
    assert dumps(value, indent=None) == '{"we\\"ird": "x"}\n'


def test_non_ascii_kept_unless_requested() -> None:
    value = JsonObject(members=(("name", "café"),))
    assert dumps(value, indent=None) == '{"name": "café"}\n'
    assert dumps(value, indent=None, ensure_ascii=True) == '{"name": "caf\\u00e9"}\n'


def test_indented_layout() -> None:
    value = JsonObject(members=(("a", JsonArray(items=("1", None))), ("b", JsonObject())))
    assert dumps(value, indent=2) == '{\n  "a": [\n    "1",\n    null\n  ],\n  "b": {}\n}\n'


def test_empty_containers() -> None:
    assert dumps(JsonObject(), indent=None) == "{}\n"
    assert dumps(JsonArray(), indent=4) == "[]\n"


def test_duplicate_keys_are_written_in_order() -> None:
    value = JsonObject(members=(("id", "1"), ("id", "2")))
    assert dumps(value, indent=None) == '{"id": "1","id": "2"}\n'


def test_dump_writes_to_stream_with_trailing_newline() -> None:
    out = io.StringIO()
    dump(JsonObject(members=(("a", None),)), out, indent=None)
    assert out.getvalue() == '{"a": null}\n'


def test_context_is_derived_per_level() -> None:
    ctx = SerializationContext(indent=2)
    nested = ctx.nested()
    assert ctx.depth == 0
    assert nested.depth == 1
    assert nested.line_break() == "\n  "
    assert SerializationContext(indent=None).nested().line_break() == ""


def test_rejects_foreign_values() -> None:
    with pytest.raises(TypeError):
        write_value(3.5, io.StringIO(), SerializationContext())  # type: ignore[arg-type]
