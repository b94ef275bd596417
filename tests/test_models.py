from pathlib import Path

import pytest
from pydantic import ValidationError

from treejson.models import ConvertOptions, load_options


def test_defaults() -> None:
    options = ConvertOptions()
    assert options.indent == 3
    assert options.ensure_ascii is False
    assert options.strip_text is False


def test_load_options_accepts_aliases(tmp_path: Path) -> None:
    path = tmp_path / "treejson.yaml"
    path.write_text("indent: null\nensureAscii: true\nstripText: true\n", encoding="utf-8")
    options = load_options(path)
    assert options.indent is None
    assert options.ensure_ascii is True
    assert options.strip_text is True


def test_load_options_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_options(path) == ConvertOptions()


def test_negative_indent_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ConvertOptions(indent=-1)


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("indent: 2\ncolour: blue\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_options(path)
