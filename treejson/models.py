"""Pydantic models for converter configuration."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class ConvertOptions(BaseModel):
    """Settings that shape the emitted JSON text."""

    indent: Optional[NonNegativeInt] = Field(
        3,
        description="Spaces per nesting level. None writes everything on one line.",
    )
    ensure_ascii: bool = Field(
        False,
        alias="ensureAscii",
        description="Escape every non-ASCII character as \\uXXXX.",
    )
    strip_text: bool = Field(
        False,
        alias="stripText",
        description="Trim surrounding whitespace from string leaves.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


def load_options(path: Path) -> ConvertOptions:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return ConvertOptions.model_validate(data)


__all__ = ["ConvertOptions", "load_options"]
