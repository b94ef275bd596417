"""Utility helpers for file input and diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path


def read_bytes(path: Path) -> bytes:
    with path.open("rb") as fh:
        return fh.read()


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
