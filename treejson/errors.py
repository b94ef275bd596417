"""Exceptions raised while loading and converting document trees."""

from __future__ import annotations


class TreeJsonError(Exception):
    """Base class for conversion failures."""


class InputUnavailableError(TreeJsonError):
    """The source document could not be read or parsed, or has no root."""


class MalformedNodeError(TreeJsonError):
    """A tree node breaks the invariants the transducer relies on."""
