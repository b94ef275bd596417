"""Intermediate JSON values produced by the transducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class JsonObject:
    members: Tuple[Tuple[str, "JsonValue"], ...] = ()

    def keys(self) -> List[str]:
        return [key for key, _ in self.members]

    def get(self, key: str) -> "JsonValue":
        """Return the first value stored under key."""
        for member_key, value in self.members:
            if member_key == key:
                return value
        raise KeyError(key)


@dataclass(frozen=True)
class JsonArray:
    items: Tuple["JsonValue", ...] = ()

    def __len__(self) -> int:
        return len(self.items)


JsonValue = Union[JsonObject, JsonArray, str, None]


def to_python(value: JsonValue) -> Any:
    """Convert to plain dicts and lists. Repeated object keys keep the last value."""
    if isinstance(value, JsonObject):
        result: Dict[str, Any] = {}
        for key, member in value.members:
            result[key] = to_python(member)
        return result
    if isinstance(value, JsonArray):
        return [to_python(item) for item in value.items]
    return value
