"""
Field paths for attaching diagnostics to nested configuration fields.

A path is an immutable chain of segments. Every builder method returns a
new path, so a parent path can be shared between sibling checks.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class _Segment:
    kind: str                 # "child", "index" or "key"
    value: Union[str, int]


@dataclass(frozen=True)
class FieldPath:
    """Location of a field inside a nested object, e.g. ``spec.items[2].name``."""

    segments: Tuple[_Segment, ...] = ()

    @classmethod
    def new(cls, name: str, *more_names: str) -> "FieldPath":
        """Build a root path from one or more field names."""
        path = cls()
        for part in (name,) + more_names:
            path = path.child(part)
        return path

    def child(self, name: str, *more_names: str) -> "FieldPath":
        segments = self.segments + tuple(_Segment("child", n) for n in (name,) + more_names)
        return FieldPath(segments)

    def index(self, index: int) -> "FieldPath":
        return FieldPath(self.segments + (_Segment("index", index),))

    def key(self, key: str) -> "FieldPath":
        return FieldPath(self.segments + (_Segment("key", key),))

    def is_empty(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        if not self.segments:
            return "<nil>"

        parts = []
        for segment in self.segments:
            if segment.kind == "child":
                if parts:
                    parts.append(".")
                parts.append(str(segment.value))
            else:
                # index and key segments both render in brackets
                parts.append(f"[{segment.value}]")
        return "".join(parts)
