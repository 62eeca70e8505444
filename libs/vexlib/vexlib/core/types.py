"""Type keywords of the vex language."""

from __future__ import annotations

from enum import Enum


class TypeName(Enum):
    """Return and parameter types accepted in function declarations."""

    FLOAT = "float"
    VEC2 = "vec2"
    VEC3 = "vec3"
    VEC4 = "vec4"

    @classmethod
    def from_name(cls, name: str) -> TypeName | None:
        """Look up a type by its source-level keyword."""
        for member in cls:
            if member.value == name:
                return member
        return None

    def __str__(self) -> str:
        return self.value
