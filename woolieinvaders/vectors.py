"""Two-dimensional vectors for world, pixel and grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Vector2Int:
    """An integer vector, used for grid cells and grid directions."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Vector2Int]

    def __add__(self, other: object) -> Vector2Int:
        if not isinstance(other, Vector2Int):
            return NotImplemented
        return Vector2Int(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f'"({self.x}, {self.y})"'


Vector2Int.ZERO = Vector2Int(0, 0)


@dataclass(frozen=True)
class Vector2:
    """A floating point vector, used for world, pixel and screen positions."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_int(cls, vector: Vector2Int) -> Vector2:
        """Build a float vector from an integer one."""
        return cls(float(vector.x), float(vector.y))

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, (Vector2, Vector2Int)):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector2:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __str__(self) -> str:
        return f'"({_format_number(self.x)}, {_format_number(self.y)})"'


VectorLike = Union[Vector2, Vector2Int]