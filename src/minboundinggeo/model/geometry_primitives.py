"""
Geometric Primitives for hull computation.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def dot(self, other: Vector) -> float:
        """Planar dot product, the z-component is ignored."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Point:
    """A geometric point in 3D space. Only x and y take part in the hull."""
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_sequence(cls, coords: Sequence[float] | npt.NDArray[np.float64]) -> Point:
        """
        Build a point from 2 or 3 coordinates.

        Args:
            coords: (x, y) or (x, y, z). A missing z defaults to 0.0.

        Raises:
            ValueError: If the number of coordinates is not 2 or 3.
        """
        n = len(coords)
        if n == 2:
            return cls(float(coords[0]), float(coords[1]))
        if n == 3:
            return cls(float(coords[0]), float(coords[1]), float(coords[2]))
        raise ValueError(f"A point needs 2 or 3 coordinates, got {n}.")

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        """Planar distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
