"""Two- and three-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

Scalar = Union[int, float]


@dataclass(frozen=True)
class Point2D:
    """An immutable 2D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def _operands(self, other: object) -> Optional[Tuple[float, float]]:
        if isinstance(other, Point2D):
            return other.x, other.y
        if isinstance(other, (int, float)):
            return other, other
        return None

    def length2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length2())

    def normalize(self) -> Point2D:
        """Vector of unit length in the same direction."""
        length = self.length()
        return Point2D(self.x / length, self.y / length)

    def dot(self, other: Point2D) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def __add__(self, other: Union[Point2D, Scalar]) -> Point2D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point2D(self.x + ops[0], self.y + ops[1])

    def __sub__(self, other: Union[Point2D, Scalar]) -> Point2D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point2D(self.x - ops[0], self.y - ops[1])

    def __mul__(self, other: Union[Point2D, Scalar]) -> Point2D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point2D(self.x * ops[0], self.y * ops[1])

    def __truediv__(self, other: Union[Point2D, Scalar]) -> Point2D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point2D(self.x / ops[0], self.y / ops[1])

    def __neg__(self) -> Point2D:
        return Point2D(-self.x, -self.y)

    def __pos__(self) -> Point2D:
        return Point2D(+self.x, +self.y)

    def __mod__(self, other: Point2D) -> float:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.dot(other)


@dataclass(frozen=True)
class Point3D:
    """An immutable 3D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def _operands(self, other: object) -> Optional[Tuple[float, float, float]]:
        if isinstance(other, Point3D):
            return other.x, other.y, other.z
        if isinstance(other, (int, float)):
            return other, other, other
        return None

    def length2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length2())

    def normalize(self) -> Point3D:
        """Vector of unit length in the same direction."""
        length = self.length()
        return Point3D(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Point3D) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point3D) -> Point3D:
        """Cross product with another vector."""
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __add__(self, other: Union[Point3D, Scalar]) -> Point3D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point3D(self.x + ops[0], self.y + ops[1], self.z + ops[2])

    def __sub__(self, other: Union[Point3D, Scalar]) -> Point3D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point3D(self.x - ops[0], self.y - ops[1], self.z - ops[2])

    def __mul__(self, other: Union[Point3D, Scalar]) -> Point3D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point3D(self.x * ops[0], self.y * ops[1], self.z * ops[2])

    def __truediv__(self, other: Union[Point3D, Scalar]) -> Point3D:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return Point3D(self.x / ops[0], self.y / ops[1], self.z / ops[2])

    def __neg__(self) -> Point3D:
        return Point3D(-self.x, -self.y, -self.z)

    def __pos__(self) -> Point3D:
        return Point3D(+self.x, +self.y, +self.z)

    def __mod__(self, other: Point3D) -> float:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.dot(other)

    def __xor__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.cross(other)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z