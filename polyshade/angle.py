"""Euler-style 3D angles with cached sines and cosines, and transformations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple, Union

from .vectors import Point3D


def rotate_pair(pls: float, mns: float, cos: float, sin: float) -> Tuple[float, float]:
    """Rotate the pair (pls, mns) in its plane; returns the new pair."""
    return pls * cos - mns * sin, mns * cos + pls * sin


def _clamped_asin(value: float) -> float:
    return math.asin(max(-1.0, min(1.0, value)))


_UNIT_X = Point3D(1, 0, 0)
_UNIT_Y = Point3D(0, 1, 0)
_UNIT_Z = Point3D(0, 0, 1)


@dataclass
class Angle3D:
    """Three rotation angles with their sines and cosines kept alongside."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    sin_x: float = field(init=False, repr=False, compare=False, default=0.0)
    sin_y: float = field(init=False, repr=False, compare=False, default=0.0)
    sin_z: float = field(init=False, repr=False, compare=False, default=0.0)
    cos_x: float = field(init=False, repr=False, compare=False, default=1.0)
    cos_y: float = field(init=False, repr=False, compare=False, default=1.0)
    cos_z: float = field(init=False, repr=False, compare=False, default=1.0)

    def __post_init__(self) -> None:
        self.update_sin_cos()

    def update_sin_cos(self) -> None:
        """Recompute the cached sines and cosines from the angles."""
        self.sin_x = math.sin(self.x)
        self.sin_y = math.sin(self.y)
        self.sin_z = math.sin(self.z)
        self.cos_x = math.cos(self.x)
        self.cos_y = math.cos(self.y)
        self.cos_z = math.cos(self.z)

    def _point_fore(self, p: Point3D) -> Point3D:
        x, y, z = p
        x, z = rotate_pair(x, z, self.cos_x, self.sin_x)
        y, z = rotate_pair(y, z, self.cos_y, self.sin_y)
        y, x = rotate_pair(y, x, self.cos_z, self.sin_z)
        return Point3D(x, y, z)

    def _point_back(self, p: Point3D) -> Point3D:
        x, y, z = p
        x, y = rotate_pair(x, y, self.cos_z, self.sin_z)
        z, y = rotate_pair(z, y, self.cos_y, self.sin_y)
        z, x = rotate_pair(z, x, self.cos_x, self.sin_x)
        return Point3D(x, y, z)

    def rotate_fore(self, other: Union[Point3D, Angle3D]) -> Union[Point3D, Angle3D]:
        """Rotate a point forwards, or compose this rotation with another angle."""
        if isinstance(other, Point3D):
            return self._point_fore(other)
        if isinstance(other, Angle3D):
            px = other._point_fore(self._point_fore(_UNIT_X))
            py = other._point_fore(self._point_fore(_UNIT_Y))
            pz = other._point_fore(self._point_fore(_UNIT_Z))
            return Angle3D(
                math.atan2(px.z, pz.z),
                _clamped_asin(py.z),
                math.atan2(py.x, py.y),
            )
        raise TypeError(f"cannot rotate {type(other).__name__}")

    def rotate_back(self, other: Union[Point3D, Angle3D]) -> Union[Point3D, Angle3D]:
        """Rotate a point backwards, or compose the inverse rotations."""
        if isinstance(other, Point3D):
            return self._point_back(other)
        if isinstance(other, Angle3D):
            px = other._point_back(self._point_back(_UNIT_X))
            py = other._point_back(self._point_back(_UNIT_Y))
            pz = other._point_back(self._point_back(_UNIT_Z))
            return Angle3D(
                math.atan2(pz.x, pz.z),
                _clamped_asin(pz.y),
                math.atan2(px.y, py.y),
            )
        raise TypeError(f"cannot rotate {type(other).__name__}")


@dataclass
class Transformation3D:
    """A position together with a rotation."""

    pos: Point3D = field(default_factory=Point3D)
    rot: Angle3D = field(default_factory=Angle3D)

    def to_floats(self) -> Tuple[float, ...]:
        """Flatten as position, sines, cosines, angles: the GPU data layout."""
        r = self.rot
        return (
            *self.pos,
            r.sin_x, r.sin_y, r.sin_z,
            r.cos_x, r.cos_y, r.cos_z,
            r.x, r.y, r.z,
        )