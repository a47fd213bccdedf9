"""Unsigned 3D integer indices with box tests and nested stepping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

_MASK = 0xFFFFFFFF


def _bounds(value: Union[Undex3D, int]) -> Tuple[int, int, int]:
    if isinstance(value, Undex3D):
        return value.x, value.y, value.z
    return value, value, value


@dataclass
class Undex3D:
    """A triple of 32-bit unsigned indices."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Undex3D) -> Undex3D:
        if not isinstance(other, Undex3D):
            return NotImplemented
        return Undex3D(
            (self.x + other.x) & _MASK,
            (self.y + other.y) & _MASK,
            (self.z + other.z) & _MASK,
        )

    def __sub__(self, other: Undex3D) -> Undex3D:
        if not isinstance(other, Undex3D):
            return NotImplemented
        return Undex3D(
            (self.x - other.x) & _MASK,
            (self.y - other.y) & _MASK,
            (self.z - other.z) & _MASK,
        )

    def __str__(self) -> str:
        return f"[{self.x}:{self.y}:{self.z}]"

    def in_box_inclusive(self, low: Undex3D, high: Undex3D) -> bool:
        """True if every component lies within [low, high]."""
        return (
            low.x <= self.x <= high.x
            and low.y <= self.y <= high.y
            and low.z <= self.z <= high.z
        )

    def in_box_exclusive(self, low: Undex3D, high: Undex3D) -> bool:
        """True if every component lies strictly between low and high."""
        return (
            low.x < self.x < high.x
            and low.y < self.y < high.y
            and low.z < self.z < high.z
        )

    def _step(self, low: Union[Undex3D, int], high: Union[Undex3D, int], inclusive: bool) -> bool:
        lx, ly, lz = _bounds(low)
        hx, hy, hz = _bounds(high)

        def past(value: int, limit: int) -> bool:
            return value > limit if inclusive else value >= limit

        self.z += 1
        if past(self.z, hz):
            self.z = lz
            self.y += 1
            if past(self.y, hy):
                self.y = ly
                self.x += 1
                if past(self.x, hx):
                    self.x = lx
                    return False
        return True

    def step_inclusive(self, low: Union[Undex3D, int], high: Union[Undex3D, int]) -> bool:
        """Advance to the next index in [low, high]; False once it wraps around."""
        return self._step(low, high, inclusive=True)

    def step_exclusive(self, low: Union[Undex3D, int], high: Union[Undex3D, int]) -> bool:
        """Advance to the next index in [low, high); False once it wraps around."""
        return self._step(low, high, inclusive=False)