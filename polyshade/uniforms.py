"""Shader programs and float uniforms that defer uploads until bound."""

from __future__ import annotations

import logging
from typing import ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple

from .angle import Transformation3D

log = logging.getLogger(__name__)

Upload = Tuple[int, int, int, Tuple[float, ...]]


class ShaderProgram:
    """A shader program that tracks which program is in use.

    Uploads are recorded in ``uploads``; a backend for a real graphics API
    overrides :meth:`upload`.
    """

    _current_id: ClassVar[Optional[int]] = None

    def __init__(self, program_id: int, locations: Optional[Mapping[str, int]] = None) -> None:
        self.program_id = program_id
        self.locations: Dict[str, int] = dict(locations or {})
        self.uniforms: List[FloatUniform] = []
        self.uploads: List[Upload] = []

    def is_current(self) -> bool:
        """True if this program is the one in use."""
        return ShaderProgram._current_id == self.program_id

    def use(self) -> None:
        """Make this program current and flush pending uniform values."""
        if not self.is_current():
            ShaderProgram._current_id = self.program_id
            for uniform in self.uniforms:
                uniform.update()

    def find_uniform(self, name: str) -> int:
        """Location of a uniform, or -1 if the program has none by that name."""
        location = self.locations.get(name, -1)
        if location == -1:
            log.info("Uni '%s' not found in Prog %s.", name, self.program_id)
        else:
            log.info("Uni '%s' found at %s in Prog %s.", name, location, self.program_id)
        return location

    def upload(self, location: int, components: int, count: int, data: Sequence[float]) -> None:
        """Send ``count`` vectors of ``components`` floats to a uniform."""
        self.uploads.append((location, components, count, tuple(data)))


class FloatUniform:
    """An array of float vectors; values set while unbound wait for ``update``."""

    def __init__(self, program: ShaderProgram, name: str, components: int, count: int) -> None:
        self.program = program
        self.location = program.find_uniform(name)
        self.components = components
        self.count = count
        self.size = components * count
        self.pending: Optional[Tuple[float, ...]] = None
        program.uniforms.append(self)

    def set(self, data: Sequence[float]) -> None:
        """Upload now if the program is current, else keep the values for later."""
        values = tuple(float(v) for v in data)
        if len(values) < self.size:
            raise ValueError(f"uniform needs {self.size} floats, got {len(values)}")
        values = values[: self.size]
        if self.program.is_current():
            self.program.upload(self.location, self.components, self.count, values)
        else:
            self.pending = values

    def update(self) -> None:
        """Upload pending values once the program is current."""
        if self.pending is not None and self.program.is_current():
            values, self.pending = self.pending, None
            self.set(values)


def depth_data(near: float, far: float) -> Tuple[float, ...]:
    """Near, far and the derived projection terms for the depth uniform."""
    diff = far - near
    total = far + near
    product2 = far * near * 2
    return (near, far, diff, total, product2, total / diff, product2 / diff)


def scale_data(width: float, height: float) -> Tuple[float, ...]:
    """Window size and the aspect factors that fit the shorter side."""
    if width == height:
        factors = (1.0, 1.0)
    elif width > height:
        factors = (height / width, 1.0)
    else:
        factors = (1.0, width / height)
    return (width, height, *factors)


class DepthUniform(FloatUniform):
    """Seven floats describing the near and far planes."""

    def __init__(self, program: ShaderProgram, name: str) -> None:
        super().__init__(program, name, components=1, count=7)

    def value(self, near: float, far: float) -> None:
        self.set(depth_data(near, far))


class ScaleUniform(FloatUniform):
    """Two 2-vectors: window size and aspect correction."""

    def __init__(self, program: ShaderProgram, name: str) -> None:
        super().__init__(program, name, components=2, count=2)

    def value(self, width: float, height: float) -> None:
        self.set(scale_data(width, height))


class TransformationUniform(FloatUniform):
    """Three 3-vectors: position, sines and cosines of a transformation."""

    def __init__(self, program: ShaderProgram, name: str) -> None:
        super().__init__(program, name, components=3, count=3)

    def value(self, trans: Transformation3D) -> None:
        self.set(trans.to_floats())