"""Polyhedra built from shared corners and textured triangular faces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .undex import Undex3D
from .vectors import Point2D, Point3D


@dataclass(frozen=True)
class RenderPoint3D:
    """One vertex as handed to a vertex buffer."""

    position: Point3D = field(default_factory=Point3D)
    normal: Point3D = field(default_factory=Point3D)
    texture: Point2D = field(default_factory=Point2D)


@dataclass(frozen=True)
class TexCorner:
    """A corner index paired with a texture coordinate."""

    udx: int
    tex_x: float = 0.0
    tex_y: float = 0.0

    @property
    def tex(self) -> Point2D:
        return Point2D(self.tex_x, self.tex_y)


FaceTex = Tuple[Point3D, Point3D, Point3D]


class PolyHedra:
    """A set of corners and triangular faces with per-corner face data."""

    def __init__(self) -> None:
        self.corners: List[Point3D] = []
        self.face_indexes: List[Undex3D] = []
        self.face_textures: List[FaceTex] = []

    def add_corner(self, point: Point3D) -> int:
        """Append a corner and return its index."""
        self.corners.append(point)
        return len(self.corners) - 1

    def add_face_color(self, idx0: int, idx1: int, idx2: int, color: int) -> None:
        """Add a triangle whose three corners share an 0xRRGGBB colour."""
        self.face_indexes.append(Undex3D(idx0, idx1, idx2))
        rgb = Point3D(
            ((color >> 16) & 0xFF) / 255.0,
            ((color >> 8) & 0xFF) / 255.0,
            (color & 0xFF) / 255.0,
        )
        self.face_textures.append((rgb, rgb, rgb))

    def add_face3(self, corn0: TexCorner, corn1: TexCorner, corn2: TexCorner) -> None:
        """Add a triangle with a texture coordinate at each corner."""
        self.face_indexes.append(Undex3D(corn0.udx, corn1.udx, corn2.udx))
        self.face_textures.append(
            tuple(Point3D(c.tex_x, c.tex_y, 0.0) for c in (corn0, corn1, corn2))
        )

    def add_face4(
        self, corn0: TexCorner, corn1: TexCorner, corn2: TexCorner, corn3: TexCorner
    ) -> None:
        """Add a quad as the triangles (0, 1, 2) and (2, 1, 3)."""
        self.add_face3(corn0, corn1, corn2)
        self.add_face3(corn2, corn1, corn3)

    def to_buffer_data(self) -> List[RenderPoint3D]:
        """Expand every face into three render vertices."""
        data: List[RenderPoint3D] = []
        for face, texs in zip(self.face_indexes, self.face_textures):
            for udx, tex in zip((face.x, face.y, face.z), texs):
                data.append(RenderPoint3D(self.corners[udx], tex, Point2D()))
        return data

    @classmethod
    def cube(cls, scale: float = 1.0) -> PolyHedra:
        """A cube of half-width ``scale`` centred on the origin."""
        poly = cls()
        s = scale
        # Corner index bits: 1 selects +x, 2 selects +y, 4 selects +z.
        for z in (-s, s):
            for y in (-s, s):
                for x in (-s, s):
                    poly.add_corner(Point3D(x, y, z))

        quads = (
            ((0b000, 0.00, 0.00), (0b010, 0.00, 0.50), (0b001, 0.25, 0.00), (0b011, 0.25, 0.50)),
            ((0b000, 0.25, 0.00), (0b100, 0.25, 0.50), (0b010, 0.50, 0.00), (0b110, 0.50, 0.50)),
            ((0b000, 0.50, 0.00), (0b001, 0.50, 0.50), (0b100, 0.75, 0.00), (0b101, 0.75, 0.50)),
            ((0b111, 0.25, 1.00), (0b110, 0.00, 1.00), (0b101, 0.25, 0.50), (0b100, 0.00, 0.50)),
            ((0b111, 0.50, 1.00), (0b101, 0.25, 1.00), (0b011, 0.50, 0.50), (0b001, 0.25, 0.50)),
            ((0b111, 0.75, 1.00), (0b011, 0.50, 1.00), (0b110, 0.75, 0.50), (0b010, 0.50, 0.50)),
        )
        for quad in quads:
            poly.add_face4(*(TexCorner(*corner) for corner in quad))
        return poly