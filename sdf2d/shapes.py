"""2D primitive shapes.

Both primitives live in the XY plane and ignore Z, so evaluated in 3D
they are infinite prisms along the Z axis.
"""

from __future__ import annotations

from dataclasses import dataclass

from sdfexpr import Tree

from _sdf_common import Vec2, doc_field, box_distance, shape, vec2


@shape
@dataclass(frozen=True)
class Circle:
    """2D circle"""

    center: Vec2 = doc_field("Center of the circle (in XY)")
    radius: float = doc_field("Circle radius")

    def to_tree(self) -> Tree:
        x, y, _ = Tree.axes()
        c = vec2(self.center)
        return ((x - c.x).square() + (y - c.y).square()).sqrt() - self.radius


@shape
@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle"""

    center: Vec2 = doc_field("Center of the rectangle (in XY)")
    half_size: Vec2 = doc_field("Half-size of the rectangle on each axis")

    def to_tree(self) -> Tree:
        x, y, _ = Tree.axes()
        c = vec2(self.center)
        h = vec2(self.half_size)
        dx = (x - c.x).abs() - h.x
        dy = (y - c.y).abs() - h.y
        return box_distance(dx, dy)
