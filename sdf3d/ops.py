"""3D domain operators: periodic repetition and twisting.

Both work by substituting new coordinate expressions for ``(X, Y, Z)``
in the input tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from sdfexpr import Tree

from _sdf_common import Vec3, as_tree, doc_field, shape, vec3


def _repeat_axis(axis: Tree, period: float) -> Tree:
    # Shift by half a cell so copies sit on integer multiples of the period.
    if period == 0:
        return axis
    half = period * 0.5
    return (axis + half).modulo(period) - half


@shape
@dataclass(frozen=True)
class Repeat:
    """Repeat a shape with the given periodicity

    A zero component of *cell* leaves that axis unrepeated.
    """

    shape: object = doc_field("Shape to repeat")
    cell: Vec3 = doc_field("Spacing of the repeating cell")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        cell = vec3(self.cell)
        return as_tree(self.shape).remap_xyz(
            _repeat_axis(x, cell.x),
            _repeat_axis(y, cell.y),
            _repeat_axis(z, cell.z),
        )


@shape
@dataclass(frozen=True)
class Twist:
    """Twist a shape around the Y axis

    Each horizontal slice is rotated by ``k * y`` radians.  The result is
    not a true distance field (its gradient exceeds 1 away from the axis),
    so renderers that assume a Lipschitz-1 field must step conservatively.
    """

    shape: object = doc_field("Shape to twist")
    k: float = doc_field("Twist factor (angle per unit height)")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        angle = y * self.k
        s = angle.sin()
        c = angle.cos()
        rx = x * c - z * s
        rz = x * s + z * c
        return as_tree(self.shape).remap_xyz(rx, y, rz)
