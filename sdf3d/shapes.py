"""3D primitive shapes.

Distances are exact for every primitive here.  Cylinder and Torus are
aligned with the Y axis.
"""

from __future__ import annotations

from dataclasses import dataclass

from sdfexpr import Tree

from _sdf_common import Vec3, box_distance, doc_field, shape, vec3


@shape
@dataclass(frozen=True)
class Sphere:
    """3D sphere"""

    center: Vec3 = doc_field("Center of the sphere (in XYZ)")
    radius: float = doc_field("Sphere radius")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        c = vec3(self.center)
        return (
            (x - c.x).square() + (y - c.y).square() + (z - c.z).square()
        ).sqrt() - self.radius


@shape
@dataclass(frozen=True)
class Cuboid:
    """Axis-aligned box"""

    center: Vec3 = doc_field("Center of the box (in XYZ)")
    half_size: Vec3 = doc_field("Half-size of the box on each axis")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        c = vec3(self.center)
        h = vec3(self.half_size)
        dx = (x - c.x).abs() - h.x
        dy = (y - c.y).abs() - h.y
        dz = (z - c.z).abs() - h.z
        return box_distance(dx, dy, dz)


@shape
@dataclass(frozen=True)
class Cylinder:
    """Finite cylinder aligned with the Y axis"""

    center: Vec3 = doc_field("Center of the cylinder (in XYZ)")
    radius: float = doc_field("Cylinder radius")
    half_height: float = doc_field("Half-height of the cylinder")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        c = vec3(self.center)
        # Radial distance plays the role of the box's first slab.
        dr = ((x - c.x).square() + (z - c.z).square()).sqrt() - self.radius
        dy = (y - c.y).abs() - self.half_height
        return box_distance(dr, dy)


@shape
@dataclass(frozen=True)
class Torus:
    """Torus aligned with the Y axis"""

    center: Vec3 = doc_field("Center of the torus (in XYZ)")
    major_radius: float = doc_field("Major radius of the torus")
    tube_radius: float = doc_field("Radius of the tube")

    def to_tree(self) -> Tree:
        x, y, z = Tree.axes()
        c = vec3(self.center)
        ring = ((x - c.x).square() + (z - c.z).square()).sqrt() - self.major_radius
        q = ring.square() + (y - c.y).square()
        return q.sqrt() - self.tube_radius
