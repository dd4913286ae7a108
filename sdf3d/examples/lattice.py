"""Periodic ring lattice clipped to a box."""

from __future__ import annotations

from sdfexpr import Tree
from _sdf_common import Intersection, Vec3
from sdf3d.ops import Repeat
from sdf3d.shapes import Cuboid, Torus


def TorusLattice(
    cell: float = 0.5,
    major_radius: float = 0.15,
    tube_radius: float = 0.04,
    extent: float = 0.9,
) -> Tree:
    """Tile a Y-aligned torus every *cell* units and clip to a cube.

    Parameters
    ----------
    cell:
        Lattice period on every axis.
    major_radius, tube_radius:
        Ring dimensions; keep ``major_radius + tube_radius < cell / 2`` so
        neighbouring rings do not touch.
    extent:
        Half-size of the clipping cube centred at the origin.
    """
    ring = Torus(center=Vec3(), major_radius=major_radius, tube_radius=tube_radius)
    rings = Repeat(ring, Vec3(cell, cell, cell))
    bounds = Cuboid(center=Vec3(), half_size=Vec3(extent, extent, extent))
    return Intersection([rings, bounds]).to_tree()
