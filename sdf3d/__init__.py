"""
sdf3d — 3D signed distance shapes as expression trees
=====================================================

A catalog of shape records that convert into :class:`sdfexpr.Tree`
expressions via ``to_tree()``.  Primitives are exact signed distance
fields; CSG combinators use ``min``/``max`` and are exact only inside.

Implemented features
--------------------
- Primitive shapes: Sphere, Cuboid, Cylinder, Torus
- Boolean operations: Union, Intersection, Inverse, Difference
- Modifiers: Round, Onion, Repeat, Twist
- Transforms: Move, Scale
- Grid sampling: :func:`sample_levelset_3d`
- Example assemblies: :func:`~sdf3d.examples.RocketAssembly`,
  :func:`~sdf3d.examples.TorusLattice`

Quick start
-----------

::

    from sdf3d import Sphere, Cuboid, Difference, Vec3, sample_levelset_3d

    ball  = Sphere(center=Vec3(), radius=0.4)
    notch = Cuboid(center=Vec3(0.4, 0.0, 0.0), half_size=Vec3(0.2, 0.2, 0.2))
    shape = Difference(ball, notch).to_tree()

    bounds     = ((-1.0, 1.0), (-1.0, 1.0), (-1.0, 1.0))
    resolution = (64, 64, 64)
    phi = sample_levelset_3d(shape, bounds, resolution)
"""

from _sdf_common import (
    Vec2, Vec3, Vec4,
    SHAPES, shape_info,
    Union, Intersection, Inverse, Difference,
    Round, Onion, Move, Scale,
)
from .shapes import Sphere, Cuboid, Cylinder, Torus
from .ops import Repeat, Twist
from .grid import sample_levelset_3d, save_npy
from .examples import RocketAssembly, TorusLattice

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "Vec2", "Vec3", "Vec4",

    # Metadata
    "SHAPES", "shape_info",

    # Primitives
    "Sphere",
    "Cuboid",
    "Cylinder",
    "Torus",

    # Boolean operations
    "Union",
    "Intersection",
    "Inverse",
    "Difference",

    # Modifiers
    "Round",
    "Onion",
    "Repeat",
    "Twist",

    # Transforms
    "Move",
    "Scale",

    # Grid utilities
    "sample_levelset_3d",
    "save_npy",

    # Complex assemblies
    "RocketAssembly",
    "TorusLattice",
]
