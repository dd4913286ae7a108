"""
sdf2d — 2D signed distance shapes as expression trees
=====================================================

2D primitives plus the dimension-agnostic CSG, morphological and affine
records, each converting into a :class:`sdfexpr.Tree` via ``to_tree()``.
2D shapes ignore Z.

Implemented features
--------------------
- Primitive shapes: Circle, Rect
- Boolean operations: Union, Intersection, Inverse, Difference
- Modifiers: Round, Onion
- Transforms: Move, Scale (Z components are irrelevant for 2D shapes)
- Grid sampling: :func:`sample_levelset_2d`

Quick start
-----------

::

    from sdf2d import Circle, Rect, Union, Move, Vec2, Vec3, sample_levelset_2d

    circle = Circle(center=Vec2(0.0, 0.0), radius=0.3)
    box    = Move(Rect(Vec2(), Vec2(0.2, 0.2)), Vec3(0.4, 0.0, 0.0))
    shape  = Union([circle, box]).to_tree()

    bounds     = ((-1.0, 1.0), (-1.0, 1.0))
    resolution = (512, 512)
    phi = sample_levelset_2d(shape, bounds, resolution)
"""

from _sdf_common import (
    Vec2, Vec3, Vec4,
    SHAPES, shape_info,
    Union, Intersection, Inverse, Difference,
    Round, Onion, Move, Scale,
)
from .shapes import Circle, Rect
from .grid import sample_levelset_2d, save_npy

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "Vec2", "Vec3", "Vec4",

    # Metadata
    "SHAPES", "shape_info",

    # Primitives
    "Circle",
    "Rect",

    # Boolean operations
    "Union",
    "Intersection",
    "Inverse",
    "Difference",

    # Modifiers and transforms
    "Round",
    "Onion",
    "Move",
    "Scale",

    # Grid utilities
    "sample_levelset_2d",
    "save_npy",
]
