"""Shared pieces used by both sdf2d and sdf3d.

This module provides:

* **Vector records**: :class:`Vec2`, :class:`Vec3`, :class:`Vec4`
* **Shape metadata**: the :func:`shape` decorator, :data:`SHAPES`,
  :func:`shape_info`
* **Tree helpers**: :func:`as_tree`, :func:`box_distance`,
  :func:`reduce_balanced`
* **Shared CSG / morphological / affine records** (dimension-agnostic):
  :class:`Union`, :class:`Intersection`, :class:`Inverse`,
  :class:`Difference`, :class:`Round`, :class:`Onion`, :class:`Move`,
  :class:`Scale`

Not meant to be imported directly by end users; import from
``sdf2d`` or ``sdf3d`` instead.

Every record is a frozen dataclass with a single operation,
``to_tree()``, which never raises for finite numeric fields.  Fields that
hold a shape accept either a :class:`~sdfexpr.Tree` or another record.

Note that ``min``/``max`` compositions are exact distance fields only
inside the result; outside they are conservative bounds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Callable, Dict, NamedTuple, Sequence, Tuple, Union as _U

from sdfexpr import Tree, scaling, translation

__all__ = [
    "Vec2", "Vec3", "Vec4",
    "vec2", "vec3",
    "SHAPES", "ShapeInfo", "FieldInfo", "shape", "shape_info", "doc_field",
    "as_tree", "box_distance", "reduce_balanced",
    "Union", "Intersection", "Inverse", "Difference",
    "Round", "Onion", "Move", "Scale",
]


# ===========================================================================
# Vector records
# ===========================================================================

@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z))


@dataclass(frozen=True)
class Vec4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))


def vec2(v) -> Vec2:
    """Coerce a ``Vec2`` or any 2-element iterable into a ``Vec2``."""
    return v if isinstance(v, Vec2) else Vec2(*v)


def vec3(v) -> Vec3:
    """Coerce a ``Vec3`` or any 3-element iterable into a ``Vec3``."""
    return v if isinstance(v, Vec3) else Vec3(*v)


# ===========================================================================
# Shape metadata
# ===========================================================================

SHAPES: Dict[str, type] = {}


class FieldInfo(NamedTuple):
    name: str
    type: str
    doc: str


class ShapeInfo(NamedTuple):
    name: str
    doc: str
    fields: Tuple[FieldInfo, ...]


def shape(cls: type) -> type:
    """Class decorator registering *cls* in :data:`SHAPES`."""
    SHAPES[cls.__name__] = cls
    return cls


def shape_info(cls_or_name: _U[type, str]) -> ShapeInfo:
    """Return the name, one-line description and field docs of a shape.

    Raises ``KeyError`` for a name that is not registered.
    """
    cls = SHAPES[cls_or_name] if isinstance(cls_or_name, str) else cls_or_name
    doc = (cls.__doc__ or "").strip().splitlines()
    return ShapeInfo(
        name=cls.__name__,
        doc=doc[0] if doc else "",
        fields=tuple(
            FieldInfo(f.name, str(f.type), f.metadata.get("doc", ""))
            for f in fields(cls)
        ),
    )


def doc_field(text: str):
    return field(metadata={"doc": text})


# ===========================================================================
# Tree helpers
# ===========================================================================

def as_tree(value) -> Tree:
    """Return *value* as a tree, converting shape records on the way."""
    if isinstance(value, Tree):
        return value
    to_tree = getattr(value, "to_tree", None)
    if to_tree is None:
        raise TypeError(f"expected a Tree or a shape record, got {type(value).__name__}")
    return to_tree()


def box_distance(*d: Tree) -> Tree:
    """Combine per-axis slab distances *d* into a box SDF.

    Exact Euclidean distance outside (length of the positive parts) plus
    the largest slab distance inside, clamped to ``<= 0``.
    """
    outside = d[0].max(0.0).square()
    for di in d[1:]:
        outside = outside + di.max(0.0).square()
    inside = d[-1]
    for di in reversed(d[:-1]):
        inside = di.max(inside)
    return outside.sqrt() + inside.min(0.0)


def reduce_balanced(items: Sequence[Tree], combine: Callable[[Tree, Tree], Tree]) -> Tree:
    """Fold a non-empty sequence into a balanced binary tree.

    The sequence is split at ``n // 2`` and each half reduced recursively,
    giving ``ceil(log2(n))`` levels of *combine* instead of ``n - 1``.
    """
    n = len(items)
    if n == 1:
        return items[0]
    mid = n // 2
    return combine(reduce_balanced(items[:mid], combine),
                   reduce_balanced(items[mid:], combine))


# ===========================================================================
# CSG combinators
# ===========================================================================

@shape
@dataclass(frozen=True)
class Union:
    """Take the union of a set of shapes

    If the input is empty, returns a constant empty tree (at +inf).
    """

    input: Sequence = doc_field("List of shapes to merge")

    def __post_init__(self):
        # Stored as a tuple so the record stays hashable.
        object.__setattr__(self, "input", tuple(self.input))

    def to_tree(self) -> Tree:
        shapes = [as_tree(s) for s in self.input]
        if not shapes:
            # +inf is the identity of min
            return Tree.constant(math.inf)
        return reduce_balanced(shapes, Tree.min)


@shape
@dataclass(frozen=True)
class Intersection:
    """Take the intersection of a set of shapes

    If the input is empty, returns a constant full tree (at -inf).
    """

    input: Sequence = doc_field("List of shapes to intersect")

    def __post_init__(self):
        # Stored as a tuple so the record stays hashable.
        object.__setattr__(self, "input", tuple(self.input))

    def to_tree(self) -> Tree:
        shapes = [as_tree(s) for s in self.input]
        if not shapes:
            return Tree.constant(-math.inf)
        return reduce_balanced(shapes, Tree.max)


@shape
@dataclass(frozen=True)
class Inverse:
    """Computes the inverse of a shape"""

    shape: object = doc_field("Shape to invert")

    def to_tree(self) -> Tree:
        return -as_tree(self.shape)


@shape
@dataclass(frozen=True)
class Difference:
    """Take the difference of two shapes"""

    shape: object = doc_field("Original shape")
    cutout: object = doc_field("Shape to be subtracted from the original")

    def to_tree(self) -> Tree:
        return as_tree(self.shape).max(-as_tree(self.cutout))


# ===========================================================================
# Morphological operators
# ===========================================================================

@shape
@dataclass(frozen=True)
class Round:
    """Uniformly round (or offset) a shape

    Positive *radius* grows the zero-set outward; negative shrinks it.
    """

    shape: object = doc_field("Shape to round")
    radius: float = doc_field("Amount to round the surface")

    def to_tree(self) -> Tree:
        return as_tree(self.shape) - self.radius


@shape
@dataclass(frozen=True)
class Onion:
    """Form a shell of constant thickness around a shape"""

    shape: object = doc_field("Base shape to offset")
    thickness: float = doc_field("Thickness of the shell")

    def to_tree(self) -> Tree:
        return as_tree(self.shape).abs() - self.thickness


# ===========================================================================
# Affine transforms
#
# An SDF is defined in object space, so to see the shape transformed by T
# in world space each query point is mapped back through T^-1 before the
# shape is evaluated.  Both records therefore remap with the inverse.
# ===========================================================================

@shape
@dataclass(frozen=True)
class Move:
    """Move a shape"""

    shape: object = doc_field("Shape to move")
    offset: Vec3 = doc_field("Position offset")

    def to_tree(self) -> Tree:
        o = vec3(self.offset)
        return as_tree(self.shape).remap_affine(translation(-o.x, -o.y, -o.z))


@shape
@dataclass(frozen=True)
class Scale:
    """Non-uniform scaling

    Only uniform scaling preserves distances; otherwise the zero-set is
    correct but magnitudes are stretched.  A zero component yields an
    infinite coefficient on that axis, and negative components mirror.
    """

    shape: object = doc_field("Shape to scale")
    scale: Vec3 = doc_field("Scale to apply on each axis")

    def to_tree(self) -> Tree:
        s = vec3(self.scale)
        inv = [math.inf if c == 0 else 1.0 / c for c in s]
        return as_tree(self.shape).remap_affine(scaling(*inv))
