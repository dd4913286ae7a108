"""
sdfexpr — symbolic expression trees over X, Y, Z
================================================

The algebra that the shape catalog in :mod:`sdf2d` and :mod:`sdf3d` builds
on.  A :class:`Tree` is an immutable expression over the three free
variables; arithmetic on trees builds bigger trees, and
:meth:`Tree.eval` evaluates them with NumPy broadcasting.

Quick start
-----------

::

    from sdfexpr import Tree

    x, y, z = Tree.axes()
    sphere = (x.square() + y.square() + z.square()).sqrt() - 1.0
    sphere.eval(2.0, 0.0, 0.0)      # -> array(1.)
"""

from .tree import Tree
from .affine import translation, scaling

__version__ = "0.1.0"

__all__ = [
    "Tree",
    "translation",
    "scaling",
]
