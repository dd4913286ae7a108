"""4x4 homogeneous matrices for :meth:`sdfexpr.Tree.remap_affine`."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

_Matrix = npt.NDArray[np.float64]


def translation(dx: float, dy: float, dz: float) -> _Matrix:
    """Matrix mapping ``(x, y, z)`` to ``(x + dx, y + dy, z + dz)``."""
    m = np.eye(4)
    m[:3, 3] = (dx, dy, dz)
    return m


def scaling(sx: float, sy: float, sz: float) -> _Matrix:
    """Diagonal matrix mapping ``(x, y, z)`` to ``(sx*x, sy*y, sz*z)``."""
    return np.diag([sx, sy, sz, 1.0]).astype(np.float64)
