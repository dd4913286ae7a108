"""Grid sampling utilities for 3D signed distance trees."""

from __future__ import annotations

import os
from typing import Tuple

import numpy as np
import numpy.typing as npt

from _sdf_common import as_tree

_Array = npt.NDArray[np.floating]
_Bounds3D = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
_Resolution3D = Tuple[int, int, int]


def _cell_centres(lo: float, hi: float, n: int) -> _Array:
    if int(n) != n or n <= 0:
        raise ValueError(f"resolution must be a positive integer, got {n!r}")
    n = int(n)
    return np.linspace(lo, hi, n, endpoint=False) + (hi - lo) / (2.0 * n)


def sample_levelset_3d(
    shape,
    bounds: _Bounds3D,
    resolution: _Resolution3D,
) -> _Array:
    """Sample *shape* on a uniform 3-D cell-centred grid.

    Parameters
    ----------
    shape:
        A :class:`~sdfexpr.Tree` or any shape record with ``to_tree()``.
    bounds:
        ``((x0, x1), (y0, y1), (z0, z1))`` physical extents of the domain.
    resolution:
        ``(nx, ny, nz)`` number of cells along each axis.

    Returns
    -------
    numpy.ndarray
        Shape ``(nz, ny, nx)`` array of signed distances, z-first indexing.
    """
    tree = as_tree(shape)
    (x0, x1), (y0, y1), (z0, z1) = bounds
    nx, ny, nz = resolution

    xs = _cell_centres(x0, x1, nx)
    ys = _cell_centres(y0, y1, ny)
    zs = _cell_centres(z0, z1, nz)

    Z, Y, X = np.meshgrid(zs, ys, xs, indexing="ij")
    return tree.eval(X, Y, Z)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
