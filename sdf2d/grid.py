"""Grid sampling utilities for 2D signed distance trees."""

from __future__ import annotations

import os
from typing import Tuple

import numpy as np
import numpy.typing as npt

from _sdf_common import as_tree

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]
_Resolution2D = Tuple[int, int]


def _cell_centres(lo: float, hi: float, n: int) -> _Array:
    if int(n) != n or n <= 0:
        raise ValueError(f"resolution must be a positive integer, got {n!r}")
    n = int(n)
    return np.linspace(lo, hi, n, endpoint=False) + (hi - lo) / (2.0 * n)


def sample_levelset_2d(
    shape,
    bounds: _Bounds2D,
    resolution: _Resolution2D,
    z: float = 0.0,
) -> _Array:
    """Sample *shape* on a uniform 2-D cell-centred grid.

    Parameters
    ----------
    shape:
        A :class:`~sdfexpr.Tree` or any shape record with ``to_tree()``.
    bounds:
        ``((x0, x1), (y0, y1))`` physical extents of the domain.
    resolution:
        ``(nx, ny)`` number of cells along each axis.
    z:
        Height of the sampled slice.

    Returns
    -------
    numpy.ndarray
        Shape ``(ny, nx)`` array of signed distances.
    """
    tree = as_tree(shape)
    (x0, x1), (y0, y1) = bounds
    nx, ny = resolution

    xs = _cell_centres(x0, x1, nx)
    ys = _cell_centres(y0, y1, ny)

    Y, X = np.meshgrid(ys, xs, indexing="ij")
    return tree.eval(X, Y, z)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
