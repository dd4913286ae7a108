"""Parametric rocket assembly geometry.

Usage::

    from sdf3d.examples import RocketAssembly
    from sdf3d import sample_levelset_3d

    rocket = RocketAssembly(body_radius=0.15)
    phi = sample_levelset_3d(rocket, ((-1, 1), (-1, 1), (-1, 1)), (64, 64, 64))
"""

from __future__ import annotations

import numpy as np

from sdfexpr import Tree
from _sdf_common import Move, Scale, Union, Vec3
from sdf3d.shapes import Cuboid, Cylinder, Sphere


def _rotate_y(tree: Tree, angle: float) -> Tree:
    """Rotate *tree* about the Y axis by *angle* radians (world space)."""
    c = np.cos(angle)
    s = np.sin(angle)
    rot = np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    m = np.eye(4)
    m[:3, :3] = rot.T  # inverse rotation, applied to the query point
    return tree.remap_affine(m)


def RocketAssembly(
    body_radius: float = 0.15,
    body_length: float = 0.70,
    nose_len: float = 0.25,
    fin_span: float = 0.12,
    fin_height: float = 0.18,
    fin_thickness: float = 0.03,
    n_fins: int = 4,
) -> Tree:
    """Build a parametric rocket standing on the Y axis.

    The rocket consists of:

    * A cylindrical body centred at the origin.
    * A half-ellipsoid nose (a sphere stretched along Y) on top of the body.
    * *n_fins* rectangular fins arranged radially around the body base.

    Parameters
    ----------
    body_radius:
        Radius of the body cylinder (m).
    body_length:
        Length of the body cylinder (m).
    nose_len:
        Length of the nose above the body (m).
    fin_span:
        Radial span of each fin (m).
    fin_height:
        Axial height of each fin (m).
    fin_thickness:
        Thickness of each fin (m).
    n_fins:
        Number of fins (default 4).

    Returns
    -------
    Tree
        Signed distance tree of the rocket.  The nose is non-uniformly
        scaled, so distances there are only approximate.
    """
    R = body_radius
    half_len = body_length / 2.0

    body = Cylinder(center=Vec3(), radius=R, half_height=half_len).to_tree()

    # Unit-radius sphere stretched to (R, nose_len, R), then moved to the top cap.
    nose = Move(
        Scale(Sphere(center=Vec3(), radius=1.0), Vec3(R, nose_len, R)),
        Vec3(0.0, half_len, 0.0),
    ).to_tree()

    fin = Cuboid(
        center=Vec3(R + fin_span / 2.0, -half_len + fin_height / 2.0, 0.0),
        half_size=Vec3(fin_span / 2.0, fin_height / 2.0, fin_thickness / 2.0),
    ).to_tree()
    fins = [_rotate_y(fin, i * (2.0 * np.pi / n_fins)) for i in range(n_fins)]

    return Union([body, nose] + fins).to_tree()
