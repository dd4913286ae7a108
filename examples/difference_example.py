"""Difference: sphere with a box-shaped notch.

Demonstrates: Difference, Sphere, Cuboid, sample_levelset_3d
Output:       examples/difference_example.png

Argument order reminder:
    Difference(shape, cutout) = max(shape, -cutout)

Mathematical identity verified:
    Difference(shape, cutout)(p) == max(shape(p), -cutout(p))
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from sdf3d import Cuboid, Difference, Sphere, Vec3, sample_levelset_3d

_BOUNDS = ((-1.0, 1.0), (-1.0, 1.0), (-1.0, 1.0))
_RES    = (64, 64, 64)
_OUT    = os.path.join(os.path.dirname(__file__), "difference_example.png")


def _render_png(phi, out_path, title=""):
    try:
        import matplotlib.pyplot as plt
        from mpl_toolkits.mplot3d.art3d import Poly3DCollection
        from skimage import measure
    except ImportError:
        print("  scikit-image / matplotlib not available — skipping PNG")
        return

    lo = _BOUNDS[0][0]
    spacing = (_BOUNDS[0][1] - lo) / phi.shape[0]
    if phi.min() >= 0 or phi.max() <= 0:
        print("  No zero crossing — cannot render isosurface.")
        return

    # phi is (z, y, x); marching_cubes returns vertices in that order
    verts, faces, _, _ = measure.marching_cubes(phi, level=0, spacing=(spacing,) * 3)
    verts = verts[:, ::-1] + lo

    tris  = verts[faces]
    norms = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
    nlen  = np.linalg.norm(norms, axis=1, keepdims=True)
    norms = norms / np.where(nlen > 0, nlen, 1.0)
    shade = 0.3 + 0.7 * np.clip(norms @ np.array([0.577, 0.577, 0.577]), 0, 1)
    fc    = np.column_stack([shade * 1.0, shade * 0.4, shade * 0.3, np.ones_like(shade)])

    fig = plt.figure(figsize=(5, 5), facecolor="#111")
    ax  = fig.add_subplot(111, projection="3d")
    ax.set_facecolor("#111"); ax.set_axis_off(); ax.set_box_aspect([1, 1, 1])
    ax.add_collection3d(Poly3DCollection(verts[faces], facecolors=fc, edgecolors="none"))
    hi = _BOUNDS[0][1]
    ax.set_xlim(lo, hi); ax.set_ylim(lo, hi); ax.set_zlim(lo, hi)
    ax.set_title(title, color="white", fontsize=10)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor="#111")
    plt.close()
    print(f"  Saved: {out_path}")


def main():
    print("=" * 60)
    print("DIFFERENCE: sphere with a box notch")
    print("  Shape:  centre (0,   0, 0)  radius 0.60")
    print("  Cutout: centre (0.5, 0.5, 0)  half-size 0.35")
    print("=" * 60)

    ball  = Sphere(center=Vec3(0.0, 0.0, 0.0), radius=0.60)
    notch = Cuboid(center=Vec3(0.5, 0.5, 0.0), half_size=Vec3(0.35, 0.35, 0.35))
    geom  = Difference(ball, notch).to_tree()

    phi       = sample_levelset_3d(geom,  _BOUNDS, _RES)
    phi_ball  = sample_levelset_3d(ball,  _BOUNDS, _RES)
    phi_notch = sample_levelset_3d(notch, _BOUNDS, _RES)

    # --- mathematical verification ---
    expected = np.maximum(phi_ball, -phi_notch)
    max_diff = np.abs(phi - expected).max()

    print(f"\nSDF range : [{phi.min():.4f}, {phi.max():.4f}]")
    print(f"Inside (phi<0): {(phi < 0).any()}   Outside (phi>0): {(phi > 0).any()}")
    print(f"max |Difference - max(shape, -cutout)| = {max_diff:.2e}  (should be ~0)")

    # --- spot checks ---
    # Inside the notch: removed from the ball, so outside the result
    v = float(geom.eval(0.35, 0.35, 0.0))
    print(f"\nAt (0.35, 0.35, 0): result={v:.4f}  (expected > 0)")

    # Opposite side of the ball: untouched
    v2 = float(geom.eval(-0.4, 0.0, 0.0))
    print(f"At (-0.4, 0, 0):    result={v2:.4f}  (expected -0.2)")

    ok = max_diff < 1e-5 and v > 0 and abs(v2 + 0.2) < 1e-9
    print("\n" + ("PASSED" if ok else "FAILED"))

    _render_png(phi, _OUT, "Difference: ball - notch")


if __name__ == "__main__":
    main()
