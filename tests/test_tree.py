"""Tests for sdfexpr.tree: the expression algebra the shape catalog builds on."""

import warnings

import numpy as np
import numpy.testing as npt
import pytest

from sdfexpr import Tree, scaling, translation


def _ev(tree: Tree, x=0.0, y=0.0, z=0.0) -> float:
    return float(tree.eval(x, y, z))


# ===========================================================================
# Leaves
# ===========================================================================

class TestLeaves:
    def test_axes_are_stable(self):
        assert Tree.axes() == Tree.axes()
        x, y, z = Tree.axes()
        assert Tree.x() is x and Tree.y() is y and Tree.z() is z

    def test_axes_evaluate_to_coordinates(self):
        x, y, z = Tree.axes()
        assert _ev(x, 1, 2, 3) == 1.0
        assert _ev(y, 1, 2, 3) == 2.0
        assert _ev(z, 1, 2, 3) == 3.0

    def test_constant(self):
        assert _ev(Tree.constant(2.5)) == 2.5
        assert _ev(Tree.constant(np.inf)) == np.inf

    def test_constant_broadcasts_to_input_shape(self):
        out = Tree.constant(1.0).eval(np.zeros(5), 0.0, 0.0)
        assert out.shape == (5,)
        npt.assert_array_equal(out, np.ones(5))


# ===========================================================================
# Arithmetic
# ===========================================================================

class TestArithmetic:
    def test_scalar_on_either_side(self):
        x = Tree.x()
        assert _ev(x + 1, 2) == 3.0
        assert _ev(1 + x, 2) == 3.0
        assert _ev(x - 1, 2) == 1.0
        assert _ev(1 - x, 2) == -1.0
        assert _ev(x * 3, 2) == 6.0
        assert _ev(3 * x, 2) == 6.0
        assert _ev(x / 4, 2) == 0.5
        assert _ev(4 / x, 2) == 2.0

    def test_numpy_scalar_on_left_builds_tree(self):
        t = np.float64(2.0) + Tree.x()
        assert isinstance(t, Tree)
        assert _ev(t, 1) == 3.0

    def test_tree_with_tree(self):
        x, y, _ = Tree.axes()
        assert _ev(x * y - x / y, 4, 2) == 6.0

    def test_negate(self):
        assert _ev(-Tree.x(), 3) == -3.0

    def test_double_negation_is_identity(self):
        t = Tree.x() + 1
        assert -(-t) is t

    def test_rejects_non_numeric_operand(self):
        with pytest.raises(TypeError):
            Tree.x() + "1"
        with pytest.raises(TypeError):
            Tree.x().min(None)

    def test_division_by_zero_is_infinite_without_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert _ev(1 / Tree.x(), 0.0) == np.inf


# ===========================================================================
# Unary math and lattice
# ===========================================================================

class TestMath:
    def test_abs(self):
        x = Tree.x()
        assert _ev(x.abs(), -2) == 2.0
        assert _ev(abs(x), -2) == 2.0

    def test_square_sqrt(self):
        x = Tree.x()
        assert _ev(x.square(), -3) == 9.0
        assert _ev(x.sqrt(), 16) == 4.0

    def test_sin_cos(self):
        x = Tree.x()
        npt.assert_allclose(_ev(x.sin(), np.pi / 2), 1.0, atol=1e-12)
        npt.assert_allclose(_ev(x.cos(), np.pi), -1.0, atol=1e-12)

    def test_modulo_is_floored(self):
        x = Tree.x()
        assert _ev(x.modulo(4), 5) == 1.0
        assert _ev(x.modulo(4), -1) == 3.0

    def test_min_max(self):
        x, y, _ = Tree.axes()
        assert _ev(x.min(y), 1, 2) == 1.0
        assert _ev(x.max(y), 1, 2) == 2.0
        assert _ev(x.max(0.0), -5) == 0.0


# ===========================================================================
# Remaps
# ===========================================================================

class TestRemap:
    def test_remap_xyz_substitutes(self):
        x, y, z = Tree.axes()
        t = (x + 10 * y).remap_xyz(y, z, x)
        assert _ev(t, 1, 2, 3) == 32.0

    def test_remap_xyz_accepts_scalars(self):
        x, y, z = Tree.axes()
        t = (x + y + z).remap_xyz(1.0, y, 0.0)
        assert _ev(t, 5, 2, 5) == 3.0

    def test_nested_remap_uses_outer_frame(self):
        x, y, z = Tree.axes()
        shifted = x.remap_xyz(x + 1, y, z)
        t = shifted.remap_xyz(x * 2, y, z)
        assert _ev(t, 3) == 7.0

    def test_shared_subtree_across_frames(self):
        x, y, z = Tree.axes()
        inner = x * 1.0
        t = inner + inner.remap_xyz(x + 1, y, z)
        assert _ev(t, 2) == 5.0

    def test_remap_affine_translation(self):
        t = Tree.x().remap_affine(translation(1.0, 0.0, 0.0))
        assert _ev(t, 2) == 3.0

    def test_remap_affine_composes_into_one_node(self):
        x = Tree.x()
        t = x.remap_affine(translation(1.0, 0.0, 0.0)).remap_affine(scaling(2.0, 1.0, 1.0))
        assert t.op == "affine"
        assert t.args[0] is x
        assert t.depth() == 2
        assert _ev(t, 3) == 7.0

    def test_remap_affine_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Tree.x().remap_affine(np.eye(3))

    def test_infinite_coefficient_skips_zero_entries(self):
        t = Tree.y().remap_affine(scaling(np.inf, 1.0, 1.0))
        assert _ev(t, 0.0, 2.0, 0.0) == 2.0

    def test_non_finite_matrices_are_nested_not_folded(self):
        inner = Tree.x().remap_affine(scaling(np.inf, 1.0, 1.0))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            t = inner.remap_affine(translation(1.0, 0.0, 0.0))
        assert t.op == "affine"
        assert t.args[0] is inner
        assert _ev(t, 1.0) == np.inf
        # inf * 0 on the collapsed axis
        assert np.isnan(_ev(t, -1.0))


# ===========================================================================
# Evaluation and introspection
# ===========================================================================

class TestEval:
    def test_broadcasting(self):
        x, y, _ = Tree.axes()
        out = (x + y).eval(np.arange(3)[:, None], np.arange(4)[None, :], 0.0)
        assert out.shape == (3, 4)
        assert out[2, 3] == 5.0

    def test_dtype(self):
        out = (Tree.x() * 0.5).eval(np.ones(4), 0.0, 0.0, dtype=np.float32)
        assert out.dtype == np.float32

    def test_eval_points(self):
        x, y, z = Tree.axes()
        p = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        npt.assert_array_equal((x + y + z).eval_points(p), [6.0, 15.0])

    def test_depth_and_size(self):
        x = Tree.x()
        t = x + x
        assert t.depth() == 2
        assert t.size() == 2
        assert (t.sqrt() - 1.0).depth() == 4

    def test_repr(self):
        assert repr(Tree.x() - 1.0) == "(sub x 1.0)"
        assert repr(Tree.z().abs()) == "(abs z)"


class TestDeepTrees:
    N = 5000

    def test_long_left_fold(self):
        t = Tree.x()
        for _ in range(self.N):
            t = t + 1.0
        assert _ev(t, 2.0) == 2.0 + self.N
        assert t.depth() == self.N + 1
        assert t.size() == 2 * self.N + 1

    def test_long_remap_chain(self):
        x, y, z = Tree.axes()
        t = x
        for _ in range(self.N):
            t = t.remap_xyz(x + 1.0, y, z)
        assert _ev(t) == float(self.N)
