"""Immutable expression trees over the free variables X, Y and Z.

Every operation returns a new :class:`Tree`; nodes are never mutated, so a
sub-tree may be shared between any number of parents without copying.

Node kinds
----------
- leaves:   ``var`` (X, Y or Z) and ``const``
- unary:    ``neg``, ``abs``, ``square``, ``sqrt``, ``sin``, ``cos``
- binary:   ``add``, ``sub``, ``mul``, ``div``, ``min``, ``max``, ``mod``
- remaps:   ``remap`` (substitute three trees for X, Y, Z) and
  ``affine`` (substitute ``M @ (X, Y, Z, 1)`` for a 4x4 matrix ``M``)

Evaluation follows NumPy semantics: ``min``/``max`` map to
``np.minimum``/``np.maximum`` and ``mod`` to ``np.mod`` (floored, so the
result lies in ``[0, p)`` for a positive period ``p``).  Degenerate inputs
yield ``inf``/``nan`` instead of raising.
"""

from __future__ import annotations

import numbers
from typing import Callable, Dict, Tuple, Union

import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]
_Operand = Union["Tree", float]

_UNARY: Dict[str, Callable[[_Array], _Array]] = {
    "neg": np.negative,
    "abs": np.abs,
    "square": np.square,
    "sqrt": np.sqrt,
    "sin": np.sin,
    "cos": np.cos,
}

_BINARY: Dict[str, Callable[[_Array, _Array], _Array]] = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "div": np.divide,
    "min": np.minimum,
    "max": np.maximum,
    "mod": np.mod,
}

_AXIS_NAMES = ("x", "y", "z")


class Tree:
    """A node in a symbolic expression over ``X``, ``Y`` and ``Z``.

    Build trees from :meth:`axes` and :meth:`constant`, then combine them
    with the arithmetic operators and the methods below.  Scalars may be
    mixed in on either side of an operator.
    """

    __slots__ = ("_op", "_args", "_value")

    # Let NumPy scalars defer to Tree's reflected operators.
    __array_ufunc__ = None

    def __init__(self, op: str, args: Tuple["Tree", ...] = (), value=None) -> None:
        self._op = op
        self._args = args
        self._value = value

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    @staticmethod
    def axes() -> Tuple["Tree", "Tree", "Tree"]:
        """Return the free variables ``(X, Y, Z)``."""
        return _X, _Y, _Z

    @staticmethod
    def x() -> "Tree":
        return _X

    @staticmethod
    def y() -> "Tree":
        return _Y

    @staticmethod
    def z() -> "Tree":
        return _Z

    @staticmethod
    def constant(c: float) -> "Tree":
        """Lift the scalar *c* into a constant tree."""
        return Tree("const", value=float(c))

    @property
    def op(self) -> str:
        """Name of the operation at this node."""
        return self._op

    @property
    def args(self) -> Tuple["Tree", ...]:
        """Child nodes, in operand order."""
        return self._args

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _binary(self, op: str, other: _Operand, reflected: bool = False):
        rhs = _lift(other)
        if rhs is None:
            return NotImplemented
        if reflected:
            return Tree(op, (rhs, self))
        return Tree(op, (self, rhs))

    def __add__(self, other: _Operand) -> "Tree":
        return self._binary("add", other)

    def __radd__(self, other: _Operand) -> "Tree":
        return self._binary("add", other, reflected=True)

    def __sub__(self, other: _Operand) -> "Tree":
        return self._binary("sub", other)

    def __rsub__(self, other: _Operand) -> "Tree":
        return self._binary("sub", other, reflected=True)

    def __mul__(self, other: _Operand) -> "Tree":
        return self._binary("mul", other)

    def __rmul__(self, other: _Operand) -> "Tree":
        return self._binary("mul", other, reflected=True)

    def __truediv__(self, other: _Operand) -> "Tree":
        return self._binary("div", other)

    def __rtruediv__(self, other: _Operand) -> "Tree":
        return self._binary("div", other, reflected=True)

    def __neg__(self) -> "Tree":
        if self._op == "neg":
            return self._args[0]
        return Tree("neg", (self,))

    def __abs__(self) -> "Tree":
        return self.abs()

    # ------------------------------------------------------------------
    # Unary math
    # ------------------------------------------------------------------

    def abs(self) -> "Tree":
        return Tree("abs", (self,))

    def square(self) -> "Tree":
        return Tree("square", (self,))

    def sqrt(self) -> "Tree":
        return Tree("sqrt", (self,))

    def sin(self) -> "Tree":
        return Tree("sin", (self,))

    def cos(self) -> "Tree":
        return Tree("cos", (self,))

    def modulo(self, period: _Operand) -> "Tree":
        """Floored modulo: in ``[0, period)`` for a positive *period*."""
        return Tree("mod", (self, _require(period)))

    # ------------------------------------------------------------------
    # Lattice
    # ------------------------------------------------------------------

    def min(self, other: _Operand) -> "Tree":
        return Tree("min", (self, _require(other)))

    def max(self, other: _Operand) -> "Tree":
        return Tree("max", (self, _require(other)))

    # ------------------------------------------------------------------
    # Coordinate remaps
    # ------------------------------------------------------------------

    def remap_xyz(self, tx: _Operand, ty: _Operand, tz: _Operand) -> "Tree":
        """Substitute *tx*, *ty*, *tz* for ``X``, ``Y``, ``Z`` in this tree."""
        return Tree("remap", (self, _require(tx), _require(ty), _require(tz)))

    def remap_affine(self, m) -> "Tree":
        """Substitute ``m @ (X, Y, Z, 1)`` for ``(X, Y, Z)``.

        *m* is a 4x4 homogeneous transform; only its top three rows are
        used.  Remapping a tree that is already an affine remap folds both
        matrices into a single node, unless either holds a non-finite
        coefficient: the product would then mix ``0 * inf`` into every row,
        so the remaps are nested instead.
        """
        mat = np.array(m, dtype=np.float64)
        if mat.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
        if (self._op == "affine"
                and np.isfinite(self._value).all() and np.isfinite(mat).all()):
            # self(p) = child(A p), so self(M p) = child(A M p)
            mat = self._value @ mat
            child = self._args[0]
        else:
            child = self
        mat.setflags(write=False)
        return Tree("affine", (child,), value=mat)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval(self, x, y, z, dtype=np.float64) -> _Array:
        """Evaluate the tree at ``(x, y, z)``.

        Inputs may be scalars or arrays; they are broadcast against each
        other and the result has the broadcast shape.
        """
        xyz = np.broadcast_arrays(
            np.asarray(x, dtype=dtype),
            np.asarray(y, dtype=dtype),
            np.asarray(z, dtype=dtype),
        )
        with np.errstate(all="ignore"):
            out = _evaluate(self, tuple(xyz), np.dtype(dtype))
        return np.array(np.broadcast_to(out, xyz[0].shape), dtype=dtype)

    def eval_points(self, p, dtype=np.float64) -> _Array:
        """Evaluate at a ``(..., 3)`` array of points."""
        p = np.asarray(p, dtype=dtype)
        return self.eval(p[..., 0], p[..., 1], p[..., 2], dtype=dtype)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def depth(self) -> int:
        """Number of nodes on the longest path from this node to a leaf."""
        memo: Dict[int, int] = {}
        stack = [(self, False)]
        while stack:
            node, done = stack.pop()
            key = id(node)
            if done:
                memo[key] = 1 + max((memo[id(a)] for a in node._args), default=0)
            elif key not in memo:
                stack.append((node, True))
                stack.extend((a, False) for a in node._args)
        return memo[id(self)]

    def size(self) -> int:
        """Number of distinct nodes reachable from this node."""
        seen = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            stack.extend(node._args)
        return len(seen)

    def __repr__(self) -> str:
        if self._op == "var":
            return _AXIS_NAMES[self._value]
        if self._op == "const":
            return repr(self._value)
        parts = [self._op] + [repr(a) for a in self._args]
        if self._op == "affine":
            parts.append(repr(self._value[:3].tolist()))
        return "(" + " ".join(parts) + ")"


def _lift(value) -> Union[Tree, None]:
    if isinstance(value, Tree):
        return value
    if isinstance(value, numbers.Real):
        return Tree.constant(value)
    return None


def _require(value) -> Tree:
    tree = _lift(value)
    if tree is None:
        raise TypeError(f"expected a Tree or a real number, got {type(value).__name__}")
    return tree


# Visit states for the explicit evaluation stack.
_ENTER, _COORDS, _EXIT = 0, 1, 2


def _evaluate(root: Tree, xyz: Tuple[_Array, _Array, _Array], dtype) -> _Array:
    """Evaluate *root* in the coordinate frame *xyz*.

    Results are cached by node identity, one cache per coordinate frame;
    remap nodes evaluate their child in a fresh frame with its own cache.
    Walks an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    top: Dict[int, _Array] = {}
    stack = [(root, xyz, top, _ENTER, None)]
    while stack:
        node, frame, cache, state, sub = stack.pop()
        key = id(node)
        if state == _ENTER and key in cache:
            continue

        op = node._op
        args = node._args
        if op == "var":
            cache[key] = frame[node._value]
        elif op == "const":
            cache[key] = np.asarray(node._value, dtype=dtype)
        elif op in _UNARY or op in _BINARY:
            if state == _ENTER:
                stack.append((node, frame, cache, _EXIT, None))
                stack.extend((a, frame, cache, _ENTER, None) for a in args)
            else:
                fn = _UNARY[op] if op in _UNARY else _BINARY[op]
                cache[key] = fn(*(cache[id(a)] for a in args))
        elif op == "remap":
            if state == _ENTER:
                # Substituted coordinates live in the current frame.
                stack.append((node, frame, cache, _COORDS, None))
                stack.extend((a, frame, cache, _ENTER, None) for a in args[1:])
            elif state == _COORDS:
                inner = tuple(cache[id(a)] for a in args[1:])
                sub = {}
                stack.append((node, frame, cache, _EXIT, sub))
                stack.append((args[0], inner, sub, _ENTER, None))
            else:
                cache[key] = sub[id(args[0])]
        elif op == "affine":
            if state == _ENTER:
                inner = tuple(_affine_row(node._value[i], frame, dtype) for i in range(3))
                sub = {}
                stack.append((node, frame, cache, _EXIT, sub))
                stack.append((args[0], inner, sub, _ENTER, None))
            else:
                cache[key] = sub[id(args[0])]
        else:
            raise ValueError(f"unknown tree operation {op!r}")

    return top[id(root)]


def _affine_row(row, xyz, dtype) -> _Array:
    # Zero coefficients are skipped so that 0 * inf never turns into nan.
    out = np.asarray(row[3], dtype=dtype)
    for coef, coord in zip(row[:3], xyz):
        if coef != 0.0:
            out = out + dtype.type(coef) * coord
    return out


_X = Tree("var", value=0)
_Y = Tree("var", value=1)
_Z = Tree("var", value=2)
