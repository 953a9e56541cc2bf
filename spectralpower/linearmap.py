# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence
import opt_einsum as oe

from .backend import ArrayLike, ArrayNamespace, Device, DType, namespace_of_arrays, shape, device
from .errors import DimensionMismatch
from .utils import check_pos, check_vector

class LinearMap[T: ArrayLike]:
    """
    Operator defined by an einsum expression. Exactly one operand is given as an integer,
    which marks the position of the vector and its dimension, e.g. 
    ``LinearMap("ij,j->i", mat, n)`` or ``LinearMap("ij,jk,k->i", a, b, n)``.
    The contraction path is optimized once by opt_einsum and reused for every product.
    """

    _ops: Sequence[T]
    _dim: int
    _expr: Any

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return namespace_of_arrays(*self._ops)

    @property
    def dtype(self) -> DType:
        return self.namespace.result_type(*self._ops)

    @property
    def device(self) -> Device:
        return device(self._ops[0])

    def __init__(self, eq: str, *ops: int | T, optimize: str = "auto") -> None:
        idx = self._ref_idx(*ops)
        self._dim = ops[idx] # type: ignore
        check_pos("dimension", self._dim)
        self._ops = [op for i, op in enumerate(ops) if i != idx] # type: ignore
        shapes = self._check_equation(eq, idx, *ops)

        constants = [i for i in range(len(ops)) if i != idx]
        self._expr = oe.contract_expression(
                eq, *shapes, constants=constants, optimize=optimize)

    def dimension(self) -> int:
        return self._dim

    def apply(self, vec: T, /) -> T:
        check_vector("Operand", vec, self._dim)
        return self._expr(vec)

    def _ref_idx(self, *ops: int | T) -> int:
        idx = -1
        for i, op in enumerate(ops):
            if isinstance(op, int):
                idx = i
                break
        if idx == -1 or sum(isinstance(op, int) for op in ops) != 1:
            raise ValueError("Exactly one of the operands must be the integer dimension of the vector.")
        if len(ops) == 1:
            raise ValueError("At least one array operand is required.")
        return idx

    def _check_equation(self, eq: str, idx: int, *ops: int | T) -> list[Any]:
        if "->" not in eq:
            raise ValueError(f"Equation {eq} must have an explicit output.")
        tmp = eq.replace(" ", "").split("->")
        op_strs = tmp[0].split(",")
        out_str = tmp[1]
        if len(op_strs) != len(ops):
            raise ValueError(f"Equation {eq} requires {len(op_strs)} operands, got {len(ops)}.")
        if len(op_strs[idx]) != 1:
            raise ValueError("The vector operand must have exactly one index.")

        sizes: dict[str, int] = {}
        shapes: list[Any] = []
        for i, (op_str, op) in enumerate(zip(op_strs, ops)):
            op_shape = (self._dim,) if i == idx else shape(op) # type: ignore
            if len(op_str) != len(op_shape):
                raise ValueError(f"Operand {i} has {len(op_shape)} dimensions, but the equation specifies {len(op_str)}.")
            for char, s in zip(op_str, op_shape):
                if sizes.setdefault(char, s) != s:
                    raise DimensionMismatch(f"Index {char} has inconsistent sizes {sizes[char]} and {s}.")
            shapes.append(op_shape if i == idx else op)

        if len(out_str) != 1 or sizes.get(out_str) != self._dim:
            raise DimensionMismatch(f"Equation {eq} does not define a square map of dimension {self._dim}.")
        return shapes
