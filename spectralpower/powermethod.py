# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional
from copy import deepcopy
from math import isfinite
import numpy as np

from .backend import ArrayLike, ArrayNamespace, get_namespace, namespace_of_arrays, is_array, inner, norm, smallest_normal
from .linearoperator import Operator, ArrayOperator
from .randomvector import random_vector
from .options import OptionType, get_options
from .errors import DegenerateVector
from .utils import check_non_neg, check_vector

class PowerMethod[T: ArrayLike]:
    """
    Power method for the dominant eigenvalue and eigenvector of a linear operator. Only the
    action of the operator on a vector is used, so the operator can be dense, sparse or
    matrix free. The operator is referenced, not copied, and has to stay unchanged while the
    solver is in use.

    The initial vector is normalized and one power iteration is applied on construction.
    This first iteration is not counted by iterations_performed(). The Ritz value always is
    the Rayleigh quotient of the current Ritz vector.
    """

    operator: Operator[T]
    dim: int
    _nr_iterations: int
    _ritz_value: float
    _ritz_vector: T
    _image: T

    def __init__(
            self,
            operator: Operator[T],
            initial: Optional[T] = None, /, *,
            seed: Optional[int] = None,
            namespace: Optional[Any] = None) -> None:
        self.operator = operator
        self.dim = operator.dimension()
        self._nr_iterations = 0

        if initial is None:
            x0 = self._random_vector(seed, namespace)
        else:
            x0 = self._as_vector(initial, namespace)
        x0 = self._normalize(x0)

        self._update(self.power_iteration(x0))

    @classmethod
    def restore(cls, operator: Operator[T], vector: T, iterations: int = 0) -> "PowerMethod[T]":
        """
        Rebuild a solver from a previously computed Ritz vector, without applying an
        additional power iteration.
        """
        check_non_neg("iterations", iterations)
        obj = cls.__new__(cls)
        obj.operator = operator
        obj.dim = operator.dimension()
        obj._nr_iterations = iterations
        obj._update(obj._normalize(obj._as_vector(vector, None)))
        return obj

    def power_iteration(self, vec: Optional[T] = None) -> T:
        """
        Apply the operator to a vector and return the normalized result A*x/|A*x|.
        Defaults to the current Ritz vector.
        """
        vec = self._ritz_vector if vec is None else vec
        check_vector("Vector", vec, self.dim)
        return self._normalize(self._apply(vec))

    def residual(self) -> float:
        """Ritz residual |A*x - l*x| of the current Ritz vector x with Rayleigh quotient l."""
        vec = self._ritz_vector
        image = self._apply(vec)
        return norm(image - inner(vec, image) * vec)

    def has_converged(self, tol: float) -> bool:
        """Whether the Ritz residual of the current Ritz pair is below tol. Does not iterate."""
        return self.residual() < tol

    def compute(
            self,
            max_iterations: Optional[int] = None,
            tol: Optional[float] = None,
            callback: Optional[Callable[[int, float, float], bool]] = None) -> bool:
        """
        Perform power iterations until the Ritz residual is below tol or max_iterations
        iterations are done. Returns whether the Ritz pair converged. Missing arguments are
        taken from the iteration options. The callback receives the iteration count, the
        Ritz value and the Ritz residual after each iteration. Returning True from the
        callback stops the iteration.
        """
        opts = get_options(self.namespace, OptionType.ITERATION)
        max_iterations = opts.max_iterations if max_iterations is None else max_iterations
        tol = opts.tol if tol is None else tol
        check_non_neg("max_iterations", max_iterations)
        check_non_neg("tol", tol)

        if max_iterations == 0:
            return self.has_converged(tol)

        converged = False
        for _ in range(max_iterations):
            self._update(self._normalize(self._image))
            self._nr_iterations += 1

            vec, image = self._ritz_vector, self._image
            residual = norm(image - self._ritz_value * vec)
            converged = residual < tol
            if callback is not None and callback(self._nr_iterations, self._ritz_value, residual):
                break
            if converged:
                break
        return converged

    def eigenvalue(self) -> float:
        return self._ritz_value

    def eigenvector(self) -> T:
        return deepcopy(self._ritz_vector)

    def iterations_performed(self) -> int:
        return self._nr_iterations

    @property
    def namespace(self) -> ArrayNamespace[T]:
        return namespace_of_arrays(self._ritz_vector)

    def _update(self, vec: T) -> None:
        # the image of the Ritz vector is reused by the next iteration
        image = self._apply(vec)
        self._ritz_vector = vec
        self._image = image
        self._ritz_value = inner(vec, image)

    def _apply(self, vec: T) -> T:
        image = self.operator.apply(vec)
        check_vector("Result of the operator", image, self.dim)
        return image

    def _normalize(self, vec: T) -> T:
        xp = namespace_of_arrays(vec)
        val = norm(vec)
        # norms in the underflow range are degenerate
        if not isfinite(val) or not val > smallest_normal(xp, vec.dtype) * self.dim:
            raise DegenerateVector(
                f"Vector norm {val} is numerically zero, restart with another initial vector.")
        return vec / val

    def _as_vector(self, initial: Any, namespace: Optional[Any]) -> T:
        if is_array(initial):
            xp = namespace_of_arrays(initial)
            vec = initial
        else:
            xp = self._namespace(namespace)
            vec = xp.asarray(initial)
        check_vector("Initial vector", vec, self.dim)
        if not xp.isdtype(vec.dtype, "real floating"):
            vec = xp.asarray(vec, dtype=xp.float64)
        return vec

    def _random_vector(self, seed: Optional[int], namespace: Optional[Any]) -> T:
        xp = self._namespace(namespace)
        opts = get_options(xp, OptionType.RANDOM)
        seed = opts.seed if seed is None else seed
        if isinstance(self.operator, ArrayOperator):
            dtype = self.operator.dtype
            if not xp.isdtype(dtype, "real floating"):
                dtype = opts.dtype
            return random_vector(xp, self.dim, dtype=dtype,
                                 device=self.operator.device, seed=seed)
        return random_vector(xp, self.dim, dtype=opts.dtype, seed=seed)

    def _namespace(self, namespace: Optional[Any]) -> ArrayNamespace[T]:
        if namespace is not None:
            return get_namespace(namespace)
        if isinstance(self.operator, ArrayOperator):
            return self.operator.namespace
        return get_namespace(np)
