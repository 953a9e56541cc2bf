# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional
from dataclasses import dataclass
import time

from .backend import ArrayLike, namespace_of_arrays, size
from .linearoperator import Operator
from .callableoperator import CallableOperator
from .powermethod import PowerMethod
from .utils import check_non_neg

@dataclass(kw_only=True)
class PowerIterationResult[T: ArrayLike]:
    #: Eigenvector
    array: T
    #: Eigenvalue
    value: float
    #: Time taken to compute the eigenvector and eigenvalue.
    time: float
    #: Convergence history of the Ritz residuals at each step.
    residuals: list[float]
    #: Whether the Ritz residual dropped below eps.
    converged: bool
    #: Number of power iterations performed.
    iterations: int

@dataclass
class PowerIteration:
    """
    Power iteration eigenvalue solver for the dominant eigenpair of a linear map.
    """

    #: Maximum number of power iterations
    nsteps: int = 1000

    #: Ritz residual, below which the algorithm is stopped
    eps: float = 1e-8

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("nsteps", "eps"):
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](
            self,
            mat: Operator[T] | Callable[[T], T],
            guess: Optional[T] = None, /,
            seed: Optional[int] = None) -> PowerIterationResult[T]:
        """
        Solve the eigenvalue problem for an operator or a linear map given as function. For
        functions the initial guess is required, as it defines the dimension of the problem.
        Without a guess the iteration starts from a random vector.
        """
        if not isinstance(mat, Operator):
            if guess is None:
                raise ValueError("An initial guess is required if the linear map is a function.")
            mat = CallableOperator(size(guess), mat,
                                   namespace=namespace_of_arrays(guess),
                                   dtype=guess.dtype)

        stamp = time.time()
        method = PowerMethod(mat, guess, seed=seed)

        residuals = []
        def record(_: int, __: float, residual: float) -> bool:
            residuals.append(residual)
            return False
        converged = method.compute(self.nsteps, self.eps, callback=record)

        return PowerIterationResult(array=method.eigenvector(),
                                    value=method.eigenvalue(),
                                    time=time.time() - stamp,
                                    residuals=residuals,
                                    converged=converged,
                                    iterations=method.iterations_performed())
