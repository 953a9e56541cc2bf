# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Literal, Optional, Callable, Any, Type, overload
from dataclasses import dataclass
import h5py

from .backend import ArrayLike, ArrayNamespace, Device, DType, get_namespace
from .linearoperator import Operator
from .matrixoperator import MatrixOperator
from .callableoperator import CallableOperator
from .linearmap import LinearMap
from .randomvector import random_vector as _random_vector
from .powermethod import PowerMethod
from .poweriteration import PowerIteration, PowerIterationResult
from .options import IterationOptions, RandomOptions, OptionType, set_options, get_options
from .io import write as _write
from .io import read as _read

@dataclass(frozen=True)
class SpectralPower[NDArray: Any]:

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

        set_options(self.iteration())
        set_options(self.randomization())

    #-------------------------------------------------------------------------------------------------
    # operators

    def matrix_operator(self, matrix: NDArray) -> MatrixOperator[NDArray]:
        """
        Operator for an explicitly stored square matrix.
        """
        return MatrixOperator(self.namespace.asarray(matrix))

    def callable_operator(
            self,
            dimension: int,
            func: Callable[[NDArray], NDArray],
            dtype: Optional[DType] = None,
            device: Optional[Device] = None) -> CallableOperator[NDArray]:
        """
        Matrix free operator of the given dimension, defined by the matrix-vector product func.
        """
        return CallableOperator(dimension, func, namespace=self.namespace, dtype=dtype, device=device)

    def linear_map(self, eq: str, *ops: int | NDArray) -> LinearMap[NDArray]:
        """
        Operator defined by an einsum expression. One operand has to be the integer dimension
        of the vector, e.g. ``linear_map("ij,j->i", mat, n)``.
        """
        return LinearMap(eq, *ops)

    def random_vector(self, dim: int, seed: Optional[int] = None) -> NDArray:
        """
        Vector with independent entries uniformly drawn from [-1, 1].
        """
        opts = get_options(self.namespace, OptionType.RANDOM)
        seed = opts.seed if seed is None else seed
        return _random_vector(self.namespace, dim, dtype=opts.dtype, seed=seed)

    #-------------------------------------------------------------------------------------------------
    # solvers

    def power_method(
            self,
            operator: Operator[NDArray],
            initial: Optional[NDArray] = None,
            seed: Optional[int] = None) -> PowerMethod[NDArray]:
        """
        Power method for the dominant eigenpair of the operator. Without initial vector a random
        vector is used. One power iteration is performed on construction, further iterations
        are performed by compute.
        """
        return PowerMethod(operator, initial, seed=seed, namespace=self.namespace)

    def power_iteration(self, nsteps: int = 1000, eps: float = 1e-8) -> PowerIteration:
        """
        Power iteration solver, returning the eigenpair together with its convergence history.
        """
        return PowerIteration(nsteps=nsteps, eps=eps)

    #-------------------------------------------------------------------------------------------------
    # options

    def iteration(self, max_iterations: int = 1000, tol: float = 1e-8) -> IterationOptions:
        """
        Default maximum number of iterations and tolerance of PowerMethod.compute.
        """
        return IterationOptions(namespace=self.namespace, max_iterations=max_iterations, tol=tol)

    def randomization(self, seed: Optional[int] = None, dtype: Optional[DType] = None) -> RandomOptions:
        """
        Seed and dtype of random initial vectors.
        """
        return RandomOptions(namespace=self.namespace, seed=seed, dtype=dtype)

    def set_options(self, opts: IterationOptions | RandomOptions) -> None:
        """Set the options for the current thread."""
        set_options(opts)

    @overload
    def get_options(self, otype: Literal[OptionType.ITERATION]) -> IterationOptions: ...
    @overload
    def get_options(self, otype: Literal[OptionType.RANDOM]) -> RandomOptions: ...
    # implementation
    def get_options(self, otype: OptionType) -> Any:
        """Get the options of the current thread."""
        return get_options(self.namespace, otype)

    #-------------------------------------------------------------------------------------------------
    # io

    def write(self, group: h5py.Group, obj: PowerMethod[NDArray] | PowerIterationResult[NDArray]) -> None:
        """
        Write a solver state or a result to a h5py group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[PowerIterationResult]) -> PowerIterationResult[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[PowerMethod], operator: Operator[NDArray]) -> PowerMethod[NDArray]: ...
    # implementation
    def read(self, group: h5py.Group, cls: Any, operator: Optional[Operator[NDArray]] = None) -> Any:
        """
        Read a solver state or a result from a h5py group. Solver states require the operator
        they were computed for.
        """
        if cls == PowerMethod:
            return _read(group, PowerMethod, self.namespace, operator) # type: ignore
        return _read(group, cls, self.namespace)
